"""Configuration, logging and startup checks shared by every component."""
