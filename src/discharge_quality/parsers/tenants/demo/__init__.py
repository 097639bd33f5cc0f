"""Demo tenant parser."""

from __future__ import annotations

from discharge_quality.parsers.tenants.demo.parser import DEMO_CONVENTION, DemoParser

__all__ = ["DEMO_CONVENTION", "DemoParser"]
