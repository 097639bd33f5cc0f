"""Exception hierarchy for discharge-quality."""

from __future__ import annotations


class DischargeQualityError(Exception):
    """Base exception for all discharge-quality errors."""


class ParserError(DischargeQualityError):
    """Raised when a tenant parser cannot process its input."""


class SectionExtractionError(ParserError):
    """Raised when a section body violates the convention's structural assumptions."""

    def __init__(self, message: str, section_id: str = "") -> None:
        super().__init__(message)
        self.section_id = section_id


class TenantConfigurationError(DischargeQualityError):
    """Raised when a tenant references an unknown or unloadable parser type."""


class PersistenceError(DischargeQualityError):
    """Raised when a persistence backend operation fails."""


class ConfigurationError(DischargeQualityError, ValueError):
    """Raised by startup validation on fatal misconfiguration."""


__all__ = [
    "DischargeQualityError",
    "ParserError",
    "SectionExtractionError",
    "TenantConfigurationError",
    "PersistenceError",
    "ConfigurationError",
]
