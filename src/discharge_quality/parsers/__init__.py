"""Tenant-aware discharge document parsing.

- ``ConventionParser``: rule-based extractor driven by a ``TenantConvention``
- ``ParserRegistry`` / ``build_registry``: tenant wiring and dispatch
- ``Parsed`` / ``NotParsed``: the dispatch outcome
"""

from __future__ import annotations

from discharge_quality.parsers.base import (
    ConventionParser,
    DischargeParser,
    DocumentConvention,
    SectionKind,
    SectionRule,
    TenantConvention,
)
from discharge_quality.parsers.bullets import extract_bullet_points
from discharge_quality.parsers.models import (
    MedicationDispositions,
    NotParsed,
    NotParsedReason,
    ParsedDischargeInstructions,
    ParsedDischargeSummary,
    Parsed,
    ParseOutcome,
)
from discharge_quality.parsers.registry import (
    ParserManifest,
    ParserRegistry,
    TenantParserConfig,
    build_registry,
)

__all__ = [
    "ConventionParser",
    "DischargeParser",
    "DocumentConvention",
    "SectionKind",
    "SectionRule",
    "TenantConvention",
    "extract_bullet_points",
    "MedicationDispositions",
    "NotParsed",
    "NotParsedReason",
    "ParsedDischargeInstructions",
    "ParsedDischargeSummary",
    "Parsed",
    "ParseOutcome",
    "ParserManifest",
    "ParserRegistry",
    "TenantParserConfig",
    "build_registry",
]
