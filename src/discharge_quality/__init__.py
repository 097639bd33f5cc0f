"""discharge-quality: readability metrics and tenant-aware discharge document parsing.

::

    from discharge_quality import (
        calculate_quality_metrics, meets_simplification_target,
        build_registry, Parsed, NotParsed,
    )

    metrics = calculate_quality_metrics(original, simplified)
    check = meets_simplification_target(metrics)

    registry = build_registry()
    outcome = registry.parse_discharge_document("demo", summary_text, instructions_text)
"""

from __future__ import annotations

from discharge_quality.core.config import AppSettings
from discharge_quality.exceptions import (
    DischargeQualityError,
    ParserError,
    PersistenceError,
    SectionExtractionError,
    TenantConfigurationError,
)
from discharge_quality.metrics import (
    KeyQualityMetrics,
    QualityMetrics,
    QualityMetricsStore,
    TargetCheck,
    calculate_quality_metrics,
    interpret_flesch_kincaid_grade,
    interpret_flesch_reading_ease,
    meets_simplification_target,
)
from discharge_quality.parsers import (
    NotParsed,
    Parsed,
    ParsedDischargeInstructions,
    ParsedDischargeSummary,
    ParseOutcome,
    ParserRegistry,
    build_registry,
)

__version__ = "0.1.0"

__all__ = [
    "AppSettings",
    "DischargeQualityError",
    "ParserError",
    "PersistenceError",
    "SectionExtractionError",
    "TenantConfigurationError",
    "KeyQualityMetrics",
    "QualityMetrics",
    "QualityMetricsStore",
    "TargetCheck",
    "calculate_quality_metrics",
    "interpret_flesch_kincaid_grade",
    "interpret_flesch_reading_ease",
    "meets_simplification_target",
    "NotParsed",
    "Parsed",
    "ParsedDischargeInstructions",
    "ParsedDischargeSummary",
    "ParseOutcome",
    "ParserRegistry",
    "build_registry",
]
