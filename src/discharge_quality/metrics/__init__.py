"""Readability metrics engine.

- ``calculate_quality_metrics``: full metrics record for a simplification
- ``meets_simplification_target``: pass/fail against reading-level targets
- ``QualityMetricsStore``: persist and fetch records by composition id
"""

from __future__ import annotations

from discharge_quality.metrics.engine import (
    calculate_quality_metrics,
    interpret_flesch_kincaid_grade,
    interpret_flesch_reading_ease,
    meets_simplification_target,
)
from discharge_quality.metrics.models import (
    KeyQualityMetrics,
    LexicalMetrics,
    MetricsMetadata,
    QualityMetrics,
    ReadabilityMetrics,
    SimplificationMetrics,
    TargetCheck,
)
from discharge_quality.metrics.store import QualityMetricsStore, StoredQualityMetrics

__all__ = [
    "calculate_quality_metrics",
    "interpret_flesch_kincaid_grade",
    "interpret_flesch_reading_ease",
    "meets_simplification_target",
    "KeyQualityMetrics",
    "LexicalMetrics",
    "MetricsMetadata",
    "QualityMetrics",
    "ReadabilityMetrics",
    "SimplificationMetrics",
    "TargetCheck",
    "QualityMetricsStore",
    "StoredQualityMetrics",
]
