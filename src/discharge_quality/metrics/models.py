"""Pydantic value objects produced by the readability metrics engine.

Field names are snake_case in Python and serialize to the camelCase keys the
platform stores and displays (``model_dump(by_alias=True)``).
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _MetricsModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ReadabilityMetrics(_MetricsModel):
    """Readability formula scores for the simplified text."""

    flesch_kincaid_grade_level: float = Field(default=0.0, ge=0.0)
    flesch_reading_ease: float = Field(default=0.0, ge=0.0, le=100.0)
    smog_index: float = Field(default=0.0, ge=0.0)
    coleman_liau_index: float = Field(default=0.0, ge=0.0)
    automated_readability_index: float = Field(default=0.0, ge=0.0)


class SimplificationMetrics(_MetricsModel):
    """How the simplified text compares to the original."""

    compression_ratio: float = 0.0  # negative when the simplified text is longer
    sentence_length_reduction: float = 0.0
    avg_sentence_length: float = Field(default=0.0, ge=0.0)
    avg_word_length: float = Field(default=0.0, ge=0.0)


class LexicalMetrics(_MetricsModel):
    """Token-level counts for the simplified text."""

    type_token_ratio: float = Field(default=0.0, ge=0.0, le=1.0)
    word_count: int = Field(default=0, ge=0)
    sentence_count: int = Field(default=1, ge=1)
    syllable_count: int = Field(default=0, ge=0)
    complex_word_count: int = Field(default=0, ge=0)


class MetricsMetadata(_MetricsModel):
    calculated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    original_word_count: int = Field(default=0, ge=0)
    simplified_word_count: int = Field(default=0, ge=0)


class QualityMetrics(_MetricsModel):
    """Full metrics record for one (original, simplified) text pair."""

    readability: ReadabilityMetrics
    simplification: SimplificationMetrics
    lexical: LexicalMetrics
    metadata: MetricsMetadata


class KeyQualityMetrics(_MetricsModel):
    """The headline metrics shown alongside a simplified document."""

    flesch_kincaid_grade_level: float = 0.0
    flesch_reading_ease: float = 0.0
    smog_index: float = 0.0
    compression_ratio: float = 0.0
    avg_sentence_length: float = 0.0

    @classmethod
    def from_metrics(cls, metrics: QualityMetrics) -> KeyQualityMetrics:
        return cls(
            flesch_kincaid_grade_level=metrics.readability.flesch_kincaid_grade_level,
            flesch_reading_ease=metrics.readability.flesch_reading_ease,
            smog_index=metrics.readability.smog_index,
            compression_ratio=metrics.simplification.compression_ratio,
            avg_sentence_length=metrics.simplification.avg_sentence_length,
        )


class TargetCheck(_MetricsModel):
    """Outcome of checking metrics against the simplification targets."""

    meets_target: bool
    reasons: list[str] = Field(default_factory=list)
