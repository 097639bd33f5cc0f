"""Readability and simplification metrics for an (original, simplified) text pair.

Pure computation: no I/O, no shared state, and no exceptions for any string
input. Degenerate inputs (empty or all-punctuation text) produce zeroed
metrics through the guards in :mod:`discharge_quality.metrics.formulas`.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from discharge_quality.core.config import TargetConfig
from discharge_quality.metrics import formulas
from discharge_quality.metrics.formulas import round_metric
from discharge_quality.metrics.models import (
    LexicalMetrics,
    MetricsMetadata,
    QualityMetrics,
    ReadabilityMetrics,
    SimplificationMetrics,
    TargetCheck,
)
from discharge_quality.metrics.text import (
    count_letters,
    count_syllables,
    tokenize_sentences,
    tokenize_words,
)

log = logging.getLogger(__name__)

COMPLEX_WORD_SYLLABLES = 3


def calculate_quality_metrics(
    original_text: str,
    simplified_text: str,
    *,
    calculated_at: Optional[datetime] = None,
) -> QualityMetrics:
    """Compute the full :class:`QualityMetrics` record for a simplification.

    Args:
        original_text: The source clinical text.
        simplified_text: The patient-facing rewrite being scored.
        calculated_at: Timestamp to stamp on the record; defaults to now (UTC).
    """
    original_words = tokenize_words(original_text)
    simplified_words = tokenize_words(simplified_text)
    sentences = tokenize_sentences(simplified_text)

    total_syllables = 0
    total_letters = 0
    total_characters = 0
    complex_words = 0
    for word in simplified_words:
        syllables = count_syllables(word)
        total_syllables += syllables
        total_letters += count_letters(word)
        total_characters += len(word)
        if syllables >= COMPLEX_WORD_SYLLABLES:
            complex_words += 1

    word_count = len(simplified_words)
    sentence_count = len(sentences) or 1

    readability = ReadabilityMetrics(
        flesch_kincaid_grade_level=round_metric(
            formulas.flesch_kincaid_grade_level(word_count, sentence_count, total_syllables)
        ),
        flesch_reading_ease=round_metric(
            formulas.flesch_reading_ease(word_count, sentence_count, total_syllables)
        ),
        smog_index=round_metric(formulas.smog_index(word_count, sentence_count, complex_words)),
        coleman_liau_index=round_metric(
            formulas.coleman_liau_index(word_count, sentence_count, total_letters)
        ),
        automated_readability_index=round_metric(
            formulas.automated_readability_index(word_count, sentence_count, total_characters)
        ),
    )

    original_sentence_count = len(tokenize_sentences(original_text)) or 1
    original_avg_sentence_length = len(original_words) / original_sentence_count
    simplified_avg_sentence_length = word_count / sentence_count

    if original_avg_sentence_length:
        sentence_length_reduction = (
            (original_avg_sentence_length - simplified_avg_sentence_length)
            / original_avg_sentence_length
            * 100
        )
    else:
        sentence_length_reduction = 0.0

    if original_words:
        compression_ratio = (len(original_words) - word_count) / len(original_words) * 100
    else:
        compression_ratio = 0.0

    avg_word_length = total_characters / word_count if word_count else 0.0

    simplification = SimplificationMetrics(
        compression_ratio=round_metric(compression_ratio),
        sentence_length_reduction=round_metric(sentence_length_reduction),
        avg_sentence_length=round_metric(simplified_avg_sentence_length),
        avg_word_length=round_metric(avg_word_length),
    )

    lexical = LexicalMetrics(
        type_token_ratio=round_metric(formulas.type_token_ratio(simplified_words)),
        word_count=word_count,
        sentence_count=sentence_count,
        syllable_count=total_syllables,
        complex_word_count=complex_words,
    )

    metadata = MetricsMetadata(
        calculated_at=calculated_at or datetime.now(timezone.utc),
        original_word_count=len(original_words),
        simplified_word_count=word_count,
    )

    log.debug(
        "Calculated quality metrics: %d words, %d sentences, grade %.1f",
        word_count,
        sentence_count,
        readability.flesch_kincaid_grade_level,
    )

    return QualityMetrics(
        readability=readability,
        simplification=simplification,
        lexical=lexical,
        metadata=metadata,
    )


def meets_simplification_target(
    metrics: QualityMetrics,
    targets: Optional[TargetConfig] = None,
) -> TargetCheck:
    """Check *metrics* against the simplification targets.

    Each threshold is evaluated independently and contributes its own reason;
    the text meets the target only when every check passes.
    """
    targets = targets or TargetConfig()
    readability = metrics.readability
    reasons: list[str] = []

    if readability.flesch_kincaid_grade_level > targets.max_grade_level:
        reasons.append(
            f"Grade level too high ({readability.flesch_kincaid_grade_level:.1f} "
            f"> {targets.max_grade_level:.1f})"
        )

    if readability.flesch_reading_ease < targets.min_reading_ease:
        reasons.append(
            f"Reading ease too low ({readability.flesch_reading_ease:.1f} "
            f"< {targets.min_reading_ease:g})"
        )

    if readability.smog_index > targets.max_smog_index:
        reasons.append(
            f"SMOG index too high ({readability.smog_index:.1f} > {targets.max_smog_index:.1f})"
        )

    avg_sentence_length = metrics.simplification.avg_sentence_length
    if avg_sentence_length > targets.max_avg_sentence_length:
        reasons.append(
            f"Sentences too long ({avg_sentence_length:.1f} "
            f"> {targets.max_avg_sentence_length:g} words)"
        )

    return TargetCheck(meets_target=not reasons, reasons=reasons)


def interpret_flesch_kincaid_grade(grade: float) -> str:
    """Human-readable band for a Flesch-Kincaid grade level."""
    if grade <= 5:
        return "Elementary (5th grade or below)"
    if grade <= 8:
        return "Middle School (6th-8th grade)"
    if grade <= 10:
        return "High School (9th-10th grade)"
    if grade <= 12:
        return "High School (11th-12th grade)"
    if grade <= 16:
        return "College level"
    return "Graduate level"


def interpret_flesch_reading_ease(score: float) -> str:
    """Human-readable band for a Flesch Reading Ease score."""
    if score >= 90:
        return "Very Easy (5th grade)"
    if score >= 80:
        return "Easy (6th grade)"
    if score >= 70:
        return "Fairly Easy (7th grade)"
    if score >= 60:
        return "Standard (8th-9th grade)"
    if score >= 50:
        return "Fairly Difficult (10th-12th grade)"
    if score >= 30:
        return "Difficult (College)"
    return "Very Difficult (Graduate)"
