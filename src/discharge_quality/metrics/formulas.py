"""Readability formulas over pre-computed text statistics.

Every function is total: zero words or sentences yield 0 instead of raising,
and scores are floored at 0 (reading ease is also capped at 100).
"""

from __future__ import annotations

import math

# SMOG is defined over a 30-sentence sample; shorter texts are scaled up.
SMOG_SAMPLE_SENTENCES = 30


def flesch_reading_ease(words: int, sentences: int, syllables: int) -> float:
    """206.835 - 1.015 * (words/sentences) - 84.6 * (syllables/words), clamped to [0, 100].

    90-100 very easy (5th grade), 60-70 standard (8th-9th grade),
    below 30 very difficult.
    """
    if sentences == 0 or words == 0:
        return 0.0
    score = 206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words)
    return max(0.0, min(100.0, score))


def flesch_kincaid_grade_level(words: int, sentences: int, syllables: int) -> float:
    """0.39 * (words/sentences) + 11.8 * (syllables/words) - 15.59, as a U.S. grade."""
    if sentences == 0 or words == 0:
        return 0.0
    grade = 0.39 * (words / sentences) + 11.8 * (syllables / words) - 15.59
    return max(0.0, grade)


def smog_index(words: int, sentences: int, polysyllables: int) -> float:
    """1.0430 * sqrt(polysyllables * 30 / sentences) + 3.1291.

    Text with no words scores 0 rather than the bare 3.1291 intercept.
    """
    if words == 0 or sentences == 0:
        return 0.0
    if sentences >= SMOG_SAMPLE_SENTENCES:
        adjusted = float(polysyllables)
    else:
        adjusted = polysyllables * (SMOG_SAMPLE_SENTENCES / sentences)
    return max(0.0, 1.0430 * math.sqrt(adjusted) + 3.1291)


def coleman_liau_index(words: int, sentences: int, letters: int) -> float:
    """0.0588 * L - 0.296 * S - 15.8 with L, S per 100 words."""
    if words == 0:
        return 0.0
    letters_per_100 = letters / words * 100
    sentences_per_100 = sentences / words * 100
    return max(0.0, 0.0588 * letters_per_100 - 0.296 * sentences_per_100 - 15.8)


def automated_readability_index(words: int, sentences: int, characters: int) -> float:
    """4.71 * (characters/words) + 0.5 * (words/sentences) - 21.43."""
    if words == 0 or sentences == 0:
        return 0.0
    ari = 4.71 * (characters / words) + 0.5 * (words / sentences) - 21.43
    return max(0.0, ari)


def type_token_ratio(words: list[str]) -> float:
    """Unique lowercased words over total words."""
    if not words:
        return 0.0
    return len({w.lower() for w in words}) / len(words)


def round_metric(value: float) -> float:
    """Round to one decimal place, halves rounding up."""
    return math.floor(value * 10 + 0.5) / 10
