"""Word, sentence and syllable tokenization for English readability formulas.

The syllable counter is a vowel-group heuristic with silent-e and
consonant+le adjustments. It is not dictionary exact.
"""

from __future__ import annotations

import re

_NON_WORD = re.compile(r"[^A-Za-z0-9_\s']")
_SENTENCE_BREAK = re.compile(r"[.!?]+(?:\s+|\Z)")
_NON_ALPHA_LOWER = re.compile(r"[^a-z]")
_NON_LETTER = re.compile(r"[^A-Za-z]")
_VOWEL_GROUP = re.compile(r"[aeiouy]+")
_VOWELS = frozenset("aeiouy")


def tokenize_words(text: str) -> list[str]:
    """Split *text* into words, keeping apostrophes for contractions."""
    return _NON_WORD.sub(" ", text).split()


def tokenize_sentences(text: str) -> list[str]:
    """Split *text* on runs of ``.``, ``!``, ``?`` followed by whitespace or end of text."""
    return [s for s in _SENTENCE_BREAK.split(text) if s.strip()]


def count_syllables(word: str) -> int:
    """Estimate the syllable count of a single word (always >= 1)."""
    word = word.lower()
    if len(word) <= 3:
        return 1

    word = _NON_ALPHA_LOWER.sub("", word)
    groups = _VOWEL_GROUP.findall(word)
    syllables = len(groups) if groups else 1

    if word.endswith("e"):
        syllables -= 1

    if word.endswith("le") and len(word) > 2 and word[-3] not in _VOWELS:
        syllables += 1

    return max(syllables, 1)


def count_letters(word: str) -> int:
    """Number of ASCII letters in *word*."""
    return len(_NON_LETTER.sub("", word))
