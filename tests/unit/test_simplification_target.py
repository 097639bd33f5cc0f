"""Tests for the simplification target check and score interpretation."""

from __future__ import annotations

import pytest

from discharge_quality.core.config import TargetConfig
from discharge_quality.metrics import (
    LexicalMetrics,
    MetricsMetadata,
    QualityMetrics,
    ReadabilityMetrics,
    SimplificationMetrics,
    interpret_flesch_kincaid_grade,
    interpret_flesch_reading_ease,
    meets_simplification_target,
)


def _metrics(
    grade: float = 5.0,
    ease: float = 80.0,
    smog: float = 6.0,
    avg_sentence_length: float = 10.0,
) -> QualityMetrics:
    return QualityMetrics(
        readability=ReadabilityMetrics(
            flesch_kincaid_grade_level=grade,
            flesch_reading_ease=ease,
            smog_index=smog,
        ),
        simplification=SimplificationMetrics(avg_sentence_length=avg_sentence_length),
        lexical=LexicalMetrics(),
        metadata=MetricsMetadata(),
    )


class TestMeetsSimplificationTarget:
    def test_passes_easy_text(self) -> None:
        check = meets_simplification_target(_metrics())
        assert check.meets_target is True
        assert check.reasons == []

    def test_thresholds_are_inclusive(self) -> None:
        check = meets_simplification_target(
            _metrics(grade=9.0, ease=60.0, smog=9.0, avg_sentence_length=20.0)
        )
        assert check.meets_target is True

    def test_grade_level(self) -> None:
        check = meets_simplification_target(_metrics(grade=9.4))
        assert check.meets_target is False
        assert check.reasons == ["Grade level too high (9.4 > 9.0)"]

    def test_reading_ease(self) -> None:
        check = meets_simplification_target(_metrics(ease=55.2))
        assert check.reasons == ["Reading ease too low (55.2 < 60)"]

    def test_smog(self) -> None:
        check = meets_simplification_target(_metrics(smog=9.8))
        assert check.reasons == ["SMOG index too high (9.8 > 9.0)"]

    def test_sentence_length(self) -> None:
        check = meets_simplification_target(_metrics(avg_sentence_length=24.0))
        assert check.reasons == ["Sentences too long (24.0 > 20 words)"]

    def test_every_failure_reported(self) -> None:
        check = meets_simplification_target(
            _metrics(grade=12.0, ease=30.0, smog=14.0, avg_sentence_length=30.0)
        )
        assert check.meets_target is False
        assert len(check.reasons) == 4
        assert check.reasons[0].startswith("Grade level")
        assert check.reasons[3].startswith("Sentences too long")

    def test_custom_targets(self) -> None:
        targets = TargetConfig(max_grade_level=8.0, min_reading_ease=70.0)
        check = meets_simplification_target(_metrics(grade=8.5, ease=75.0), targets)
        assert check.reasons == ["Grade level too high (8.5 > 8.0)"]

    def test_serializes_camel_case(self) -> None:
        dumped = meets_simplification_target(_metrics(grade=10.0)).model_dump(by_alias=True)
        assert dumped == {"meetsTarget": False, "reasons": ["Grade level too high (10.0 > 9.0)"]}


class TestInterpretation:
    @pytest.mark.parametrize(
        ("grade", "band"),
        [
            (0.0, "Elementary (5th grade or below)"),
            (5.0, "Elementary (5th grade or below)"),
            (5.1, "Middle School (6th-8th grade)"),
            (8.0, "Middle School (6th-8th grade)"),
            (9.5, "High School (9th-10th grade)"),
            (11.0, "High School (11th-12th grade)"),
            (14.2, "College level"),
            (17.0, "Graduate level"),
        ],
    )
    def test_grade_bands(self, grade: float, band: str) -> None:
        assert interpret_flesch_kincaid_grade(grade) == band

    @pytest.mark.parametrize(
        ("score", "band"),
        [
            (100.0, "Very Easy (5th grade)"),
            (90.0, "Very Easy (5th grade)"),
            (85.0, "Easy (6th grade)"),
            (72.3, "Fairly Easy (7th grade)"),
            (60.0, "Standard (8th-9th grade)"),
            (55.0, "Fairly Difficult (10th-12th grade)"),
            (30.0, "Difficult (College)"),
            (12.5, "Very Difficult (Graduate)"),
        ],
    )
    def test_reading_ease_bands(self, score: float, band: str) -> None:
        assert interpret_flesch_reading_ease(score) == band
