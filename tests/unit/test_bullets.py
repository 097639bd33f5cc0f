"""Tests for bullet-list tokenization."""

from __future__ import annotations

from discharge_quality.parsers.bullets import extract_bullet_points, extract_intro_and_bullets


class TestExtractBulletPoints:
    def test_round_bullets(self) -> None:
        text = "● Item one\n● Item two\n● Item three"
        assert extract_bullet_points(text) == ["Item one", "Item two", "Item three"]

    def test_mixed_markers(self) -> None:
        text = "• Rest\n- Drink fluids\n• Walk daily"
        assert extract_bullet_points(text) == ["Rest", "Drink fluids", "Walk daily"]

    def test_inline_asterisks(self) -> None:
        text = " * PCI to RCA * Started aspirin * Discharged home"
        assert extract_bullet_points(text) == ["PCI to RCA", "Started aspirin", "Discharged home"]

    def test_inline_asterisks_drop_subheader_tokens(self) -> None:
        text = "* New: * Aspirin * Continued * Metformin"
        assert extract_bullet_points(text) == ["Aspirin", "Metformin"]

    def test_continuation_lines_fold_into_previous_item(self) -> None:
        text = "● Started on dual antiplatelet therapy\n  and high-intensity   statin\n● Echo"
        assert extract_bullet_points(text) == [
            "Started on dual antiplatelet therapy and high-intensity statin",
            "Echo",
        ]

    def test_leading_prose_becomes_first_item(self) -> None:
        assert extract_bullet_points("Stable\n● Ambulating") == ["Stable", "Ambulating"]

    def test_subheader_labels_skipped(self) -> None:
        text = "New:\n● Aspirin\nStopped:\n● Ibuprofen"
        assert extract_bullet_points(text) == ["Aspirin", "Ibuprofen"]

    def test_empty(self) -> None:
        assert extract_bullet_points("") == []
        assert extract_bullet_points("\n  \n") == []


class TestExtractIntroAndBullets:
    def test_intro_then_bullets(self) -> None:
        text = "Go to the emergency room if you have:\n● Chest pain\n● Fainting"
        assert extract_intro_and_bullets(text) == [
            "Go to the emergency room if you have:",
            "Chest pain",
            "Fainting",
        ]

    def test_short_intro_dropped(self) -> None:
        assert extract_intro_and_bullets("Call:\n● Fever") == ["Fever"]

    def test_dash_bullets_end_intro(self) -> None:
        text = "Seek care right away for:\n- Bleeding\n- Swelling"
        assert extract_intro_and_bullets(text) == [
            "Seek care right away for:",
            "Bleeding",
            "Swelling",
        ]

    def test_intro_with_asterisks_treated_as_bullets(self) -> None:
        text = "Watch for * Fever * Chills"
        assert extract_intro_and_bullets(text) == ["Watch for", "Fever", "Chills"]

    def test_return_to_line_ends_intro(self) -> None:
        text = "Warning signs are listed below.\nReturn to the ER for chest pain"
        assert extract_intro_and_bullets(text) == [
            "Warning signs are listed below.",
            "Return to the ER for chest pain",
        ]

    def test_plain_paragraph(self) -> None:
        text = "Call 911 if your symptoms get worse."
        assert extract_intro_and_bullets(text) == ["Call 911 if your symptoms get worse."]
