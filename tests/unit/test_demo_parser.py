"""Tests for the demo tenant discharge parser."""

from __future__ import annotations

import pytest

from discharge_quality.exceptions import (
    ParserError,
    SectionExtractionError,
    TenantConfigurationError,
)
from discharge_quality.parsers import (
    ConventionParser,
    DischargeParser,
    MedicationDispositions,
    TenantConvention,
)
from discharge_quality.parsers.base import _HANDLERS, SectionKind
from discharge_quality.parsers.tenants.demo import DEMO_CONVENTION, DemoParser


@pytest.fixture
def parser() -> DemoParser:
    return DemoParser()


class TestCanParse:
    def test_recognizes_demo_summary(self, parser: DemoParser, demo_summary: str) -> None:
        assert parser.can_parse(demo_summary) is True

    def test_tolerates_casing_and_spacing(self, parser: DemoParser) -> None:
        text = "ADMITTING   DIAGNOSIS\nDischarge\tDiagnosis\nhospital course"
        assert parser.can_parse(text) is True

    def test_requires_every_anchor(self, parser: DemoParser) -> None:
        assert parser.can_parse("Admitting Diagnosis:\nDischarge Diagnosis:\n") is False

    @pytest.mark.parametrize("value", [None, 42, b"Admitting Diagnosis"])
    def test_non_string_input(self, parser: DemoParser, value) -> None:
        assert parser.can_parse(value) is False

    def test_satisfies_parser_protocol(self, parser: DemoParser) -> None:
        assert isinstance(parser, DischargeParser)
        assert parser.parser_type == "demo"


class TestParseDischargeSummary:
    def test_all_sections(self, parser: DemoParser, demo_summary: str) -> None:
        summary = parser.parse_discharge_summary(demo_summary)

        assert summary.admitting_diagnosis == ["Chest pain", "Shortness of breath"]
        assert summary.discharge_diagnosis == ["Acute inferior STEMI", "Hypertension"]
        assert summary.hospital_course == [
            "Underwent PCI with stent to the right coronary artery",
            "Started on dual antiplatelet therapy and high-intensity statin",
        ]
        assert summary.pertinent_results == [
            "Troponin peak 45 ng/mL",
            "LVEF 50% on echocardiogram",
        ]
        assert summary.condition_at_discharge == ["Stable, ambulating independently"]

    def test_deterministic(self, parser: DemoParser, demo_summary: str) -> None:
        first = parser.parse_discharge_summary(demo_summary)
        second = DemoParser().parse_discharge_summary(demo_summary)
        assert first == second
        assert first == parser.parse_discharge_summary(demo_summary)

    def test_missing_section_is_empty(self, parser: DemoParser) -> None:
        text = (
            "Admitting Diagnosis:\n● Syncope\n"
            "Discharge Diagnosis:\n● Vasovagal syncope\n"
            "Hospital Course:\n● Observed on telemetry\n"
        )
        summary = parser.parse_discharge_summary(text)
        assert summary.pertinent_results == []
        assert summary.condition_at_discharge == []
        assert summary.hospital_course == ["Observed on telemetry"]
        assert summary.empty_sections() == ["pertinent_results", "condition_at_discharge"]

    def test_markdown_headings(self, parser: DemoParser) -> None:
        text = (
            "## **Admitting Diagnosis:**\n* Chest pain\n* Dyspnea\n\n"
            "## **Discharge Diagnosis:**\n* NSTEMI\n\n"
            "## **Hospital Course:**\n* Cardiac catheterization without intervention\n"
        )
        summary = parser.parse_discharge_summary(text)
        assert summary.admitting_diagnosis == ["Chest pain", "Dyspnea"]
        assert summary.discharge_diagnosis == ["NSTEMI"]
        assert summary.hospital_course == ["Cardiac catheterization without intervention"]

    def test_escaped_markdown(self, parser: DemoParser) -> None:
        text = (
            "Admitting Diagnosis:\n\\- Chest pain\n"
            "Discharge Diagnosis:\n\\- NSTEMI\n"
            "Hospital Course:\n\\- Cath \\(no stent\\)\n"
        )
        summary = parser.parse_discharge_summary(text)
        assert summary.admitting_diagnosis == ["Chest pain"]
        assert summary.hospital_course == ["Cath (no stent)"]

    def test_inline_asterisk_bullets(self, parser: DemoParser) -> None:
        text = "Hospital Course: * PCI to RCA * Started aspirin * Discharged home"
        summary = parser.parse_discharge_summary(text)
        assert summary.hospital_course == ["PCI to RCA", "Started aspirin", "Discharged home"]

    def test_export_annotation_removed(self, parser: DemoParser) -> None:
        text = (
            "Hospital Course:\n● PCI with stent\n"
            "1/15/2025, 3:04 PM discharge.md file:///tmp/discharge.md 1/2\n"
            "● Discharged home\n"
        )
        summary = parser.parse_discharge_summary(text)
        assert summary.hospital_course == ["PCI with stent", "Discharged home"]

    def test_instructions_appended_to_summary_are_ignored(self, parser: DemoParser) -> None:
        text = "Condition at Discharge:\n● Stable\nDischarge Medications:\nNew: ● Aspirin"
        summary = parser.parse_discharge_summary(text)
        assert summary.condition_at_discharge == ["Stable"]

    def test_rejects_non_string(self, parser: DemoParser) -> None:
        with pytest.raises(ParserError):
            parser.parse_discharge_summary(None)

    def test_headers_only(self, parser: DemoParser) -> None:
        summary = parser.parse_discharge_summary(
            "Admitting Diagnosis:\nDischarge Diagnosis:\nHospital Course:\n"
        )
        assert summary.admitting_diagnosis == []
        assert summary.hospital_course == []


class TestParseDischargeInstructions:
    def test_all_sections(self, parser: DemoParser, demo_instructions: str) -> None:
        instructions = parser.parse_discharge_instructions(demo_instructions)

        assert instructions.discharge_medications == MedicationDispositions(
            new=["Aspirin 81 mg daily", "Ticagrelor 90 mg twice daily"],
            continued=["Metformin 500 mg twice daily"],
            stopped=["Ibuprofen"],
        )
        assert instructions.follow_up_appointments == [
            "Cardiology clinic in 1 week",
            "Primary care in 2 weeks",
        ]
        assert instructions.diet_and_lifestyle == [
            "Low-sodium, heart-healthy diet",
            "No heavy lifting for 2 weeks",
        ]
        assert instructions.patient_instructions == [
            "Take your medicines every day. Call the clinic if you have questions."
        ]
        assert instructions.return_precautions == [
            "Go to the emergency room right away if you have:",
            "Chest pain",
            "Trouble breathing",
        ]
        assert instructions.empty_sections() == []

    def test_inline_medication_dispositions(self, parser: DemoParser) -> None:
        text = (
            "Discharge Medications:\n"
            "New: ● Aspirin\n"
            "Continued: ● Metformin\n"
            "Stopped: ● Lisinopril"
        )
        meds = parser.parse_discharge_instructions(text).discharge_medications
        assert meds.new == ["Aspirin"]
        assert meds.continued == ["Metformin"]
        assert meds.stopped == ["Lisinopril"]

    def test_missing_disposition_group(self, parser: DemoParser) -> None:
        text = "Discharge Medications:\nNew:\n● Apixaban 5 mg twice daily\n"
        meds = parser.parse_discharge_instructions(text).discharge_medications
        assert meds.new == ["Apixaban 5 mg twice daily"]
        assert meds.continued == []
        assert meds.stopped == []

    def test_header_variants(self, parser: DemoParser) -> None:
        text = (
            "Followup Appointments:\n● PCP in 1 week\n"
            "Diet and Lifestyle:\n● Walk daily\n"
            "Patient Instructions (Plain Language):\nRest at home.\n"
        )
        instructions = parser.parse_discharge_instructions(text)
        assert instructions.follow_up_appointments == ["PCP in 1 week"]
        assert instructions.diet_and_lifestyle == ["Walk daily"]
        assert instructions.patient_instructions == ["Rest at home."]

    def test_empty_document(self, parser: DemoParser) -> None:
        instructions = parser.parse_discharge_instructions("")
        assert "discharge_medications" in instructions.empty_sections()
        assert len(instructions.empty_sections()) == 5


def test_every_section_kind_has_a_handler() -> None:
    assert set(_HANDLERS) == set(SectionKind)


class TestSettings:
    def test_required_section_missing(self) -> None:
        parser = DemoParser(settings={"required_sections": ["pertinent_results"]})
        text = "Admitting Diagnosis:\n● Syncope\nDischarge Diagnosis:\n● Syncope\nHospital Course:\n● Rest\n"

        with pytest.raises(SectionExtractionError) as exc_info:
            parser.parse_discharge_summary(text)
        assert exc_info.value.section_id == "pertinent_results"

    def test_required_section_present(self, demo_summary: str) -> None:
        parser = DemoParser(settings={"required_sections": ["pertinent_results"]})
        assert parser.parse_discharge_summary(demo_summary).pertinent_results

    def test_unknown_disposition_label_rejected(self) -> None:
        class HeldLabelParser(ConventionParser):
            parser_type = "held"
            convention = TenantConvention(
                detection_anchors=DEMO_CONVENTION.detection_anchors,
                summary=DEMO_CONVENTION.summary,
                instructions=DEMO_CONVENTION.instructions,
                disposition_labels=("New", "Held"),
            )

        with pytest.raises(TenantConfigurationError, match="held"):
            HeldLabelParser()
