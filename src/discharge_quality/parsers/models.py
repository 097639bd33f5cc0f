"""Pydantic value objects produced by tenant discharge parsers.

Every list field defaults to empty: a section missing from the source text is
a gap worth reporting, not an error.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ParsedModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def empty_sections(self) -> list[str]:
        """Names of sections that came back with no items, in field order."""
        empty = []
        for name in type(self).model_fields:
            value = getattr(self, name)
            if isinstance(value, _ParsedModel):
                is_empty = len(value.empty_sections()) == len(type(value).model_fields)
            else:
                is_empty = not value
            if is_empty:
                empty.append(name)
        return empty


class ParsedDischargeSummary(_ParsedModel):
    """Diagnoses and course of stay, one string per bullet in document order."""

    admitting_diagnosis: list[str] = Field(default_factory=list)
    discharge_diagnosis: list[str] = Field(default_factory=list)
    hospital_course: list[str] = Field(default_factory=list)
    pertinent_results: list[str] = Field(default_factory=list)
    condition_at_discharge: list[str] = Field(default_factory=list)


class MedicationDispositions(_ParsedModel):
    """Discharge medications grouped by what happens to them at discharge."""

    new: list[str] = Field(default_factory=list)
    continued: list[str] = Field(default_factory=list)
    stopped: list[str] = Field(default_factory=list)


class ParsedDischargeInstructions(_ParsedModel):
    discharge_medications: MedicationDispositions = Field(default_factory=MedicationDispositions)
    follow_up_appointments: list[str] = Field(default_factory=list)
    diet_and_lifestyle: list[str] = Field(default_factory=list)
    patient_instructions: list[str] = Field(default_factory=list)  # at most one paragraph
    return_precautions: list[str] = Field(default_factory=list)


# ── Dispatch outcome ─────────────────────────────────────────────────


class NotParsedReason(str, Enum):
    """Why a document was left in its raw form."""

    NO_PARSERS = "no_parsers"
    NO_MATCH = "no_match"
    PARSER_FAILED = "parser_failed"


class Parsed(BaseModel):
    """A tenant parser recognized and extracted the document."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["parsed"] = "parsed"
    parser_type: str
    summary: ParsedDischargeSummary
    instructions: ParsedDischargeInstructions
    warnings: list[str] = Field(default_factory=list)

    @property
    def parser_used(self) -> bool:
        return True

    def to_result(self) -> dict[str, Any]:
        return {
            "parserUsed": True,
            "parsedSummary": self.summary.model_dump(by_alias=True),
            "parsedInstructions": self.instructions.model_dump(by_alias=True),
        }


class NotParsed(BaseModel):
    """No parser produced a structured record; callers fall back to raw text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["not_parsed"] = "not_parsed"
    reason: NotParsedReason
    detail: str = ""

    @property
    def parser_used(self) -> bool:
        return False

    def to_result(self) -> dict[str, Any]:
        return {
            "parserUsed": False,
            "parsedSummary": None,
            "parsedInstructions": None,
        }


ParseOutcome = Union[Parsed, NotParsed]
