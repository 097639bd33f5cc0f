"""Tenant parser contract and the convention-driven base implementation.

A tenant's document convention is pure data: which headers must be present
for the parser to claim a document, and the ordered sections of the summary
and instructions documents. :class:`ConventionParser` turns that data into
the three parser operations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Pattern, Protocol, runtime_checkable

from discharge_quality.exceptions import (
    ParserError,
    SectionExtractionError,
    TenantConfigurationError,
)
from discharge_quality.parsers.bullets import extract_bullet_points, extract_intro_and_bullets
from discharge_quality.parsers.models import (
    MedicationDispositions,
    ParsedDischargeInstructions,
    ParsedDischargeSummary,
)
from discharge_quality.parsers.sections import (
    anchor_pattern,
    clean_document,
    header_pattern,
    label_pattern,
    slice_sections,
)

log = logging.getLogger(__name__)


@runtime_checkable
class DischargeParser(Protocol):
    """What the registry needs from a tenant parser."""

    parser_type: str

    def can_parse(self, text: str) -> bool:
        """True if *text* follows this parser's convention. Never raises."""
        ...

    def parse_discharge_summary(self, text: str) -> ParsedDischargeSummary:
        ...

    def parse_discharge_instructions(self, text: str) -> ParsedDischargeInstructions:
        ...


# ── Convention data ──────────────────────────────────────────────────


class SectionKind(str, Enum):
    """How a section body is turned into its field value."""

    BULLETS = "bullets"
    PARAGRAPH = "paragraph"
    DISPOSITIONS = "dispositions"
    INTRO_BULLETS = "intro_bullets"


@dataclass(frozen=True)
class SectionRule:
    """One section of a document: the model field it fills and its header words.

    Header words are regex fragments separated by spaces; any run of
    whitespace matches between them.
    """

    section_id: str
    header: str
    kind: SectionKind = SectionKind.BULLETS


@dataclass(frozen=True)
class DocumentConvention:
    """Ordered sections of one document plus headers that end the last section."""

    sections: tuple[SectionRule, ...]
    stop_anchors: tuple[str, ...] = ()


@dataclass(frozen=True)
class TenantConvention:
    detection_anchors: tuple[str, ...]
    summary: DocumentConvention
    instructions: DocumentConvention
    disposition_labels: tuple[str, ...] = ("New", "Continued", "Stopped")


@dataclass(frozen=True)
class _CompiledDocument:
    headers: tuple[tuple[str, Pattern[str]], ...]
    kinds: Mapping[str, SectionKind]
    stop_anchors: tuple[Pattern[str], ...] = field(default_factory=tuple)

    @classmethod
    def compile(cls, convention: DocumentConvention) -> _CompiledDocument:
        return cls(
            headers=tuple((r.section_id, header_pattern(r.header)) for r in convention.sections),
            kinds={r.section_id: r.kind for r in convention.sections},
            stop_anchors=tuple(header_pattern(a) for a in convention.stop_anchors),
        )


# ── Base parser ──────────────────────────────────────────────────────


class ConventionParser:
    """Rule-based discharge parser driven by a :class:`TenantConvention`.

    Subclasses set ``parser_type`` and ``convention``. Per-tenant ``settings``
    are passed through by the registry; ``required_sections`` lists fields
    that must be non-empty, otherwise parsing raises
    :class:`SectionExtractionError` and the document stays unparsed.
    """

    parser_type: str = ""
    convention: TenantConvention

    def __init__(self, settings: Optional[Mapping[str, Any]] = None) -> None:
        self.settings: dict[str, Any] = dict(settings or {})
        self._anchors = tuple(anchor_pattern(a) for a in self.convention.detection_anchors)
        self._summary = _CompiledDocument.compile(self.convention.summary)
        self._instructions = _CompiledDocument.compile(self.convention.instructions)
        self._disposition_headers = tuple(
            (label.lower(), label_pattern(label))
            for label in self.convention.disposition_labels
        )
        labels = {key for key, _ in self._disposition_headers}
        unknown = labels - set(MedicationDispositions.model_fields)
        if unknown:
            raise TenantConfigurationError(
                f"{type(self).__name__}: disposition labels {sorted(unknown)} "
                "have no matching field"
            )

    def can_parse(self, text: str) -> bool:
        if not isinstance(text, str):
            return False
        missing = [
            a for a, p in zip(self.convention.detection_anchors, self._anchors)
            if not p.search(text)
        ]
        if missing:
            log.debug("%s parser cannot handle document, missing: %s", self.parser_type, missing)
            return False
        log.debug("%s parser can handle document", self.parser_type)
        return True

    def parse_discharge_summary(self, text: str) -> ParsedDischargeSummary:
        values = self._extract(text, self._summary, "summary")
        summary = ParsedDischargeSummary(**values)
        self._check_required(summary)
        return summary

    def parse_discharge_instructions(self, text: str) -> ParsedDischargeInstructions:
        values = self._extract(text, self._instructions, "instructions")
        instructions = ParsedDischargeInstructions(**values)
        self._check_required(instructions)
        return instructions

    # ── Internals ───────────────────────────────────────────────────

    def _extract(self, text: str, document: _CompiledDocument, label: str) -> dict[str, Any]:
        if not isinstance(text, str):
            raise ParserError(f"{label} text must be str, got {type(text).__name__}")

        cleaned = clean_document(text)
        log.debug(
            "Cleaned %s text: removed %d characters of export annotations and escapes",
            label,
            len(text) - len(cleaned),
        )

        bodies = slice_sections(cleaned, document.headers, document.stop_anchors)
        values: dict[str, Any] = {}
        for section_id, _ in document.headers:
            if section_id not in bodies:
                log.debug("%s section not found: %s", label, section_id)
                continue
            handler = _HANDLERS[document.kinds[section_id]]
            values[section_id] = handler(self, bodies[section_id])
        return values

    def _bullets(self, body: str) -> list[str]:
        return extract_bullet_points(body)

    def _paragraph(self, body: str) -> list[str]:
        paragraph = body.strip()
        return [paragraph] if paragraph else []

    def _intro_bullets(self, body: str) -> list[str]:
        return extract_intro_and_bullets(body)

    def _dispositions(self, body: str) -> MedicationDispositions:
        sub_bodies = slice_sections(body, self._disposition_headers)
        return MedicationDispositions(
            **{key: extract_bullet_points(sub) for key, sub in sub_bodies.items()}
        )

    def _check_required(self, parsed: Any) -> None:
        required = set(self.settings.get("required_sections", ()))
        missing = sorted(required & set(parsed.empty_sections()))
        if missing:
            raise SectionExtractionError(
                f"Required section(s) empty: {', '.join(missing)}",
                section_id=missing[0],
            )


_HANDLERS: dict[SectionKind, Callable[[ConventionParser, str], Any]] = {
    SectionKind.BULLETS: ConventionParser._bullets,
    SectionKind.PARAGRAPH: ConventionParser._paragraph,
    SectionKind.DISPOSITIONS: ConventionParser._dispositions,
    SectionKind.INTRO_BULLETS: ConventionParser._intro_bullets,
}
