"""Heading-anchored section slicing for semi-structured discharge documents.

A convention is an ordered list of section headers. One routine locates each
header and takes everything up to the nearest header of a *later* section
(or a stop anchor) as that section's body, so adding a tenant convention is a
data change rather than new slicing code.

Header words are regex fragments joined by ``\\s+``, which tolerates the
extra spaces PDF extraction leaves between words.
"""

from __future__ import annotations

import re
from typing import Optional, Pattern, Sequence

# "1/15/2025, 3:04 PM notes/discharge.md file:///tmp/discharge.md 2/3" lines
# left behind by markdown-to-PDF export tooling. PDF extraction sometimes
# splits the "fi" ligature in "file".
_EXPORT_ANNOTATION = re.compile(
    r"\d{1,2}/\d{1,2}/\d{2,4},\s+\d{1,2}:\d{2}\s+[AP]M\s+.*?\.md\s+fi\s*le:///.*?\.md\s+\d+/\d+"
)
_MARKDOWN_ESCAPE = re.compile(r"\\([\[\](){}*_+\->])")


def clean_document(text: str) -> str:
    """Strip export annotations, then drop markdown escape backslashes."""
    text = _EXPORT_ANNOTATION.sub("", text)
    return _MARKDOWN_ESCAPE.sub(r"\1", text)


def _words(header: str) -> str:
    return r"\s+".join(header.split())


def anchor_pattern(header: str) -> Pattern[str]:
    """Case-insensitive pattern for detecting that a header occurs anywhere."""
    return re.compile(_words(header), re.IGNORECASE)


def header_pattern(header: str) -> Pattern[str]:
    """Pattern for a section heading as it appears in plain or markdown text.

    Accepts up to three ``#`` markers, ``**`` bold markers on either side of
    the colon, and a parenthetical qualifier (``Patient Instructions
    (Plain Language):``).
    """
    return re.compile(
        r"(?:#{1,3}[ \t]*)?(?:\*\*)?"
        + _words(header)
        + r"(?:[ \t]*\([^)\n]*\))?(?:\*\*)?[ \t]*:?(?:\*\*)?",
        re.IGNORECASE,
    )


def label_pattern(label: str) -> Pattern[str]:
    """Pattern for an inline sub-header label such as ``New:``."""
    return re.compile(r"(?:\*\*)?\b" + _words(label) + r"\s*:(?:\*\*)?", re.IGNORECASE)


def slice_sections(
    text: str,
    headers: Sequence[tuple[str, Pattern[str]]],
    stop_anchors: Sequence[Pattern[str]] = (),
) -> dict[str, str]:
    """Return ``{section_id: body}`` for every header found in *text*.

    Sections whose header is absent are left out of the result. A body runs
    from the end of its header match to the earliest match, after it, of any
    later header in *headers* or of any *stop_anchors*; otherwise to the end
    of the text.
    """
    bodies: dict[str, str] = {}
    for index, (section_id, pattern) in enumerate(headers):
        match = pattern.search(text)
        if match is None:
            continue
        start = match.end()
        end = _next_boundary(text, start, [p for _, p in headers[index + 1:]], stop_anchors)
        bodies[section_id] = text[start:end]
    return bodies


def _next_boundary(
    text: str,
    start: int,
    later: Sequence[Pattern[str]],
    stop_anchors: Sequence[Pattern[str]],
) -> int:
    end: Optional[int] = None
    for pattern in (*later, *stop_anchors):
        found = pattern.search(text, start)
        if found is not None and (end is None or found.start() < end):
            end = found.start()
    return len(text) if end is None else end
