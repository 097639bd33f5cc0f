"""Bullet-list tokenization for section bodies.

Two passes: inline ``*`` bullets (common in markdown exports where lists are
flattened onto one line), then line-oriented ``●``/``•``/``-``/``*`` bullets
with continuation lines folded into the previous item.
"""

from __future__ import annotations

import re

_ASTERISK_SPLIT = re.compile(r"\s*\*\s+")
_LEADING_MARKER = re.compile(r"^[-●•]\s*")
_WHITESPACE = re.compile(r"\s+")
_SUBHEADER_TOKEN = re.compile(r"^(New|Continued|Stopped|---):?$", re.IGNORECASE)
_SUBHEADER_LABEL = re.compile(r"^(New|Continued|Stopped):", re.IGNORECASE)
_BULLET_LINE = re.compile(r"^[●•\-*]\s*(.+)$")
_INTRO = re.compile(
    r"(.*?)(?=[●•]|^[ \t]*[-*][ \t]|Return\s+to|\Z)",
    re.DOTALL | re.IGNORECASE | re.MULTILINE,
)


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", text)


def extract_bullet_points(text: str) -> list[str]:
    """Split a section body into list items, preserving document order."""
    parts = [p for p in _ASTERISK_SPLIT.split(text) if p.strip()]
    if len(parts) > 1:
        items = []
        for part in parts:
            cleaned = _collapse(_LEADING_MARKER.sub("", part.strip()))
            if cleaned and not _SUBHEADER_TOKEN.match(cleaned):
                items.append(cleaned)
        return items

    items = []
    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        bullet = _BULLET_LINE.match(line)
        if bullet:
            items.append(_collapse(bullet.group(1).strip()))
        elif _SUBHEADER_LABEL.match(line):
            continue
        elif items:
            items[-1] += " " + _collapse(line)
        else:
            items.append(_collapse(line))
    return items


def extract_intro_and_bullets(text: str) -> list[str]:
    """An optional lead-in sentence followed by the bullets after it.

    The intro runs up to the first bullet marker or a "Return to ..." line. It
    is kept only when it is more than five characters long and contains no
    ``*`` (which would make it an inline bullet list rather than prose).
    """
    match = _INTRO.match(text)
    intro = match.group(1).strip()

    if "*" in intro:
        return extract_bullet_points(text)

    items = [intro] if len(intro) > 5 else []
    items.extend(extract_bullet_points(text[match.end():]))
    return items
