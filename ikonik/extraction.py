"""Extraction of the inner SVG markup from the JSX transformation output.

The transformation adapter must emit exactly one top-level ``<svg>`` element
with no nested ``<svg>`` elements; the first opening tag is paired with the
first closing tag that follows it.
"""

from __future__ import annotations

import re

_SVG_BODY_PATTERN = re.compile(r"<svg[^>]*>([\s\S]*?)</svg>")
_FILL_ATTR_PATTERN = re.compile(r'fill="[^"]*"')
_STROKE_ATTR_PATTERN = re.compile(r'stroke="[^"]*"')


def extract_body(jsx: str) -> str:
    """Return the raw markup between the root ``<svg>`` tags, or ``""``."""
    match = _SVG_BODY_PATTERN.search(jsx)
    if match is None:
        return ""
    return match.group(1)


def sanitize_body(raw_body: str) -> str:
    """Strip per-element ``fill``/``stroke`` colors so the root owns coloring."""
    cleaned = raw_body
    # A removal can splice a new attribute together, so repeat until stable.
    while True:
        stripped = _STROKE_ATTR_PATTERN.sub("", _FILL_ATTR_PATTERN.sub("", cleaned))
        if stripped == cleaned:
            return cleaned.strip()
        cleaned = stripped


class BodyExtractor:
    """Produces the sanitized body embedded in each generated component."""

    def extract(self, jsx: str) -> str:
        return sanitize_body(extract_body(jsx))


__all__ = ["BodyExtractor", "extract_body", "sanitize_body"]
