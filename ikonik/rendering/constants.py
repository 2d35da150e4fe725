"""Shared constants for generated component sources."""

from __future__ import annotations

COMPONENT_EXTENSION = ".tsx"
INDEX_FILENAME = "index.ts"
METADATA_FILENAME = "metadata.json"
VIEW_BOX = "0 0 24 24"
CURRENT_COLOR = "currentColor"
NO_PAINT = "none"
# Filled icons must not inherit a stroke width from the prop default.
SUPPRESSED_STROKE_WIDTH = "undefined as any"
STROKE_WIDTH_PROP = "strokeWidth"


__all__ = [
    "COMPONENT_EXTENSION",
    "CURRENT_COLOR",
    "INDEX_FILENAME",
    "METADATA_FILENAME",
    "NO_PAINT",
    "STROKE_WIDTH_PROP",
    "SUPPRESSED_STROKE_WIDTH",
    "VIEW_BOX",
]
