"""Template rendering for generated icon sources."""

from .component import ComponentRenderer, StyleOptions, js_number, render_component, render_index
from .constants import COMPONENT_EXTENSION, INDEX_FILENAME, METADATA_FILENAME

__all__ = [
    "COMPONENT_EXTENSION",
    "ComponentRenderer",
    "INDEX_FILENAME",
    "METADATA_FILENAME",
    "StyleOptions",
    "js_number",
    "render_component",
    "render_index",
]
