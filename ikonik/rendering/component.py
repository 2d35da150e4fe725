"""Renders React icon component sources from the bundled jinja2 templates."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable

from jinja2 import Environment, FileSystemLoader

from ..models import IconRecord
from .constants import (
    CURRENT_COLOR,
    NO_PAINT,
    STROKE_WIDTH_PROP,
    SUPPRESSED_STROKE_WIDTH,
    VIEW_BOX,
)

TEMPLATES_DIR = Path(__file__).with_name("templates")
COMPONENT_TEMPLATE = "component.tsx.j2"
INDEX_TEMPLATE = "index.ts.j2"


@dataclass(frozen=True)
class StyleOptions:
    """Presentation defaults baked into each component."""

    size: float
    stroke_width: float
    filled: bool = False

    @property
    def fill(self) -> str:
        return CURRENT_COLOR if self.filled else NO_PAINT

    @property
    def stroke(self) -> str:
        return NO_PAINT if self.filled else CURRENT_COLOR

    @property
    def stroke_width_expression(self) -> str:
        binding = SUPPRESSED_STROKE_WIDTH if self.filled else STROKE_WIDTH_PROP
        return "{" + binding + "}"


def js_number(value: float) -> str:
    """Format a number the way JavaScript prints it (``24`` not ``24.0``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


@lru_cache(maxsize=None)
def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["js_number"] = js_number
    return env


def render_component(name: str, body: str, style: StyleOptions) -> str:
    """Return the unformatted source of one icon component."""
    template = _environment().get_template(COMPONENT_TEMPLATE)
    return template.render(
        name=name,
        body=body,
        size=style.size,
        stroke_width=style.stroke_width,
        view_box=VIEW_BOX,
        fill=style.fill,
        stroke=style.stroke,
        stroke_width_expression=style.stroke_width_expression,
    )


def render_index(icons: Iterable[IconRecord]) -> str:
    """Return the unformatted barrel module re-exporting every icon."""
    template = _environment().get_template(INDEX_TEMPLATE)
    return template.render(icons=list(icons))


class ComponentRenderer:
    """Binds a fixed :class:`StyleOptions` to :func:`render_component`."""

    def __init__(self, style: StyleOptions) -> None:
        self.style = style

    def render(self, name: str, body: str) -> str:
        return render_component(name, body, self.style)
