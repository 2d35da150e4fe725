"""Tests for ikonik.rendering."""

from __future__ import annotations

import pytest

from ikonik.models import IconRecord
from ikonik.rendering import StyleOptions, js_number, render_component, render_index

BODY = '<path d="M20.84 4.61a5.5 5.5 0 0 0-7.78 0" />'


def test_unfilled_component_binds_stroke_width_prop() -> None:
    source = render_component("Heart", BODY, StyleOptions(size=24, stroke_width=1.5))

    assert 'fill="none"' in source
    assert 'stroke="currentColor"' in source
    assert "strokeWidth={strokeWidth}" in source
    assert "size = 24, strokeWidth = 1.5" in source
    assert "undefined as any" not in source


def test_filled_component_suppresses_stroke_width() -> None:
    source = render_component("Heart", BODY, StyleOptions(size=32, stroke_width=2, filled=True))

    assert 'fill="currentColor"' in source
    assert 'stroke="none"' in source
    assert "strokeWidth={undefined as any}" in source
    assert "strokeWidth={strokeWidth}" not in source
    assert "size = 32" in source


def test_component_declares_props_interface_and_display_name() -> None:
    source = render_component("IconStar", "", StyleOptions(size=24, stroke_width=1.5))

    assert source.startswith('import * as React from "react";\n')
    assert "export interface IconStarProps extends React.SVGProps<SVGSVGElement> {" in source
    for field in ("title?: string;", "titleId?: string;", "size?: number;", "strokeWidth?: number;"):
        assert field in source
    assert "React.forwardRef<SVGSVGElement, IconStarProps>" in source
    assert 'IconStar.displayName = "IconStar";' in source
    assert source.endswith("export default IconStar;\n")


def test_component_wires_accessibility_attributes() -> None:
    source = render_component("Heart", BODY, StyleOptions(size=24, stroke_width=1.5))

    assert 'aria-hidden={title ? undefined : "true"}' in source
    assert "aria-labelledby={title ? titleId : undefined}" in source
    assert 'role={title ? "img" : "presentation"}' in source
    assert 'viewBox="0 0 24 24"' in source
    assert 'strokeLinecap="round"' in source
    assert 'strokeLinejoin="round"' in source


def test_props_spread_last_and_title_precedes_body() -> None:
    source = render_component("Heart", BODY, StyleOptions(size=24, stroke_width=1.5))

    assert source.index('strokeLinejoin="round"') < source.index("{...props}")
    assert source.index("{...props}") < source.index("{title ? <title id={titleId}>{title}</title> : null}")
    assert source.index("<title id={titleId}>") < source.index(BODY)


def test_render_is_deterministic() -> None:
    style = StyleOptions(size=24, stroke_width=1.5)

    assert render_component("Heart", BODY, style) == render_component("Heart", BODY, style)


@pytest.mark.parametrize(("value", "expected"), [(24, "24"), (24.0, "24"), (1.5, "1.5"), (0.75, "0.75")])
def test_js_number_drops_trailing_zero(value: float, expected: str) -> None:
    assert js_number(value) == expected


def test_render_index_emits_one_export_per_icon_in_order() -> None:
    icons = [
        IconRecord(name="IconTwo", file="Two", tags=("two",)),
        IconRecord(name="IconOne", file="One", tags=("one",)),
    ]

    assert render_index(icons) == (
        'export { default as IconTwo } from "./Two";\n'
        'export { default as IconOne } from "./One";\n'
    )


def test_render_index_without_icons_is_empty() -> None:
    assert render_index([]) == ""
