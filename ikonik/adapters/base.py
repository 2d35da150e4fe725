"""Contracts for the external tools the pipeline delegates to."""

from __future__ import annotations

from typing import Protocol, Sequence


class Optimizer(Protocol):
    """Normalizes raw SVG markup (SVGO contract)."""

    def optimize(self, svg: str) -> str:
        ...


class Transformer(Protocol):
    """Turns optimized SVG into a JSX module (SVGR contract).

    Implementations must return text containing
    ``export default () => (<svg ...>...</svg>);`` with a single top-level
    ``<svg>`` element and no nested ``<svg>`` elements.
    """

    def transform(self, svg: str) -> str:
        ...


class Formatter(Protocol):
    """Pretty-prints generated TypeScript sources."""

    def format(self, source: str) -> str:
        ...


SVGO_PLUGINS: Sequence[str] = (
    "preset-default",
    "removeDimensions",
    "convertStyleToAttrs",
    "removeXMLNS",
)
SVGO_MULTIPASS = True
FORMATTER_PARSER = "babel-ts"


class IdentityFormatter:
    """Formatter that returns sources unchanged."""

    def format(self, source: str) -> str:
        return source


__all__ = [
    "FORMATTER_PARSER",
    "Formatter",
    "IdentityFormatter",
    "Optimizer",
    "SVGO_MULTIPASS",
    "SVGO_PLUGINS",
    "Transformer",
]
