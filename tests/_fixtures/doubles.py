"""Stand-ins for the Node tool adapters and the console reporter."""

from __future__ import annotations

import re
from typing import List

from ikonik.errors import FormattingFailed, OptimizationFailed, TransformationFailed

_XML_DECLARATION = re.compile(r"<\?xml[^>]*\?>\s*")
_DIMENSION_ATTRS = re.compile(r'\s(?:width|height)="[^"]*"')


class FakeOptimizer:
    """Drops the XML declaration and root dimensions like SVGO would."""

    def __init__(self) -> None:
        self.calls: List[str] = []

    def optimize(self, svg: str) -> str:
        self.calls.append(svg)
        return _DIMENSION_ATTRS.sub("", _XML_DECLARATION.sub("", svg)).strip()


class FakeTransformer:
    """Wraps markup in the single-expression module emitted by SVGR."""

    def __init__(self) -> None:
        self.calls: List[str] = []

    def transform(self, svg: str) -> str:
        self.calls.append(svg)
        jsx = svg.replace("stroke-width=", "strokeWidth=")
        return f"export default () => ({jsx});\n"


class MarkingFormatter:
    """Marks formatted output so tests can tell the formatter ran."""

    def __init__(self) -> None:
        self.calls: List[str] = []

    def format(self, source: str) -> str:
        self.calls.append(source)
        return f"// formatted\n{source}"


class FailingOptimizer:
    """Optimizer that fails for sources containing a marker string."""

    def __init__(self, marker: str = "boom") -> None:
        self.marker = marker

    def optimize(self, svg: str) -> str:
        if self.marker in svg:
            raise OptimizationFailed("svgo failed with exit code 1: parse error")
        return svg


class FailingTransformer(FakeTransformer):
    """Transformer that fails for sources containing a marker string."""

    def __init__(self, marker: str = "boom") -> None:
        super().__init__()
        self.marker = marker

    def transform(self, svg: str) -> str:
        if self.marker in svg:
            raise TransformationFailed("@svgr/cli failed with exit code 1: unexpected token")
        return super().transform(svg)


class FailingFormatter:
    """Formatter that fails for sources containing a marker string."""

    def __init__(self, marker: str) -> None:
        self.marker = marker

    def format(self, source: str) -> str:
        if self.marker in source:
            raise FormattingFailed("prettier failed with exit code 2: SyntaxError")
        return source


class RecordingReporter:
    """Reporter that captures messages instead of logging them."""

    def __init__(self) -> None:
        self.infos: List[str] = []
        self.warnings: List[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)


__all__ = [
    "FailingFormatter",
    "FailingOptimizer",
    "FailingTransformer",
    "FakeOptimizer",
    "FakeTransformer",
    "RecordingReporter",
    "MarkingFormatter",
]
