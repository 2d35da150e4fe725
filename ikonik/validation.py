"""Validation of raw source documents before they enter the pipeline."""

from __future__ import annotations

from .errors import InvalidDocument
from .models import SourceFile

SVG_ROOT_MARKER = "<svg"


class DocumentValidator:
    """Rejects files that do not contain SVG markup."""

    def __init__(self, marker: str = SVG_ROOT_MARKER) -> None:
        self.marker = marker

    def is_valid(self, content: str) -> bool:
        return self.marker in content

    def validate(self, source: SourceFile) -> SourceFile:
        if not self.is_valid(source.content):
            raise InvalidDocument(source.relative_path, f"missing {self.marker} root element")
        return source


__all__ = ["DocumentValidator", "SVG_ROOT_MARKER"]
