"""Aggregation of per-icon results into the barrel module and metadata."""

from __future__ import annotations

import json
from typing import List

from .models import IconRecord, Manifest
from .rendering import render_index


class ManifestBuilder:
    """Collects icon records in generation order."""

    def __init__(self) -> None:
        self._icons: List[IconRecord] = []

    def add(self, record: IconRecord) -> None:
        self._icons.append(record)

    def __len__(self) -> int:
        return len(self._icons)

    def build(self) -> Manifest:
        return Manifest(icons=list(self._icons))

    def render_index(self) -> str:
        """Return the unformatted ``index.ts`` barrel source."""
        return render_index(self._icons)

    def render_metadata(self) -> str:
        """Return the ``metadata.json`` document."""
        return json.dumps(self.build().to_dict(), indent=2, ensure_ascii=False)


__all__ = ["ManifestBuilder"]
