"""Core data models shared across ikonik components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class SourceFile:
    """A discovered SVG file and its raw text."""

    relative_path: str
    absolute_path: Path
    content: str


@dataclass(frozen=True)
class IconRecord:
    """A successfully generated icon component."""

    name: str
    file: str
    tags: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "file": self.file, "tags": list(self.tags)}


@dataclass
class Manifest:
    """Ordered summary of every icon generated in one run."""

    icons: List[IconRecord] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.icons)

    def to_dict(self) -> Dict[str, Any]:
        return {"count": self.count, "icons": [icon.to_dict() for icon in self.icons]}
