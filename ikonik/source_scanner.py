"""Source directory enumeration for SVG icon files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List, Set

SVG_SUFFIX = ".svg"


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _iter_svg_files(root: Path) -> Iterator[str]:
    visited: Set[str] = {os.path.realpath(root)}
    for dirpath, dirnames, filenames in os.walk(root, followlinks=True):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

        # Sorted in place so os.walk descends in a stable order. Symlinked
        # directories are followed once; a link back into a visited tree is pruned.
        kept: List[str] = []
        for name in sorted(dirnames):
            if _is_hidden(name):
                continue
            real = os.path.realpath(os.path.join(dirpath, name))
            if real in visited:
                continue
            visited.add(real)
            kept.append(name)
        dirnames[:] = kept

        for filename in sorted(filenames):
            if _is_hidden(filename) or not filename.endswith(SVG_SUFFIX):
                continue
            yield f"{rel_dir}/{filename}" if rel_dir else filename


class SourceScanner:
    """Lists SVG files beneath a source root as slash-separated relative paths."""

    def scan(self, root: str | Path) -> List[str]:
        """Return relative paths matching ``**/*.svg``; a missing root yields none."""
        root_path = Path(root).expanduser()
        if not root_path.is_dir():
            return []
        return list(_iter_svg_files(root_path))


__all__ = ["SVG_SUFFIX", "SourceScanner"]
