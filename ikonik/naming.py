"""Deterministic component, file, and tag names derived from source paths."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

from .errors import InvalidName
from .source_scanner import SVG_SUFFIX

_SPLIT_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_SPLIT_UPPER_UPPER = re.compile(r"([A-Z])([A-Z][a-z])")
_STRIP = re.compile(r"[^A-Za-z0-9]+")
_TAG_SEPARATOR = "-"


@dataclass(frozen=True)
class IconNames:
    """Names derived for a single source file."""

    base: str
    name: str
    file: str
    tags: Tuple[str, ...]


def split_words(value: str) -> List[str]:
    """Split on non-alphanumeric runs and on camel-case boundaries."""
    result = value.strip()
    result = _SPLIT_LOWER_UPPER.sub("\\1\0\\2", result)
    result = _SPLIT_UPPER_UPPER.sub("\\1\0\\2", result)
    result = _STRIP.sub("\0", result)
    return [word for word in result.split("\0") if word]


def pascal_case(value: str) -> str:
    """Convert ``value`` to PascalCase.

    Words after the first that begin with a digit are joined with ``_`` so
    that ``icon-2`` and ``icon2`` stay distinguishable.
    """
    parts: List[str] = []
    for index, word in enumerate(split_words(value)):
        head = word[0]
        if index > 0 and head.isdigit():
            parts.append("_" + head + word[1:].lower())
        else:
            parts.append(head.upper() + word[1:].lower())
    return "".join(parts)


def to_identifier(value: str, relative_path: str) -> str:
    """Return ``pascal_case(value)`` as a usable TypeScript identifier."""
    identifier = pascal_case(value)
    if not identifier:
        raise InvalidName(relative_path, f"cannot derive an identifier from {value!r}")
    if identifier[0].isdigit():
        identifier = f"_{identifier}"
    return identifier


def base_name(relative_path: str) -> str:
    """Return the file name of ``relative_path`` without directory or suffix."""
    name = relative_path.replace("\\", "/").rsplit("/", 1)[-1]
    if name.endswith(SVG_SUFFIX):
        name = name[: -len(SVG_SUFFIX)]
    return name


def derive_tags(base: str) -> Tuple[str, ...]:
    # Consecutive separators yield empty tokens; they are kept as-is.
    return tuple(token.lower() for token in base.split(_TAG_SEPARATOR))


def derive_names(relative_path: str, prefix: str | None = None) -> IconNames:
    """Compute the component identifier, file identifier, and tags for a path.

    The prefix is concatenated with the base name before casing, so
    ``"Icon"`` + ``"arrow-left"`` becomes ``IconarrowLeft`` rather than
    ``IconArrowLeft``.
    """
    base = base_name(relative_path)
    return IconNames(
        base=base,
        name=to_identifier(f"{prefix or ''}{base}", relative_path),
        file=to_identifier(base, relative_path),
        tags=derive_tags(base),
    )


__all__ = ["IconNames", "base_name", "derive_names", "derive_tags", "pascal_case", "split_words"]
