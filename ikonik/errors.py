"""Error taxonomy for the icon generation pipeline."""

from __future__ import annotations


class IkonikError(RuntimeError):
    """Base class for errors raised by the generator."""


class NoInputFiles(IkonikError):
    """Raised when the source directory holds no SVG files."""

    def __init__(self, src_dir: object) -> None:
        super().__init__(f"No SVG files found in {src_dir}")
        self.src_dir = src_dir


class InvalidDocument(IkonikError):
    """Raised for a single source file that cannot become a component."""

    def __init__(self, relative_path: str, reason: str) -> None:
        super().__init__(f"{relative_path}: {reason}")
        self.relative_path = relative_path
        self.reason = reason


class InvalidName(InvalidDocument):
    """Raised when a file name yields no usable identifier."""


class AdapterError(IkonikError):
    """Raised when an external tool adapter fails."""

    stage = "adapter"


class OptimizationFailed(AdapterError):
    stage = "optimization"


class TransformationFailed(AdapterError):
    stage = "transformation"


class FormattingFailed(AdapterError):
    stage = "formatting"


__all__ = [
    "AdapterError",
    "FormattingFailed",
    "IkonikError",
    "InvalidDocument",
    "InvalidName",
    "NoInputFiles",
    "OptimizationFailed",
    "TransformationFailed",
]
