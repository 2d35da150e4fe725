"""Generate typed, accessible React icon components from SVG sources."""

from .config import GenerationOptions
from .errors import (
    AdapterError,
    FormattingFailed,
    IkonikError,
    InvalidDocument,
    InvalidName,
    NoInputFiles,
    OptimizationFailed,
    TransformationFailed,
)
from .models import IconRecord, Manifest, SourceFile
from .orchestrator import Orchestrator, generate

__version__ = "1.0.0"

__all__ = [
    "AdapterError",
    "FormattingFailed",
    "GenerationOptions",
    "IconRecord",
    "IkonikError",
    "InvalidDocument",
    "InvalidName",
    "Manifest",
    "NoInputFiles",
    "OptimizationFailed",
    "Orchestrator",
    "SourceFile",
    "TransformationFailed",
    "__version__",
    "generate",
]
