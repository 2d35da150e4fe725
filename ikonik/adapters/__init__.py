"""Adapters for the external optimization, transformation, and formatting tools."""

from .base import Formatter, IdentityFormatter, Optimizer, Transformer
from .node import NodeToolRunner, PrettierFormatter, SvgoOptimizer, SvgrTransformer

__all__ = [
    "Formatter",
    "IdentityFormatter",
    "NodeToolRunner",
    "Optimizer",
    "PrettierFormatter",
    "SvgoOptimizer",
    "SvgrTransformer",
    "Transformer",
]
