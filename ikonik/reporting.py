"""Progress reporting sinks for generation runs."""

from __future__ import annotations

import logging
from typing import Protocol

from .logging import get_logger


class Reporter(Protocol):
    """Receives human-readable progress and warning messages."""

    def info(self, message: str) -> None:
        ...

    def warn(self, message: str) -> None:
        ...


class LoggingReporter:
    """Reporter that forwards messages to the ``ikonik.generator`` logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or get_logger("generator")

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warn(self, message: str) -> None:
        self.logger.warning(message)


__all__ = ["LoggingReporter", "Reporter"]
