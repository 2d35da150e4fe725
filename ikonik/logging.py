"""Logging setup for the ikonik command line.

Progress lines go to the console as ``ikonik: star -> Star`` and warnings as
``ikonik: warning: Skipping invalid SVG: broken.svg``, matching the prefix
used for fatal CLI errors. The optional log file keeps timestamps and logger
names for after-the-fact debugging of a batch run.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "ikonik"
CONSOLE_PREFIX = f"{_LOGGER_NAME}: "
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ConsoleFormatter(logging.Formatter):
    """Short, prefix-only console lines; the level is spelled out from WARNING up."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.WARNING:
            return f"{CONSOLE_PREFIX}{record.levelname.lower()}: {message}"
        if record.levelno <= logging.DEBUG:
            return f"{CONSOLE_PREFIX}[{record.name}] {message}"
        return f"{CONSOLE_PREFIX}{message}"


def get_logger(name: str | None = None) -> logging.Logger:
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Attach the console handler (and ``log_file`` sink) to the ``ikonik`` logger.

    Repeated calls replace earlier handlers, so tests and embedding callers can
    invoke ``cli.main`` more than once without doubled output.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(ConsoleFormatter("%(message)s"))
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = ["CONSOLE_PREFIX", "ConsoleFormatter", "configure_logging", "get_logger"]
