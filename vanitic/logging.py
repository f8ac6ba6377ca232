"""Logger setup shared by the vanitic modules."""

from __future__ import annotations

import logging
from pathlib import Path

_ROOT = "vanitic"


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger `vanitic.<name>`, or the package logger when name is empty."""
    return logging.getLogger(f"{_ROOT}.{name}" if name else _ROOT)


def configure_logging(*, verbose: bool = False, log_file: Path | None = None) -> logging.Logger:
    """
    Send vanitic progress messages to stderr, and also to `log_file` when given.

    Calling this again replaces the handlers installed by the previous call.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_ROOT)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter("[vanitic] %(levelname)s %(message)s"))
    logger.addHandler(console)

    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(sink)

    return logger


__all__ = ["configure_logging", "get_logger"]
