"""Logging utilities for agentscan commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_LOGGER_NAME = "agentscan"
_CONSOLE_FORMAT = "[agentscan] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the agentscan hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def resolve_level(*, verbose: bool = False, quiet: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Attach a stderr handler and an optional file sink to the agentscan logger.

    Progress messages go to stderr so that commands printing artifacts
    (``agentscan report``) keep stdout clean.
    """
    level = resolve_level(verbose=verbose, quiet=quiet)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated CLI invocations in one process would otherwise duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)
        logger.setLevel(logging.DEBUG)

    return logger


__all__ = ["configure_logging", "get_logger", "resolve_level"]
