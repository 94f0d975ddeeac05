"""Logging helpers shared by the vjsgen CLI, service and pipeline."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "vjsgen"
_CONSOLE_FORMAT = "[vjsgen] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``vjsgen.<name>``, or the package logger when no name is given."""
    if not name:
        return logging.getLogger(_LOGGER_NAME)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


def _level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Attach console (and optional file) handlers to the package logger.

    ``verbose`` takes precedence over ``quiet``. Calling this again replaces
    the handlers installed by the previous call.
    """
    level = _level(verbose, quiet)
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    handlers: list[logging.Handler] = [console]

    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(sink)

    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
