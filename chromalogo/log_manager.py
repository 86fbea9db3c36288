# chromalogo/log_manager.py
"""
Centralized logger factory for chromalogo.

This module provides a single entry point, :func:`get_logger`, that returns a
configured :class:`logging.Logger`. It supports:
- Colored console logs via `colorlog` when the stream is a TTY
- Plain console logs otherwise
- Optional file logging (UTF-8)
- Idempotent handler attachment (prevents duplicate handlers)

Library modules log through ``logging.getLogger("chromalogo.<area>")`` and
never attach handlers themselves; the CLI calls ``get_logger("chromalogo")``
once so every child logger shares the same output.

Environment variables
---------------------
CHROMALOGO_FORCE_COLOR=true|false
    Force colored logging on or off regardless of TTY detection.
CHROMALOGO_LOG_LEVEL=DEBUG|INFO|WARNING|...
    Default level used by the CLI when ``--verbose`` is not given.

Notes
-----
- Logs are written to stderr so they never interleave with rendered art on
  stdout (which may be piped into a file).

Python: 3.9+
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Dict, Optional, TextIO

import colorlog

__all__ = ["get_logger", "level_from_env"]


# -----------------------
# Color configuration map
# -----------------------

_LEVEL_COLORS: Dict[str, str] = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

# Colors for the logger name segment, keyed by logger name.
_NAME_COLORS: Dict[str, str] = {
    "chromalogo": "bold_white",
    "chromalogo.cache": "blue",
    "chromalogo.colorizer": "magenta",
    "chromalogo.glyphs": "cyan",
    "chromalogo.renderer": "bold_blue",
    "chromalogo.config": "bold_yellow",
    "chromalogo.cli": "white",
}

_PLAIN_FMT = "[%(levelname)s] %(asctime)s - [%(name)s] %(message)s"
_PLAIN_DATEFMT = "%Y-%m-%d %H:%M:%S"

_COLOR_FMT = (
    "%(log_color)s[%(levelname)s]%(reset)s %(asctime)s - "
    "[%(name_log_color)s%(name)s%(reset)s] %(message)s"
)


# ---------------
# Helper builders
# ---------------

def _should_use_color(stream: TextIO) -> bool:
    """Return True if colorized logs should be used for ``stream``."""
    env = os.getenv("CHROMALOGO_FORCE_COLOR")
    if env is not None:
        return env.strip().lower() in {"1", "true", "yes", "on"}
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _build_colored_stream_handler(stream: TextIO) -> logging.Handler:
    handler = colorlog.StreamHandler(stream=stream)
    handler.setFormatter(
        colorlog.ColoredFormatter(
            fmt=_COLOR_FMT,
            datefmt=_PLAIN_DATEFMT,
            log_colors=_LEVEL_COLORS,
            secondary_log_colors={"name": _NAME_COLORS},
        )
    )
    return handler


def _build_plain_stream_handler(stream: TextIO) -> logging.Handler:
    handler = logging.StreamHandler(stream=stream)
    handler.setFormatter(logging.Formatter(fmt=_PLAIN_FMT, datefmt=_PLAIN_DATEFMT))
    return handler


def _attach_stream_handler(logger: logging.Logger, stream: TextIO) -> None:
    """Attach a single stream handler to ``logger`` if not already attached."""
    if getattr(logger, "_chromalogo_stream_handler_attached", False):
        return

    if _should_use_color(stream):
        handler = _build_colored_stream_handler(stream)
    else:
        handler = _build_plain_stream_handler(stream)
    logger.addHandler(handler)
    logger._chromalogo_stream_handler_attached = True  # type: ignore[attr-defined]


def _attach_file_handler(logger: logging.Logger, log_to_file: str) -> None:
    """Attach one FileHandler per absolute path per logger."""
    log_file_path = os.path.abspath(log_to_file)
    for h in logger.handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == log_file_path:
            return

    try:
        fhandler = logging.FileHandler(log_file_path, encoding="utf-8")
    except OSError as exc:  # pragma: no cover - filesystem errors
        logger.error("Failed to open log file '%s': %s", log_file_path, exc)
        return

    fhandler.setFormatter(logging.Formatter(fmt=_PLAIN_FMT, datefmt=_PLAIN_DATEFMT))
    logger.addHandler(fhandler)


# ----------------
# Public interface
# ----------------

def level_from_env(default: int = logging.WARNING) -> int:
    """Return the level named by ``CHROMALOGO_LOG_LEVEL`` or ``default``."""
    name = os.getenv("CHROMALOGO_LOG_LEVEL", "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def get_logger(
    name: str = "chromalogo",
    level: int = logging.WARNING,
    log_to_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Return a configured, reusable :class:`logging.Logger`.

    Parameters
    ----------
    name : str, default "chromalogo"
        Logger name. Child loggers (``chromalogo.cache`` ...) propagate here.
    level : int, default logging.WARNING
        Log level for this logger.
    log_to_file : Optional[str], default None
        Optional filesystem path for file logging.
    stream : Optional[TextIO], default sys.stderr
        Console stream for the stream handler.

    Returns
    -------
    logging.Logger
        A configured logger instance with ``propagate = False``.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    _attach_stream_handler(logger, stream if stream is not None else sys.stderr)
    if log_to_file:
        _attach_file_handler(logger, log_to_file)

    logger.propagate = False
    return logger
