"""Logging setup for chat-transcript.

Log lines are pipe-separated with ISO 8601 timestamps.  Only the I/O
edges log (FAQ probing, the coordinator and the CLI); the resolver and
the CSV parser stay silent.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_OWN_HANDLER = "_chat_transcript_handler"


def _find_own_handler(root: logging.Logger) -> logging.Handler | None:
    for handler in root.handlers:
        if getattr(handler, _OWN_HANDLER, False):
            return handler
    return None


def setup_logging(level: str = "INFO") -> None:
    """Route log records at *level* and above to stderr.

    The CLI calls this with ``LOG_LEVEL`` from the settings, or ``DEBUG``
    under ``--verbose``.  A second call only changes the level; handlers
    installed by someone else are left alone.

    Raises:
        ValueError: If *level* is not a logging level name.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")

    root = logging.getLogger()
    root.setLevel(numeric_level)

    handler = _find_own_handler(root)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        setattr(handler, _OWN_HANDLER, True)
        root.addHandler(handler)
    handler.setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
