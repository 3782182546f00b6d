"""Logging setup shared by nametree modules and scripts."""

from __future__ import annotations

import logging

from nametree.config import NAMETREE_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes present on every LogRecord; anything else arrived through ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


class ExtraFormatter(logging.Formatter):
    """Formatter that appends ``extra`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {
            key: value
            for key, value in vars(record).items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if not extras:
            return base
        pairs = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{base} [{pairs}]"


def configure_logging(level: str | int | None = None) -> None:
    """Install a stream handler on the ``nametree`` logger.

    Args:
        level: Log level name or number. Defaults to ``NAMETREE_LOG_LEVEL``.
    """
    root = logging.getLogger("nametree")
    level = level or NAMETREE_LOG_LEVEL
    root.setLevel(level.upper() if isinstance(level, str) else level)
    if not any(getattr(handler, "_nametree", False) for handler in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(ExtraFormatter(_LOG_FORMAT))
        handler._nametree = True  # type: ignore[attr-defined]
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name``."""
    return logging.getLogger(name)
