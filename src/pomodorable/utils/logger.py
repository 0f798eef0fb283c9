"""Application-wide logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "pomodorable"
LOG_FILE = "pomodorable.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_root: logging.Logger | None = None


def _init_root(level: int) -> logging.Logger:
    root = logging.getLogger(APP_NAME)
    root.setLevel(level)
    root.propagate = False

    # Only the file handler counts; capture handlers may share this logger
    if any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers
    ):
        return root

    log_dir = Path(user_log_dir(APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    root.addHandler(handler)
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or one of its children.

    The file handler is attached to the ``pomodorable`` logger on first
    call; ``get_logger("timer")`` returns ``pomodorable.timer``.
    """
    global _root
    if _root is None:
        _root = _init_root(logging.DEBUG)
    if name:
        return _root.getChild(name)
    return _root


def set_log_level(level: str | int) -> None:
    """Change the level of the application logger (e.g. "INFO")."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    get_logger().setLevel(level)
