"""Session log file for the curses app.

The terminal belongs to curses while a session runs, so diagnostics go to a
daily-rotated file only.
"""
from __future__ import annotations

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .settings import Settings

LOG_FILE_NAME = "topic_todo.log"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def default_log_dir() -> Path:
    """Per-user state directory: ``$XDG_STATE_HOME/topic_todo`` or ``~/.local/state/topic_todo``."""
    base = os.environ.get("XDG_STATE_HOME")
    root = Path(base) if base else Path.home() / ".local" / "state"
    return root / "topic_todo"


def resolve_log_dir(settings: Settings, data_file: Path) -> Path:
    """Where the log for a session on ``data_file`` goes.

    Unset TODO_LOG_DIR means the per-user state directory. A relative
    TODO_LOG_DIR is taken relative to the folder holding the JSON file,
    not the folder the app was started from.
    """
    configured = settings.TODO_LOG_DIR
    if configured is None:
        return default_log_dir()
    if configured.is_absolute():
        return configured
    return data_file.resolve().parent / configured


def setup_logging(settings: Settings, data_file: Path) -> Path:
    """Install the rotating file handler on the root logger.

    Returns the log file path. Calling it again replaces the previous
    handler instead of adding a second one.
    """
    log_file = resolve_log_dir(settings, data_file) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

    level = getattr(logging, settings.TODO_LOG_LEVEL)

    handler = TimedRotatingFileHandler(
        filename=str(log_file),
        when="midnight",
        backupCount=settings.TODO_LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    for old in root.handlers:
        old.close()
    root.handlers = [handler]
    root.setLevel(level)

    logging.getLogger("topic_todo").info(
        "topic_todo logging enabled (file=%s, level=%s, data=%s)",
        os.fspath(log_file),
        settings.TODO_LOG_LEVEL,
        os.fspath(data_file),
    )
    return log_file
