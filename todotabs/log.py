"""File logging setup.

The terminal belongs to the UI, so log records only ever go to a file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FILENAME = f"{APP_NAME}.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def configure_logging(log_file: Path | None = None, level: str = "WARNING") -> Path | None:
    """Route the root logger to ``log_file`` (or the per-user log dir).

    The file is opened on the first record. Returns the log path, or ``None``
    when its directory cannot be created, in which case records are dropped.
    """
    path = log_file if log_file is not None else default_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        logging.basicConfig(handlers=[logging.NullHandler()], level=level, force=True)
        return None
    logging.basicConfig(
        handlers=[logging.FileHandler(path, encoding="utf-8", delay=True)],
        level=level,
        format=LOG_FORMAT,
        force=True,
    )
    return path
