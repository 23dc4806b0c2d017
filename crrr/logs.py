"""Logging setup.

The TUI owns the terminal, so log records only ever go to a file. Logging
stays unconfigured (and silent) unless ``--log-file`` or ``--verbose`` asks
for it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "crrr"
LOG_FILENAME = "crrr.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def configure_logging(log_file: Path | None = None, verbose: bool = False) -> Path | None:
    """Attach a file handler to the ``crrr`` logger and return the log path.

    Returns ``None`` when logging stays disabled or the file cannot be opened.
    """
    if log_file is None and not verbose:
        return None
    path = log_file if log_file is not None else default_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger(APP_NAME)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return path
