"""Logging setup for resume_review: console always, a daily file when enabled.

Level, directory and the file switch come from :mod:`resume_review.config`
(``LOG_LEVEL``, ``LOG_DIR``, ``LOG_TO_FILE``).
"""
from __future__ import annotations

import logging
import sys
from datetime import date
from pathlib import Path

from resume_review import config

_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a named logger; configures root handlers on first call."""
    global _configured
    if not _configured:
        configure_logging()
        _configured = True
    return logging.getLogger(name)


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    level: str | None = None,
    log_dir: Path | None = None,
    to_file: bool | None = None,
) -> None:
    """Attach console (and optionally file) handlers to the root logger.

    Leaves an already-configured root logger alone apart from its level.
    """
    lvl = _level(level or config.LOG_LEVEL)
    root = logging.getLogger()
    root.setLevel(lvl)
    if root.handlers:
        return

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(lvl)
    console.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FMT))
    root.addHandler(console)

    if config.LOG_TO_FILE if to_file is None else to_file:
        attach_file_handler(root, Path(log_dir or config.LOG_DIR))


def attach_file_handler(target: logging.Logger, log_dir: Path) -> logging.FileHandler | None:
    """Add a daily ``resume_review_YYYY-MM-DD.log`` handler to *target*.

    On failure the reason is logged and the console stays the only output.
    """
    log_file = log_dir / f"resume_review_{date.today().isoformat()}.log"
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as exc:
        logging.getLogger(__name__).warning("File logging disabled, cannot open %s: %s", log_file, exc)
        return None
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FMT))
    target.addHandler(fh)
    return fh
