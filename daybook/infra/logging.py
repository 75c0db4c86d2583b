from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from daybook.config import PROJECT_ROOT, SETTINGS, Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def log_path(settings: Settings = SETTINGS) -> Path:
    """Location of the rotating log file; relative ``log_dir`` values hang off the project root."""
    return PROJECT_ROOT / settings.log_dir / settings.log_file


def setup_logging(settings: Settings = SETTINGS) -> Path:
    path = log_path(settings)
    path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    file_handler = RotatingFileHandler(path, maxBytes=2_000_000, backupCount=3, delay=True)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logging.basicConfig(
        level=settings.log_level.upper(),
        handlers=[file_handler, console_handler],
    )
    return path
