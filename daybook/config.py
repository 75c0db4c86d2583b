from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite:///daybook.db"


def _resolve_project_root() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


PROJECT_ROOT = _resolve_project_root()


def load_env() -> None:
    env_name = os.getenv("APP_ENV", "development")
    candidates = [Path.cwd(), PROJECT_ROOT]
    for base in candidates:
        env_path = base / ".env"
        if env_path.exists():
            load_dotenv(env_path)
            break

    for base in candidates:
        env_specific = base / f".env.{env_name}"
        if env_specific.exists():
            load_dotenv(env_specific, override=True)
            break


@dataclass(frozen=True)
class Settings:
    database_url: str
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_file: str = "daybook.log"
    archive_after_days: int = 90
    purge_after_days: int = 365


load_env()

SETTINGS = Settings(
    database_url=os.getenv("DATABASE_URL", "").strip() or DEFAULT_DATABASE_URL,
    log_level=os.getenv("LOG_LEVEL", "INFO"),
    log_dir=os.getenv("LOG_DIR", "logs"),
    log_file=os.getenv("LOG_FILE", "daybook.log"),
    archive_after_days=int(os.getenv("ARCHIVE_AFTER_DAYS", "90")),
    purge_after_days=int(os.getenv("PURGE_AFTER_DAYS", "365")),
)

if SETTINGS.archive_after_days >= SETTINGS.purge_after_days:
    raise RuntimeError(
        "ARCHIVE_AFTER_DAYS must be lower than PURGE_AFTER_DAYS "
        f"(got {SETTINGS.archive_after_days} and {SETTINGS.purge_after_days})."
    )
