# src/todo_desk/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is created on disk at import time (see cli/bootstrap.py).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

DOCUMENTS_SUBDIR = Path("Documents") / "todo-app"
TASKS_FILE_NAME = "todos.json"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def default_data_dir(home: str | Path | None) -> Path:
    """
    <home>/Documents/todo-app, or the current directory when home is unknown.
    """
    if home is None or str(home).strip() == "":
        return Path(".")
    return Path(home) / DOCUMENTS_SUBDIR


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    file_logging: bool

    # ---- Local data paths ----
    home_dir: Path | None
    data_dir: Path
    tasks_file_path: Path
    log_dir: Path

    # ---- Timestamps ----
    timezone: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo-app")
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        file_logging = _env_bool(_k("FILE_LOGGING"), True)

        raw_home = _first_env(_k("HOME"), "HOME", default=None)
        home_dir = Path(raw_home).expanduser() if raw_home else None

        data_dir = _env_path(_k("DATA_DIR"), default_data_dir(home_dir))
        tasks_file_path = _env_path(_k("TASKS_FILE"), data_dir / TASKS_FILE_NAME)
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        timezone = _env(_k("TIMEZONE"), "Asia/Jakarta").strip() or "Asia/Jakarta"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            file_logging=file_logging,
            home_dir=home_dir,
            data_dir=data_dir,
            tasks_file_path=tasks_file_path,
            log_dir=log_dir,
            timezone=timezone,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
