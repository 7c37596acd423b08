# src/todo_app/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a default; the task file defaults to ./tasks.csv.
- Tests build their own settings objects instead of reading the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_APP_TITLE = "To-Do List with Checkboxes"
DEFAULT_TASKS_FILE = Path("tasks.csv")
FRONTENDS = ("gui", "console")

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_title: str
    log_level: str

    # ---- Frontend ----
    frontend: str

    # ---- Local data paths ----
    data_dir: Path
    tasks_file: Path

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_title=_env(_k("APP_TITLE"), DEFAULT_APP_TITLE),
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            frontend=_env_choice(_k("FRONTEND"), FRONTENDS, "gui"),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/todo")),
            tasks_file=_env_path(_k("TASKS_FILE"), DEFAULT_TASKS_FILE),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
