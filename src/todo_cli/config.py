# src/todo_cli/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is read at import time; the CLI calls get_settings() once.
- The data file path lives here and is passed explicitly to the store.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- logging ----
    log_level: str
    log_dir: Path

    # ---- storage ----
    data_dir: Path
    data_file: Path

    # ---- task policy ----
    allow_empty_titles: bool

    @staticmethod
    def from_env() -> "Settings":
        data_dir = _env_path(_k("DATA_DIR"), Path("~/.local/share/todo-cli").expanduser())
        data_file = _env_path(_k("FILE"), data_dir / "todos.json")
        log_dir = _env_path(_k("LOG_DIR"), data_dir)
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        # Blank titles are rejected unless explicitly allowed.
        allow_empty_titles = _env_bool(_k("ALLOW_EMPTY_TITLES"), False)

        return Settings(
            log_level=log_level,
            log_dir=log_dir,
            data_dir=data_dir,
            data_file=data_file,
            allow_empty_titles=allow_empty_titles,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(override=False)
    return Settings.from_env()
