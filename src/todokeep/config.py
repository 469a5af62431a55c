# src/todokeep/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Only the .env in the working directory is read; no config-file search.
- Bad values fall back to defaults instead of failing the command.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODOKEEP"


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
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path
    log_to_file: bool

    # ---- Storage ----
    store_path: Path

    @staticmethod
    def from_env() -> Settings:
        app_name = _env(_k("APP_NAME"), "todokeep").strip() or "todokeep"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        log_dir = _env_path(_k("LOG_DIR"), Path(".local/todokeep"))
        log_to_file = _env_bool(_k("LOG_TO_FILE"), False)

        # Relative to the directory the command runs in.
        store_path = _env_path(_k("STORE_PATH"), Path("todos.json"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            log_to_file=log_to_file,
            store_path=store_path,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Only ./.env; no walking up parent directories.
    load_dotenv(dotenv_path=Path(".env"), override=False)
    return Settings.from_env()
