# src/todo_companion/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Everything has a usable default; a bare checkout runs without any env vars.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from .core.i18n import Language

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.split(",") if p.strip()]


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

    # ---- Display ----
    language: Language

    # ---- Task defaults ----
    default_due_days: int
    # Empty => the localized built-in set (Work, Personal, Study, GameDev).
    seed_categories: List[str]

    # ---- Local paths (ignored by git) ----
    data_dir: Path
    log_dir: Path
    export_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo") or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        language = Language.parse(_env(_k("LANGUAGE"), ""), default=Language.ZH)

        default_due_days = max(0, _env_int(_k("DEFAULT_DUE_DAYS"), 7))
        seed_categories = _env_list(_k("CATEGORIES"), [])

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        log_dir = _env_path(_k("LOG_DIR"), data_dir)
        export_dir = _env_path(_k("EXPORT_DIR"), data_dir / "exports")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            language=language,
            default_due_days=default_due_days,
            seed_categories=seed_categories,
            data_dir=data_dir,
            log_dir=log_dir,
            export_dir=export_dir,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # .env never overrides variables already present in the environment.
    load_dotenv(override=False)
    return Settings.from_env()
