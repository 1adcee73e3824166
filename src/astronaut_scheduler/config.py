# src/astronaut_scheduler/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a usable default; nothing is required at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from dotenv import load_dotenv

ENV_PREFIX = "ASTRO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    parts = [p.strip() for p in raw.replace(",", " ").split() if p.strip()]
    return parts


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
    log_color: bool
    log_to_file: bool
    log_dir: Path

    # ---- Schedule ----
    crew: List[str]
    default_priority: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "astronaut-scheduler"),
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            log_color=_env_bool(_k("LOG_COLOR"), True),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            log_dir=_env_path(_k("LOG_DIR"), Path(".local/astro")),
            crew=_env_list(_k("CREW"), ["Neil"]),
            default_priority=_env(_k("DEFAULT_PRIORITY"), "Medium").strip() or "Medium",
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
