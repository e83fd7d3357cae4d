# src/astro_schedule/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every path lives under a local, gitignored data dir by default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "ASTRO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


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


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    console_log: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_file_path: Path
    audit_log_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "astro-schedule")
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        console_log = _env_bool(_k("CONSOLE_LOG"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/astro"))
        tasks_file_path = _env_path(_k("TASKS_FILE"), data_dir / "tasks.txt")
        audit_log_path = _env_path(_k("AUDIT_LOG"), data_dir / "schedule_log.txt")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_log=console_log,
            data_dir=data_dir,
            tasks_file_path=tasks_file_path,
            audit_log_path=audit_log_path,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load .env once (never overriding real env vars) and cache the result."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
