# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required: every value has a default.
- Tests can bypass this module entirely by passing their own settings object.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASKS"

UI_MODES = ("repl", "menu")

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


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


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in choices else default


def _env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App ----
    app_name: str

    # ---- Interaction ----
    ui_mode: str  # "repl" | "menu"
    color: bool

    # ---- Logging ----
    log_level: str
    log_dir: Optional[Path]

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "Task Tracker").strip() or "Task Tracker"

        ui_mode = _env_choice(_k("UI"), UI_MODES, "repl")
        # The menu variant is the colorized one unless told otherwise.
        color = _env_bool(_k("COLOR"), ui_mode == "menu")

        log_level = _env_choice(_k("LOG_LEVEL"), LOG_LEVELS, "warning").upper()
        log_dir = _env_path(_k("LOG_DIR"), None)

        return Settings(
            app_name=app_name,
            ui_mode=ui_mode,
            color=color,
            log_level=log_level,
            log_dir=log_dir,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Look for .env from the working directory, where the user runs the command.
    load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings.from_env()
