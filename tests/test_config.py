# tests/test_config.py

from __future__ import annotations

import os
from pathlib import Path

import pytest

from task_tracker.config import Settings, get_settings

_VARS = ("TASKS_APP_NAME", "TASKS_UI", "TASKS_COLOR", "TASKS_LOG_LEVEL", "TASKS_LOG_DIR")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "Task Tracker"
    assert s.ui_mode == "repl"
    assert s.color is False
    assert s.log_level == "WARNING"
    assert s.log_dir is None


def test_menu_mode_is_colorized_by_default(monkeypatch) -> None:
    monkeypatch.setenv("TASKS_UI", "Menu")
    s = Settings.from_env()
    assert s.ui_mode == "menu"
    assert s.color is True

    monkeypatch.setenv("TASKS_COLOR", "off")
    assert Settings.from_env().color is False


def test_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKS_APP_NAME", "Chores")
    monkeypatch.setenv("TASKS_COLOR", "yes")
    monkeypatch.setenv("TASKS_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKS_LOG_DIR", str(tmp_path))

    s = Settings.from_env()
    assert s.app_name == "Chores"
    assert s.color is True
    assert s.log_level == "DEBUG"
    assert s.log_dir == tmp_path


def test_unknown_ui_mode_falls_back_to_repl(monkeypatch) -> None:
    monkeypatch.setenv("TASKS_UI", "gui")
    assert Settings.from_env().ui_mode == "repl"


@pytest.mark.parametrize("raw", ["basic_format", "getLogger", "verbose", ""])
def test_invalid_log_level_falls_back_to_warning(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("TASKS_LOG_LEVEL", raw)
    assert Settings.from_env().log_level == "WARNING"


def test_get_settings_reads_dotenv_without_overriding_env(monkeypatch, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "TASKS_APP_NAME=From Dotenv\nTASKS_UI=menu\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TASKS_UI", "repl")

    get_settings.cache_clear()
    try:
        s = get_settings()
        assert s.app_name == "From Dotenv"
        # Real environment wins over .env.
        assert s.ui_mode == "repl"
    finally:
        get_settings.cache_clear()
        os.environ.pop("TASKS_APP_NAME", None)
