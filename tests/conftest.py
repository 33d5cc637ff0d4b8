# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from task_tracker.core.state import AppState
from task_tracker.core.store import TaskStore

from .fakes import FakeInteraction


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the loops.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="Test Tracker",
        ui_mode="repl",
        color=False,
        log_level="WARNING",
        log_dir=None,
    )


@pytest.fixture()
def ui() -> FakeInteraction:
    return FakeInteraction()


@pytest.fixture()
def state(settings: SimpleNamespace, ui: FakeInteraction) -> AppState:
    """AppState wired with a fresh in-memory store and the scripted UI."""
    return AppState(settings=settings, task_store=TaskStore(), ui=ui)
