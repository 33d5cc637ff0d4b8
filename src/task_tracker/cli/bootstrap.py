# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- picks the Interaction implementation (plain or rich),
- wires a fresh TaskStore into AppState,
- picks the command loop for the configured UI mode.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..connectors.menu_connector import run_menu_loop
from ..connectors.plain_console import EMPTY_HINT, MENU_EMPTY_HINT, PlainConsole
from ..connectors.rich_console import RichConsole
from ..core.ports import Interaction
from ..core.state import AppState
from ..core.store import TaskStore

logger = logging.getLogger(__name__)

LOOPS: dict[str, Callable[[AppState], None]] = {
    "repl": run_console_loop,
    "menu": run_menu_loop,
}


def create_interaction(settings) -> Interaction:
    menu = str(getattr(settings, "ui_mode", "repl")).lower() == "menu"
    empty_hint = MENU_EMPTY_HINT if menu else EMPTY_HINT
    if getattr(settings, "color", False):
        return RichConsole(empty_hint=empty_hint)
    return PlainConsole(empty_hint=empty_hint)


def create_initial_state(*, settings=None, ui: Interaction | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the Interaction) injectable makes the app easy to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if ui is None:
        ui = create_interaction(settings)

    state = AppState(
        settings=settings,
        task_store=TaskStore(),
        ui=ui,
    )
    logger.debug("State created ui=%s", type(ui).__name__)
    return state


def select_loop(settings) -> Callable[[AppState], None]:
    mode = str(getattr(settings, "ui_mode", "repl")).lower()
    loop = LOOPS.get(mode)
    if loop is None:
        logger.warning("Unknown UI mode %r, falling back to repl.", mode)
        return run_console_loop
    return loop
