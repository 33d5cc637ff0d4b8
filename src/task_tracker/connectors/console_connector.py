# src/task_tracker/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..cli.commands import run_and_report
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_console_loop(state: AppState) -> None:
    """Free-text REPL: add <description> | list | complete <id> | help | quit."""
    logger.info("Console connector started.")
    app_name = str(getattr(state.settings, "app_name", "Task Tracker"))
    state.ui.notify(f"Welcome to {app_name}!")
    state.ui.notify("Commands: add, list, complete, help, quit\n")

    while state.running:
        try:
            line = state.ui.read_line("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            state.ui.notify("")
            break

        if not line:
            continue

        run_and_report(state, lambda: command_registry.handle(state, line))

    logger.info("Console connector finished.")
