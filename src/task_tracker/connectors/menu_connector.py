# src/task_tracker/connectors/menu_connector.py

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..cli.commands import registry as command_registry
from ..cli.commands import Reply, run_and_report
from ..core.errors import InvalidMenuChoiceError
from ..core.state import AppState

logger = logging.getLogger(__name__)

MENU_TITLE = "TO-DO LIST MENU"


@dataclass(frozen=True, slots=True)
class MenuOption:
    key: str
    label: str
    command: str
    # Follow-up question whose answer becomes the command argument.
    question: str | None = None


MENU_OPTIONS: tuple[MenuOption, ...] = (
    MenuOption("1", "Add task", "add", question="Enter task description"),
    MenuOption("2", "View tasks", "list"),
    MenuOption("3", "Complete task", "complete", question="Enter task ID to mark complete"),
    MenuOption("4", "Quit", "quit"),
)

_BY_KEY = {opt.key: opt for opt in MENU_OPTIONS}


def _select(choice: str) -> MenuOption:
    opt = _BY_KEY.get(choice)
    if opt is None:
        raise InvalidMenuChoiceError(choice, "/".join(_BY_KEY))
    return opt


def _run_option(state: AppState, choice: str) -> Reply | None:
    opt = _select(choice)
    arg = state.ui.prompt(opt.question) if opt.question else ""
    return command_registry.dispatch(state, opt.command, arg)


def run_menu_loop(state: AppState) -> None:
    """Numbered menu: 1 add, 2 list, 3 complete, 4 quit."""
    logger.info("Menu connector started.")
    app_name = str(getattr(state.settings, "app_name", "Task Tracker"))
    state.ui.notify(f"Welcome to {app_name}!")

    options = [(opt.key, opt.label) for opt in MENU_OPTIONS]

    while state.running:
        state.ui.render_menu(MENU_TITLE, options)
        try:
            choice = state.ui.prompt("Choose an option").strip()
            run_and_report(state, lambda: _run_option(state, choice))
        except EOFError:
            logger.info("Menu EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Menu KeyboardInterrupt, exiting.")
            state.ui.notify("")
            break

    logger.info("Menu connector finished.")
