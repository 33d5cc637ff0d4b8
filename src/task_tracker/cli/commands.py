# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.errors import TaskTrackerError, UnrecognizedCommandError
from ..core.ports import NoticeLevel
from ..core.state import AppState
from ..core.store import parse_task_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Reply:
    text: str
    level: NoticeLevel = "info"


CommandHandler = Callable[[AppState, str], Reply | None]


class CommandRegistry:
    """Free-text command registry shared by the REPL and the menu (add, list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._usage: dict[str, str] = {}
        self._takes_arg: dict[str, bool] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str | None = None,
        aliases: list[str] | None = None,
        takes_arg: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        self._usage[key] = usage or key
        self._takes_arg[key] = takes_arg
        for alias in aliases:
            self._handlers[alias.lower()] = handler
            self._takes_arg[alias.lower()] = takes_arg

    def handle(self, state: AppState, line: str) -> Reply | None:
        """
        Handle a line like "complete 3".

        The first word selects the command (case-insensitive); the rest of the
        line is passed to the handler untouched apart from surrounding spaces.
        Raises UnrecognizedCommandError for anything unknown.
        """
        text = line.strip()
        if not text:
            return None

        name, *rest = text.split(None, 1)
        return self.dispatch(state, name, rest[0] if rest else "")

    def dispatch(self, state: AppState, name: str, arg: str = "") -> Reply | None:
        key = name.lower()
        handler = self._handlers.get(key)
        if handler is None:
            raise UnrecognizedCommandError(name)
        arg = arg.strip()
        # "list", "quit", ... are exact words; trailing text makes them unknown.
        if arg and not self._takes_arg.get(key, False):
            raise UnrecognizedCommandError(f"{name} {arg}")
        logger.debug("Dispatching command=%s", key)
        return handler(state, arg)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        width = max((len(u) for u in self._usage.values()), default=0)
        for name, help_text in self._help.items():
            lines.append(f"  {self._usage[name].ljust(width)}  {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_add(state: AppState, arg: str) -> Reply:
    task_id = state.task_store.add(arg)
    return Reply(f"Task {task_id} added!", "success")


def cmd_list(state: AppState, arg: str) -> None:
    state.ui.render_list(state.task_store.list())


def cmd_complete(state: AppState, arg: str) -> Reply:
    task_id = parse_task_id(arg)
    task = state.task_store.complete(task_id)
    return Reply(f"Task {task.id} completed!", "success")


def cmd_help(state: AppState, arg: str) -> Reply:
    return Reply(registry.build_help())


def cmd_quit(state: AppState, arg: str) -> Reply:
    state.running = False
    return Reply("👋 Goodbye!")


registry.register("add", cmd_add, help_text="Add a new task.", usage="add <description>", takes_arg=True)
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls"])
registry.register(
    "complete",
    cmd_complete,
    help_text="Mark a task as done.",
    usage="complete <id>",
    aliases=["done"],
    takes_arg=True,
)
registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("quit", cmd_quit, help_text="Leave the tracker.", aliases=["exit", "q"])


def run_and_report(state: AppState, action: Callable[[], Reply | None]) -> None:
    """
    Run one command and show its outcome through state.ui.

    EOFError propagates so the calling loop can end.
    User errors are reported and swallowed; unexpected crashes are logged and
    reported too, so one bad command never ends the session.
    """
    try:
        reply = action()
    except EOFError:
        raise
    except TaskTrackerError as e:
        logger.debug("Command rejected: %s", e)
        state.ui.notify(str(e), "error")
        return
    except Exception:
        logger.exception("Command handler crashed.")
        state.ui.notify("Internal error while handling a command.", "error")
        return

    if reply is not None:
        state.ui.notify(reply.text, reply.level)
