# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command loops.

The loops and command handlers depend on this Protocol instead of a concrete
console, so the plain REPL and the colorized menu share all task logic.
"""

from collections.abc import Sequence
from typing import Literal, Protocol

from .models import Task

NoticeLevel = Literal["info", "success", "error"]


class Interaction(Protocol):
    """Presentation strategy: how lines are read and results are shown."""

    def read_line(self, prompt: str = "> ") -> str:
        """Read one raw line. Raises EOFError when input is exhausted."""
        ...

    def prompt(self, question: str) -> str:
        """Ask a follow-up question (menu flows) and return the answer."""
        ...

    def render_list(self, tasks: Sequence[Task]) -> None: ...

    def notify(self, message: str, level: NoticeLevel = "info") -> None: ...

    def render_menu(self, title: str, options: Sequence[tuple[str, str]]) -> None:
        """Show the numbered menu (menu variant only)."""
        ...
