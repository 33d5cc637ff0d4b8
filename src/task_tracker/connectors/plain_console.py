# src/task_tracker/connectors/plain_console.py

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from ..core.models import Task
from ..core.ports import NoticeLevel

_LEVEL_PREFIX: dict[str, str] = {
    "info": "",
    "success": "✅ ",
    "error": "❌ ",
}

EMPTY_HINT = "📝 No tasks yet. Add one with 'add <task>'"
MENU_EMPTY_HINT = "📝 No tasks yet. Choose 1 to add one."


def format_task_line(task: Task) -> str:
    mark = "✓" if task.completed else " "
    return f"[{mark}] {task.id}. {task.description}"


class PlainConsole:
    """Interaction over plain stdin/stdout, no colors."""

    def __init__(
        self,
        *,
        input_fn: Callable[[str], str] = input,
        out: TextIO | None = None,
        empty_hint: str = EMPTY_HINT,
    ) -> None:
        self._input = input_fn
        self._out = out
        self.empty_hint = empty_hint

    def _print(self, text: str = "") -> None:
        print(text, file=self._out or sys.stdout, flush=True)

    def read_line(self, prompt: str = "> ") -> str:
        return self._input(prompt)

    def prompt(self, question: str) -> str:
        return self._input(f"{question}: ")

    def render_list(self, tasks: Sequence[Task]) -> None:
        if not tasks:
            self._print(self.empty_hint)
            return
        self._print()
        self._print("📋 Your Tasks:")
        for task in tasks:
            self._print(format_task_line(task))
        self._print()

    def render_menu(self, title: str, options: Sequence[tuple[str, str]]) -> None:
        self._print()
        self._print(f"--- {title} ---")
        for key, label in options:
            self._print(f"{key}. {label}")

    def notify(self, message: str, level: NoticeLevel = "info") -> None:
        self._print(f"{_LEVEL_PREFIX.get(level, '')}{message}")
