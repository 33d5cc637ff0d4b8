# src/task_tracker/connectors/rich_console.py

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..core.models import Task
from ..core.ports import NoticeLevel
from .plain_console import EMPTY_HINT

_LEVEL_STYLE: dict[str, tuple[str, str]] = {
    "info": ("", "cyan"),
    "success": ("✔ ", "green"),
    "error": ("✘ ", "bold red"),
}


def build_task_table(tasks: Sequence[Task]) -> Table:
    table = Table(title="📋 Your Tasks", title_style="bold", header_style="bold cyan")
    table.add_column("ID", justify="right", style="magenta")
    table.add_column("Task")
    table.add_column("Status")

    for task in tasks:
        # Text() keeps user input from being parsed as rich markup.
        if task.completed:
            desc = Text(task.description, style="dim green")
            status = Text("✓ done", style="bold green")
        else:
            desc = Text(task.description)
            status = Text("○ pending", style="yellow")
        table.add_row(str(task.id), desc, status)
    return table


class RichConsole:
    """Colorized Interaction backed by a rich Console (table listing, styled notices)."""

    def __init__(self, console: Console | None = None, *, empty_hint: str = EMPTY_HINT) -> None:
        self.console = console or Console()
        self.empty_hint = empty_hint

    def read_line(self, prompt: str = "> ") -> str:
        return self.console.input(Text(prompt, style="bold blue"))

    def prompt(self, question: str) -> str:
        return self.console.input(Text(f"{question}: ", style="bold blue"))

    def render_list(self, tasks: Sequence[Task]) -> None:
        if not tasks:
            self.console.print(Text(self.empty_hint, style="yellow"))
            return
        self.console.print(build_task_table(tasks))

    def render_menu(self, title: str, options: Sequence[tuple[str, str]]) -> None:
        self.console.print()
        self.console.print(Text(f"--- {title} ---", style="bold cyan"))
        for key, label in options:
            line = Text()
            line.append(f"{key}. ", style="bold magenta")
            line.append(label)
            self.console.print(line)

    def notify(self, message: str, level: NoticeLevel = "info") -> None:
        prefix, style = _LEVEL_STYLE.get(level, ("", ""))
        self.console.print(Text(f"{prefix}{message}", style=style))
