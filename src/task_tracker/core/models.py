# src/task_tracker/core/models.py

from __future__ import annotations

from dataclasses import dataclass

TaskId = int


@dataclass(frozen=True, slots=True)
class Task:
    """
    Snapshot of a single to-do item.

    Snapshots are immutable; TaskStore replaces its own copy when a task
    gets completed, so values handed out by list()/get() never change.
    """

    id: TaskId
    description: str
    completed: bool = False
