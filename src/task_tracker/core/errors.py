# src/task_tracker/core/errors.py

"""
User-facing error taxonomy.

Every error here is recoverable: the command loops report str(exc) to the
user and keep running.
"""

from __future__ import annotations


class TaskTrackerError(Exception):
    """Base class for errors reported back to the user."""


class EmptyDescriptionError(TaskTrackerError):
    def __init__(self) -> None:
        super().__init__("Task description must not be empty.")


class InvalidTaskIdError(TaskTrackerError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__("Invalid task ID")


class TaskNotFoundError(TaskTrackerError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")


class UnrecognizedCommandError(TaskTrackerError):
    def __init__(self, command: str, hint: str = "Try: add, list, complete, quit") -> None:
        self.command = command
        super().__init__(f"Unknown command: {command}. {hint}")


class InvalidMenuChoiceError(UnrecognizedCommandError):
    def __init__(self, choice: str, options: str) -> None:
        super().__init__(choice)
        self.args = (f"Invalid choice: {choice!r}. Choose one of {options}.",)
