# src/task_tracker/core/store.py

from __future__ import annotations

import logging
import re
from dataclasses import replace

from .errors import EmptyDescriptionError, InvalidTaskIdError, TaskNotFoundError
from .models import Task, TaskId

logger = logging.getLogger(__name__)

# Ids are entered as unsigned machine words; anything wider is rejected as invalid.
MAX_TASK_ID = 2**64 - 1

_ID_RE = re.compile(r"\+?[0-9]+")


def parse_task_id(text: str) -> TaskId:
    """
    Parse a user-supplied id.

    Accepts ASCII digits with an optional leading "+". Raises InvalidTaskIdError
    for anything else, including negatives and values above MAX_TASK_ID.
    """
    raw = text.strip()
    if not _ID_RE.fullmatch(raw):
        raise InvalidTaskIdError(text)
    value = int(raw)
    if value > MAX_TASK_ID:
        raise InvalidTaskIdError(text)
    return value


class TaskStore:
    """
    In-memory task store.

    Owns both the ordered task list and the id counter:
    - ids start at 1 and are never reused
    - insertion order is display order
    - the only mutation after creation is completed False -> True
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id: TaskId = 1
        logger.debug("TaskStore ready")

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def next_id(self) -> TaskId:
        return self._next_id

    def add(self, description: str) -> TaskId:
        text = description.strip()
        if not text:
            raise EmptyDescriptionError()

        task_id = self._next_id
        self._tasks.append(Task(id=task_id, description=text))
        self._next_id += 1
        logger.debug("Task added id=%s total=%s", task_id, len(self._tasks))
        return task_id

    def list(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def get(self, task_id: TaskId) -> Task:
        return self._tasks[self._index_of(task_id)]

    def complete(self, task_id: TaskId) -> Task:
        """Mark a task done. Completing an already completed task is a no-op success."""
        idx = self._index_of(task_id)
        task = self._tasks[idx]
        if not task.completed:
            task = replace(task, completed=True)
            self._tasks[idx] = task
            logger.debug("Task completed id=%s", task_id)
        else:
            logger.debug("Task already completed id=%s", task_id)
        return task

    def _index_of(self, task_id: TaskId) -> int:
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                return idx
        raise TaskNotFoundError(task_id)
