# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import Interaction
from .store import TaskStore


@dataclass
class AppState:
    # Settings object (real Settings or any namespace with the same attributes).
    settings: object

    task_store: TaskStore
    ui: Interaction

    # Flipped by the quit command; loops stop once it is False.
    running: bool = True
