# src/task_tracker/__init__.py

"""In-memory interactive task tracker (plain REPL and colorized menu)."""

__version__ = "0.1.0"
