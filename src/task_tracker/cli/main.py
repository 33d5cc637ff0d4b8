# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the configured command loop
(free-text REPL or numbered menu) in the main thread until quit or end of input.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, select_loop
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = logging.getLevelNamesMapping().get(level_name, logging.WARNING)
    setup_logging(log_dir=getattr(settings, "log_dir", None), console_level=console_level)

    logger.info("Starting %s (ui=%s)...", settings.app_name, settings.ui_mode)

    state = create_initial_state(settings=settings)
    run_loop = select_loop(settings)

    try:
        run_loop(state)
    finally:
        logger.info("Bye. tasks=%d", len(state.task_store))


if __name__ == "__main__":
    main()
