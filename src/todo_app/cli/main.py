# src/todo_app/cli/main.py

"""
CLI entrypoint.

Initializes logging, then starts one frontend:
- tkinter window (default),
- console REPL (TODO_FRONTEND=console, or when no display is available).
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import ConsoleNotifier, run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _run_console(settings) -> None:
    state = create_initial_state(notifier=ConsoleNotifier(), settings=settings)
    run_console_loop(state)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (frontend=%s)...", settings.app_title, settings.frontend)

    if settings.frontend == "gui":
        from ..connectors.tk_connector import GuiUnavailableError, run_tk_app

        try:
            run_tk_app(settings)
        except GuiUnavailableError as e:
            logger.warning("GUI unavailable (%s); falling back to console.", e)
            _run_console(settings)
    else:
        _run_console(settings)

    logger.info("Bye.")


if __name__ == "__main__":
    main()
