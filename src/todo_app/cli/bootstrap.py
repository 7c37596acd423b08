# src/todo_app/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- wires the task file, store and controller into AppState.

The frontend supplies its own Notifier (dialog box or console line).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.controller import TaskListController
from ..core.ports import Notifier
from ..core.state import AppState
from ..tasks.task_file import TaskFile
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_file.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, notifier: Notifier, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings(). Tasks are not loaded here;
    frontends call controller.on_startup() once their view is subscribed.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    task_file = TaskFile(settings.tasks_file)
    task_store = TaskStore(task_file)
    controller = TaskListController(task_store, notifier)
    logger.debug("State created tasks_file=%s", task_file.path)

    return AppState(
        settings=settings,
        task_file=task_file,
        task_store=task_store,
        controller=controller,
    )
