# src/todo_app/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_file import TaskFile
from ..tasks.task_store import TaskStore
from .controller import TaskListController


@dataclass
class AppState:
    # Settings live on the state so frontends can read title/paths without globals.
    settings: object

    task_file: TaskFile
    task_store: TaskStore
    controller: TaskListController
