# src/todo_app/core/controller.py

"""
UI-to-core contract.

Every frontend (tkinter window, console REPL) routes its events through
TaskListController. The controller mutates the store and reports
user-facing problems through the Notifier port; it never touches widgets.
"""

from __future__ import annotations

import logging

from ..tasks.task_models import InvalidTaskError, Task
from ..tasks.task_store import TaskStore
from .ports import Notifier

logger = logging.getLogger(__name__)

WARNING_TITLE = "Warning"


class TaskListController:
    def __init__(self, store: TaskStore, notifier: Notifier) -> None:
        self.store = store
        self.notifier = notifier

    def on_startup(self) -> tuple[Task, ...]:
        self.store.load()
        return self.store.list()

    def on_add_clicked(self, input_text: str) -> bool:
        """Returns True if a task was added (frontends clear their input then)."""
        try:
            self.store.add(input_text)
        except InvalidTaskError as e:
            logger.debug("Rejected task input: %s", e)
            self.notifier.warn(WARNING_TITLE, str(e))
            return False
        return True

    def on_toggle_clicked(self, index: int) -> None:
        self.store.toggle(index)

    def on_delete_selected_clicked(self) -> int:
        return self.store.remove_selected(lambda task: task.done)

    def on_clear_all_clicked(self) -> None:
        self.store.clear_all()
