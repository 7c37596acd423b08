# src/todo_app/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import TaskListener, TaskPersistence
from .task_models import EmptyTaskError, MultilineTaskError, Task

logger = logging.getLogger(__name__)


def _is_done(task: Task) -> bool:
    return task.done


class TaskStore:
    """
    In-memory task list; the only owner of task data.

    Every mutation is followed by a synchronous full save through the
    injected persistence (if any), then listeners are notified with a
    snapshot. Save failures are logged and swallowed: the in-memory list
    stays authoritative for the rest of the session and is never rolled back.

    Single-threaded: meant to be driven from one UI event loop.
    """

    def __init__(self, persistence: TaskPersistence | None = None) -> None:
        self._persistence = persistence
        self._tasks: list[Task] = []
        self._listeners: list[TaskListener] = []
        self.last_save_failed = False

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- observers ----

    def subscribe(self, listener: TaskListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.list()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Task listener failed.")

    # ---- persistence ----

    def _persist(self) -> None:
        if self._persistence is None:
            return
        try:
            self._persistence.save(self._tasks)
            self.last_save_failed = False
        except (OSError, UnicodeError):
            self.last_save_failed = True
            logger.exception("Failed to save %d tasks; keeping in-memory state.", len(self._tasks))

    def _changed(self) -> None:
        self._persist()
        self._notify()

    def load(self) -> int:
        """Replace the list with the persisted one. Does not write back."""
        tasks = self._persistence.load() if self._persistence is not None else []
        self._tasks = list(tasks)
        logger.info("TaskStore loaded %d tasks", len(self._tasks))
        self._notify()
        return len(self._tasks)

    # ---- public API ----

    def list(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def add(self, raw_text: str) -> Task:
        text = (raw_text or "").strip()
        if not text:
            raise EmptyTaskError()
        if "\n" in text or "\r" in text:
            raise MultilineTaskError()
        task = Task(text=text, done=False)
        self._tasks.append(task)
        logger.debug("Task added index=%d text=%r", len(self._tasks) - 1, text)
        self._changed()
        return task

    def toggle(self, index: int) -> Task:
        # Negative indexes are a wiring bug too, not "count from the end".
        if index < 0 or index >= len(self._tasks):
            raise IndexError(f"task index out of range: {index}")
        task = self._tasks[index].toggled()
        self._tasks[index] = task
        logger.debug("Task toggled index=%d done=%s", index, task.done)
        self._changed()
        return task

    def remove_selected(self, predicate: Callable[[Task], bool] | None = None) -> int:
        """
        Remove every task matching `predicate` in one pass.

        The default predicate is the done flag: a checked checkbox means both
        "completed" and "selected for deletion".
        """
        pred = predicate or _is_done
        kept = [t for t in self._tasks if not pred(t)]
        removed = len(self._tasks) - len(kept)
        if removed:
            self._tasks = kept
            logger.debug("Removed %d tasks, %d left", removed, len(kept))
            self._changed()
        return removed

    def clear_all(self) -> None:
        self._tasks.clear()
        logger.debug("All tasks cleared")
        self._changed()
