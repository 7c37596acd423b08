# src/todo_app/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store and controller depend on Protocols instead of concrete
implementations, so the file backend and the frontends stay swappable
and tests can plug in fakes.
"""

from typing import Iterable, Protocol

from ..tasks.task_models import Task


class TaskPersistence(Protocol):
    """Whole-list persistence: save rewrites everything, load returns file order."""

    def save(self, tasks: Iterable[Task]) -> None: ...
    def load(self) -> list[Task]: ...


class TaskListener(Protocol):
    """Observer called with a snapshot after every store change."""

    def __call__(self, tasks: tuple[Task, ...]) -> None: ...


class Notifier(Protocol):
    """Frontend-side port for user-facing warnings (modal dialog, console line, ...)."""

    def warn(self, title: str, message: str) -> None: ...
