# src/todo_app/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace


class InvalidTaskError(ValueError):
    """Task text that cannot be stored; the message is shown to the user as is."""


class EmptyTaskError(InvalidTaskError):
    def __init__(self, message: str = "Task cannot be empty!") -> None:
        super().__init__(message)


class MultilineTaskError(InvalidTaskError):
    """One task is one line in the task file."""

    def __init__(self, message: str = "Task cannot contain line breaks!") -> None:
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class Task:
    text: str
    done: bool = False

    def toggled(self) -> Task:
        return replace(self, done=not self.done)
