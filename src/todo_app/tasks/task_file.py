# src/todo_app/tasks/task_file.py

"""
Flat-file persistence for the task list.

One record per line, `<text>,<flag>`, where flag is "1" (done) or "0".
No header, no quoting. On read only the FIRST comma is a delimiter, so task
text containing commas does not survive a round trip unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)

DONE_FLAG = "1"
OPEN_FLAG = "0"


def format_line(task: Task) -> str:
    flag = DONE_FLAG if task.done else OPEN_FLAG
    return f"{task.text},{flag}\n"


def parse_line(line: str) -> Task | None:
    """Parse one stored line; returns None for lines without a delimiter."""
    parts = line.rstrip("\r\n").split(",", 1)
    if len(parts) != 2:
        return None
    return Task(text=parts[0], done=parts[1] == DONE_FLAG)


class TaskFile:
    """
    Line-oriented task file.

    save() always rewrites the whole file (truncate, never append).
    load() treats a missing file as the normal first-run state.
    """

    def __init__(self, path: str | Path = "tasks.csv") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def save(self, tasks: Iterable[Task]) -> None:
        """
        Overwrite the file with `tasks`.

        Raises OSError on I/O failure and UnicodeEncodeError for text UTF-8
        cannot represent; encoding happens before the file is truncated.
        """
        tasks = list(tasks)
        data = "".join(format_line(task) for task in tasks).encode("utf-8")
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("wb") as fh:
            fh.write(data)
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.debug("Task file %s not found; starting with an empty list.", self._path)
            return []

        tasks: list[Task] = []
        skipped = 0
        try:
            with self._path.open("r", encoding="utf-8", newline="") as fh:
                for line in fh:
                    task = parse_line(line)
                    if task is None:
                        skipped += 1
                        continue
                    tasks.append(task)
        except (OSError, UnicodeDecodeError):
            logger.warning("Failed to read task file %s; starting empty.", self._path, exc_info=True)
            return []

        logger.debug("Loaded %d tasks from %s (skipped=%d)", len(tasks), self._path, skipped)
        return tasks
