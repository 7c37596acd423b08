# src/todo_app/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console frontend (/add, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        The argument text is passed through as typed (only the separator
        after the command name is dropped), so task text keeps its spacing.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        arg_text = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, arg_text)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_tasks(tasks: tuple[Task, ...]) -> str:
    if not tasks:
        return "No tasks."
    lines = []
    for i, task in enumerate(tasks, start=1):
        mark = "x" if task.done else " "
        lines.append(f"{i}. [{mark}] {task.text}")
    return "\n".join(lines)


def cmd_help(state: AppState, arg_text: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, arg_text: str) -> str:
    return format_tasks(state.task_store.list())


def cmd_add(state: AppState, arg_text: str) -> str:
    # Empty input is reported by the controller through the notifier.
    if not state.controller.on_add_clicked(arg_text):
        return "Nothing added."
    return format_tasks(state.task_store.list())


def cmd_toggle(state: AppState, arg_text: str) -> str:
    """
    /toggle N  -> flip the checkbox of task N (1-based, as shown by /list)
    """
    usage = "Usage: /toggle <number>. Use /list to see task numbers."
    raw = arg_text.strip()
    if not raw:
        return usage
    try:
        number = int(raw)
    except ValueError:
        return usage

    total = len(state.task_store)
    if number < 1 or number > total:
        return f"No task #{number}. There are {total} tasks."

    state.controller.on_toggle_clicked(number - 1)
    return format_tasks(state.task_store.list())


def cmd_delete(state: AppState, arg_text: str) -> str:
    removed = state.controller.on_delete_selected_clicked()
    if not removed:
        return "No checked tasks to delete."
    return f"Deleted {removed} checked task(s).\n" + format_tasks(state.task_store.list())


def cmd_clear(state: AppState, arg_text: str) -> str:
    logger.debug("Clear-all requested (had %d tasks)", len(state.task_store))
    state.controller.on_clear_all_clicked()
    return "All tasks cleared."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.")
registry.register("toggle", cmd_toggle, help_text="Check/uncheck a task: /toggle <number>.", aliases=["done"])
registry.register("delete", cmd_delete, help_text="Delete all checked tasks.", aliases=["del"])
registry.register("clear", cmd_clear, help_text="Delete all tasks.")
