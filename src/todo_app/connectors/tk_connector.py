# src/todo_app/connectors/tk_connector.py

"""
tkinter frontend.

The window never owns task data: it forwards clicks to the controller and
redraws the checkbox column from TaskStore.list() whenever the store
notifies. Redraws are deferred with after_idle so a checkbutton is never
destroyed inside its own command callback.
"""

from __future__ import annotations

import logging
import tkinter as tk
from collections.abc import Callable
from tkinter import messagebox

from ..cli.bootstrap import create_initial_state
from ..core.controller import TaskListController
from ..core.state import AppState
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

FONT = ("Arial", 14)
BUTTON_FONT = ("Arial", 12, "bold")
PANEL_BG = "#F0F0F0"
LIST_BG = "#FFFFFF"
ADD_COLOR = "#4CAF50"
DELETE_COLOR = "#FF5733"
CLEAR_COLOR = "#F44336"


class GuiUnavailableError(RuntimeError):
    """No usable display / Tk installation."""


def darker(color: str, factor: float = 0.7) -> str:
    """Darken a #RRGGBB color (used for button hover)."""
    r, g, b = (int(color[i : i + 2], 16) for i in (1, 3, 5))
    return "#{:02X}{:02X}{:02X}".format(int(r * factor), int(g * factor), int(b * factor))


class TkNotifier:
    """Blocking warning dialog, parented to the main window once it exists."""

    def __init__(self, parent: tk.Misc | None = None) -> None:
        self.parent = parent

    def warn(self, title: str, message: str) -> None:
        messagebox.showwarning(title, message, parent=self.parent)


def _style_button(button: tk.Button, color: str) -> None:
    hover = darker(color)
    button.configure(
        bg=color,
        fg="white",
        activebackground=hover,
        activeforeground="white",
        font=BUTTON_FONT,
        relief=tk.FLAT,
        padx=10,
        pady=5,
    )
    button.bind("<Enter>", lambda _e: button.configure(bg=hover))
    button.bind("<Leave>", lambda _e: button.configure(bg=color))


class RedrawScheduler:
    """
    Collapses store notifications into one redraw per idle cycle.

    `root` only needs after_idle(), so this runs against a fake root in tests.
    """

    def __init__(self, root, store: TaskStore, redraw: Callable[[], None]) -> None:
        self._root = root
        self._redraw = redraw
        self.pending = False
        self._unsubscribe = store.subscribe(self._on_change)

    def _on_change(self, _tasks: tuple[Task, ...]) -> None:
        if self.pending:
            return
        self.pending = True
        self._root.after_idle(self._run)

    def _run(self) -> None:
        self.pending = False
        self._redraw()

    def stop(self) -> None:
        self._unsubscribe()


def submit_entry(controller: TaskListController, entry) -> bool:
    """Add the entry text as a task; clear the entry only on success."""
    if not controller.on_add_clicked(entry.get()):
        return False
    entry.delete(0, tk.END)
    return True


class TaskListWindow:
    def __init__(self, root: tk.Tk, state: AppState) -> None:
        self.root = root
        self.state = state
        self._vars: list[tk.BooleanVar] = []

        root.title(str(getattr(state.settings, "app_title", "To-Do List")))
        root.geometry("400x500")

        # Input row
        input_panel = tk.Frame(root, bg=PANEL_BG, padx=10, pady=10)
        input_panel.pack(side=tk.TOP, fill=tk.X)

        tk.Label(input_panel, text="Task:", font=FONT, bg=PANEL_BG).pack(side=tk.LEFT)

        self.task_entry = tk.Entry(input_panel, font=FONT, width=20)
        self.task_entry.pack(side=tk.LEFT, padx=5, fill=tk.X, expand=True)
        self.task_entry.bind("<Return>", lambda _e: self.add_task())

        add_button = tk.Button(input_panel, text="Add Task", command=self.add_task)
        _style_button(add_button, ADD_COLOR)
        add_button.pack(side=tk.LEFT)

        # Action row
        buttons_panel = tk.Frame(root, bg=PANEL_BG, padx=10, pady=10)
        buttons_panel.pack(side=tk.BOTTOM, fill=tk.X)

        delete_button = tk.Button(
            buttons_panel, text="Delete Selected", command=self.state.controller.on_delete_selected_clicked
        )
        _style_button(delete_button, DELETE_COLOR)
        delete_button.pack(side=tk.LEFT, padx=5, expand=True)

        clear_button = tk.Button(
            buttons_panel, text="Clear All", command=self.state.controller.on_clear_all_clicked
        )
        _style_button(clear_button, CLEAR_COLOR)
        clear_button.pack(side=tk.LEFT, padx=5, expand=True)

        # Scrollable task column
        body = tk.Frame(root, bg=LIST_BG)
        body.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

        self.canvas = tk.Canvas(body, bg=LIST_BG, highlightthickness=0)
        scrollbar = tk.Scrollbar(body, orient=tk.VERTICAL, command=self.canvas.yview)
        self.canvas.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        self.tasks_panel = tk.Frame(self.canvas, bg=LIST_BG)
        panel_id = self.canvas.create_window((0, 0), window=self.tasks_panel, anchor="nw")
        self.canvas.bind("<Configure>", lambda e: self.canvas.itemconfigure(panel_id, width=e.width))
        self.tasks_panel.bind(
            "<Configure>", lambda _e: self.canvas.configure(scrollregion=self.canvas.bbox("all"))
        )

        self._redraws = RedrawScheduler(root, state.task_store, self.render)

    # ---- events ----

    def add_task(self) -> None:
        submit_entry(self.state.controller, self.task_entry)

    # ---- view ----

    def render(self) -> None:
        for child in self.tasks_panel.winfo_children():
            child.destroy()
        self._vars = []

        for index, task in enumerate(self.state.task_store.list()):
            var = tk.BooleanVar(master=self.root, value=task.done)
            box = tk.Checkbutton(
                self.tasks_panel,
                text=task.text,
                variable=var,
                font=FONT,
                bg=LIST_BG,
                anchor="w",
                command=lambda i=index: self.state.controller.on_toggle_clicked(i),
            )
            box.pack(side=tk.TOP, fill=tk.X, anchor="w")
            self._vars.append(var)

    def close(self) -> None:
        self._redraws.stop()
        self.root.destroy()


def create_root() -> tk.Tk:
    try:
        return tk.Tk()
    except tk.TclError as e:
        raise GuiUnavailableError(str(e)) from e


def run_tk_app(settings) -> AppState:
    root = create_root()
    notifier = TkNotifier(root)
    state = create_initial_state(notifier=notifier, settings=settings)

    window = TaskListWindow(root, state)
    root.protocol("WM_DELETE_WINDOW", window.close)

    # The load notification schedules the first render.
    tasks = state.controller.on_startup()
    logger.info("GUI started with %d tasks (tasks_file=%s).", len(tasks), state.task_file.path)

    root.mainloop()
    logger.info("GUI closed.")
    return state
