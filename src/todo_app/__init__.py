"""Single-user to-do list with a tkinter window and a flat-file task store."""

__version__ = "0.1.0"
