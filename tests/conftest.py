# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_app.cli.bootstrap import create_initial_state
from todo_app.core.state import AppState

from .fakes import RecordingNotifier


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and frontends.

    We use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_title="Test To-Do",
        log_level="DEBUG",
        frontend="console",
        data_dir=tmp_path / "data",
        tasks_file=tmp_path / "tasks.csv",
    )


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def state(settings: SimpleNamespace, notifier: RecordingNotifier) -> AppState:
    """
    AppState wired with a recording notifier.

    The real TaskFile is kept (under tmp_path) because the on-disk format
    is part of what we want to test.
    """
    return create_initial_state(notifier=notifier, settings=settings)
