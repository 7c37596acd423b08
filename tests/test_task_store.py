# tests/test_task_store.py

from __future__ import annotations

import logging

import pytest

from todo_app.tasks.task_file import TaskFile
from todo_app.tasks.task_models import EmptyTaskError, MultilineTaskError, Task
from todo_app.tasks.task_store import TaskStore

from .fakes import FailingPersistence, MemoryPersistence, UnencodablePersistence


def test_add_trims_and_appends_open_task() -> None:
    store = TaskStore()
    store.add("first")
    task = store.add("   Buy milk \t")

    assert task == Task(text="Buy milk", done=False)
    assert store.list() == (Task("first"), Task("Buy milk"))


@pytest.mark.parametrize("raw", ["", "   ", "\t\n "])
def test_add_rejects_blank_text_without_side_effects(raw: str) -> None:
    persistence = MemoryPersistence()
    store = TaskStore(persistence)
    store.add("keep me")
    seen: list[tuple[Task, ...]] = []
    store.subscribe(seen.append)

    with pytest.raises(EmptyTaskError):
        store.add(raw)

    assert store.list() == (Task("keep me"),)
    assert len(persistence.saves) == 1
    assert seen == []


def test_duplicates_are_allowed() -> None:
    store = TaskStore()
    store.add("same")
    store.add("same")
    assert len(store) == 2


def test_every_mutation_saves_the_whole_list() -> None:
    persistence = MemoryPersistence()
    store = TaskStore(persistence)

    store.add("A")
    store.add("B")
    store.toggle(0)
    store.remove_selected()
    store.clear_all()

    assert persistence.saves == [
        [Task("A")],
        [Task("A"), Task("B")],
        [Task("A", True), Task("B")],
        [Task("B")],
        [],
    ]


def test_toggle_flips_done_flag_back_and_forth() -> None:
    store = TaskStore()
    store.add("Buy milk")

    assert store.toggle(0) == Task("Buy milk", True)
    assert store.toggle(0) == Task("Buy milk", False)


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_toggle_out_of_range_raises_index_error(index: int) -> None:
    store = TaskStore()
    store.add("only")

    with pytest.raises(IndexError):
        store.toggle(index)
    assert store.list() == (Task("only"),)


def test_remove_selected_uses_done_flag_by_default() -> None:
    store = TaskStore()
    for text in ("a", "b", "c", "d"):
        store.add(text)
    store.toggle(0)
    store.toggle(2)

    assert store.remove_selected() == 2
    assert store.list() == (Task("b"), Task("d"))


def test_remove_selected_with_predicate_scenario(tmp_path) -> None:
    path = tmp_path / "tasks.csv"
    store = TaskStore(TaskFile(path))
    store.add("A")
    store.add("B")

    removed = store.remove_selected(lambda task: task.text == "A")

    assert removed == 1
    assert store.list() == (Task("B", False),)
    assert path.read_text(encoding="utf-8") == "B,0\n"


def test_remove_selected_without_matches_does_not_save() -> None:
    persistence = MemoryPersistence()
    store = TaskStore(persistence)
    store.add("open")
    saves_before = len(persistence.saves)

    assert store.remove_selected() == 0
    assert len(persistence.saves) == saves_before


def test_clear_all_is_idempotent_and_saves_each_time() -> None:
    persistence = MemoryPersistence()
    store = TaskStore(persistence)
    store.add("x")

    store.clear_all()
    store.clear_all()

    assert store.list() == ()
    assert persistence.saves[-2:] == [[], []]


def test_load_replaces_list_without_writing_back() -> None:
    persistence = MemoryPersistence([Task("old", True), Task("new")])
    store = TaskStore(persistence)

    assert store.load() == 2
    assert store.list() == (Task("old", True), Task("new"))
    assert persistence.saves == []


def test_listeners_receive_snapshots_and_can_unsubscribe() -> None:
    store = TaskStore()
    seen: list[tuple[Task, ...]] = []
    unsubscribe = store.subscribe(seen.append)

    store.add("one")
    unsubscribe()
    store.add("two")

    assert seen == [(Task("one"),)]


def test_failing_listener_does_not_block_others(caplog) -> None:
    store = TaskStore()
    seen: list[int] = []

    def broken(_tasks) -> None:
        raise RuntimeError("boom")

    store.subscribe(broken)
    store.subscribe(lambda tasks: seen.append(len(tasks)))

    with caplog.at_level(logging.ERROR, logger="todo_app.tasks.task_store"):
        store.add("one")

    assert seen == [1]
    assert "Task listener failed" in caplog.text


def test_save_failure_keeps_in_memory_state(caplog) -> None:
    persistence = FailingPersistence()
    store = TaskStore(persistence)

    with caplog.at_level(logging.ERROR, logger="todo_app.tasks.task_store"):
        store.add("survives")

    assert store.list() == (Task("survives"),)
    assert store.last_save_failed is True
    assert "Failed to save" in caplog.text


def test_list_is_a_read_only_snapshot() -> None:
    store = TaskStore()
    store.add("a")
    snapshot = store.list()
    store.add("b")

    assert snapshot == (Task("a"),)
    with pytest.raises(AttributeError):
        snapshot[0].done = True  # type: ignore[misc]


@pytest.mark.parametrize("raw", ["Buy milk\nand eggs", "one\r\ntwo", "carriage\rreturn"])
def test_add_rejects_line_breaks_inside_text(raw: str) -> None:
    persistence = MemoryPersistence()
    store = TaskStore(persistence)

    with pytest.raises(MultilineTaskError):
        store.add(raw)

    assert store.list() == ()
    assert persistence.saves == []


def test_trailing_newline_is_trimmed_not_rejected(tmp_path) -> None:
    path = tmp_path / "tasks.csv"
    store = TaskStore(TaskFile(path))
    store.add("Buy milk\n")

    restarted = TaskStore(TaskFile(path))
    restarted.load()
    assert restarted.list() == (Task("Buy milk"),)


def test_encoding_failure_on_save_keeps_memory_and_notifies(caplog) -> None:
    store = TaskStore(UnencodablePersistence())
    seen: list[tuple[Task, ...]] = []
    store.subscribe(seen.append)

    with caplog.at_level(logging.ERROR, logger="todo_app.tasks.task_store"):
        store.add("bad \ud800")

    assert store.list() == (Task("bad \ud800"),)
    assert seen == [(Task("bad \ud800"),)]
    assert store.last_save_failed is True
    assert "Failed to save" in caplog.text


def test_unencodable_text_leaves_previous_file_intact(tmp_path) -> None:
    path = tmp_path / "tasks.csv"
    store = TaskStore(TaskFile(path))
    store.add("keep me")

    store.add("bad \ud800")

    assert store.last_save_failed is True
    assert len(store) == 2
    assert path.read_text(encoding="utf-8") == "keep me,0\n"

    store.remove_selected(lambda task: task.text.startswith("bad"))
    assert store.last_save_failed is False
