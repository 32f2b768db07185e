import sqlite3

import pytest

from taskboard.models import Task
from taskboard.storage import InvalidTaskError, TaskStore


@pytest.fixture
def store(tmp_path):
    with TaskStore(tmp_path / "todo.db") as opened:
        yield opened


def test_add_returns_pending_task(store):
    task = store.add("Write", "the report", "2024-05-01", "a,b", 3)
    assert task == Task(
        id=1,
        title="Write",
        description="the report",
        due_date="2024-05-01",
        sub_tasks="a,b",
        priority=3,
        status="pending",
    )
    assert store.all_tasks() == [task]


@pytest.mark.parametrize(
    "title, description, due_date, priority",
    [
        ("", "d", "2024-01-01", 1),
        ("t", "", "2024-01-01", 1),
        ("t", "d", "", 1),
        ("t", "d", "2024-01-01", -1),
        ("t", "d", "2024-01-01", 6),
        ("t", "d", "2024-01-01", "7"),
    ],
)
def test_add_rejects_bad_input(store, title, description, due_date, priority):
    with pytest.raises(InvalidTaskError):
        store.add(title, description, due_date, "", priority)
    assert store.all_tasks() == []


def test_non_numeric_priority_counts_as_zero(store):
    task = store.add("t", "d", "2024-01-01", "", "abc")
    assert task.priority == 0


def test_get_missing_is_none(store):
    assert store.get(99) is None


def test_set_status(store):
    task = store.add("t", "d", "2024-01-01")
    store.set_status(task.id, "complete")
    assert store.get(task.id).status == "complete"


def test_delete_then_restore_round_trip(store):
    task = store.add("t", "d", "2024-01-01", "x", 2)
    store.set_status(task.id, "in progress")
    snapshot = store.get(task.id)
    store.delete(task.id)
    assert store.get(task.id) is None
    store.restore(snapshot)
    assert store.get(task.id) == snapshot


def test_restore_existing_id_fails(store):
    task = store.add("t", "d", "2024-01-01")
    with pytest.raises(InvalidTaskError):
        store.restore(task)


def test_overwrite(store):
    task = store.add("t", "d", "2024-01-01")
    changed = Task(
        id=task.id,
        title="new",
        description="desc",
        due_date="2024-02-02",
        sub_tasks="s",
        priority=4,
        status="complete",
    )
    store.overwrite(changed)
    assert store.get(task.id) == changed


def test_orderings(store):
    late = store.add("late", "d", "2024-03-01", "", 1)
    early = store.add("early", "d", "2024-01-01", "", 5)
    middle = store.add("middle", "d", "2024-02-01", "", 3)
    assert [t.id for t in store.tasks_by_deadline()] == [early.id, middle.id, late.id]
    assert [t.id for t in store.tasks_by_priority()] == [early.id, middle.id, late.id]
    priorities = [t.priority for t in store.tasks_by_priority()]
    assert priorities == sorted(priorities, reverse=True)


def test_active_tasks_exclude_complete(store):
    a = store.add("a", "d", "2024-01-01")
    b = store.add("b", "d", "2024-01-01")
    c = store.add("c", "d", "2024-01-01")
    store.set_status(b.id, "in progress")
    store.set_status(c.id, "complete")
    assert [t.id for t in store.active_tasks()] == [a.id, b.id]


def test_search_title_and_description(store):
    a = store.add("Buy milk", "groceries", "2024-01-01")
    b = store.add("Call", "about MILK prices", "2024-01-01")
    store.add("Other", "nothing", "2024-01-01")
    assert [t.id for t in store.search("milk")] == [a.id, b.id]
    assert store.search("zzz") == []


def test_search_requires_text(store):
    with pytest.raises(InvalidTaskError):
        store.search("")


def test_persists_across_reopen(tmp_path):
    path = tmp_path / "todo.db"
    with TaskStore(path) as first:
        task = first.add("t", "d", "2024-01-01")
    with TaskStore(path) as second:
        assert second.all_tasks() == [task]


def test_closed_store_rejects_queries(tmp_path):
    store = TaskStore(tmp_path / "todo.db")
    store.close()
    with pytest.raises(sqlite3.ProgrammingError):
        store.all_tasks()