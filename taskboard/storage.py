"""SQLite-backed persistence for tasks."""

from __future__ import annotations

import os
import sqlite3
from typing import Union

from .models import Task

DEFAULT_PATH = "todo.db"
MIN_PRIORITY = 0
MAX_PRIORITY = 5

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS tasks ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "title TEXT NOT NULL,"
    "description TEXT,"
    "due_date TEXT,"
    "sub_tasks TEXT,"
    "priority INTEGER DEFAULT 0,"
    "completed INTEGER DEFAULT 0,"
    "status TEXT DEFAULT 'pending',"
    "UNIQUE(id)"
    ")"
)

_COLUMNS = "id, title, description, due_date, sub_tasks, priority, status"


class InvalidTaskError(ValueError):
    """Raised when task input is rejected."""


def _to_int(value: object) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return 0


def _text(value: object) -> str:
    return "" if value is None else str(value)


def _row_to_task(row: sqlite3.Row) -> Task:
    return Task(
        id=_to_int(row["id"]),
        title=_text(row["title"]),
        description=_text(row["description"]),
        due_date=_text(row["due_date"]),
        sub_tasks=_text(row["sub_tasks"]),
        priority=_to_int(row["priority"]),
        status=_text(row["status"]),
    )


class TaskStore:
    """Task table stored in a SQLite database file."""

    def __init__(self, path: Union[str, "os.PathLike[str]"] = DEFAULT_PATH) -> None:
        self._conn = sqlite3.connect(os.fspath(path))
        self._conn.row_factory = sqlite3.Row
        with self._conn:
            self._conn.execute(_SCHEMA)

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "TaskStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _query(self, sql: str, params: tuple = ()) -> list[Task]:
        return [_row_to_task(row) for row in self._conn.execute(sql, params)]

    def all_tasks(self) -> list[Task]:
        """Every task in insertion order."""
        return self._query(f"SELECT {_COLUMNS} FROM tasks ORDER BY id")

    def tasks_by_deadline(self) -> list[Task]:
        """Every task ordered by due date text."""
        return self._query(f"SELECT {_COLUMNS} FROM tasks ORDER BY due_date, id")

    def tasks_by_priority(self) -> list[Task]:
        """Every task, highest priority first."""
        return self._query(
            f"SELECT {_COLUMNS} FROM tasks ORDER BY priority DESC, id"
        )

    def active_tasks(self) -> list[Task]:
        """Tasks that are pending or in progress."""
        return self._query(
            f"SELECT {_COLUMNS} FROM tasks "
            "WHERE status IN ('pending', 'in progress') ORDER BY id"
        )

    def get(self, task_id: int) -> Task | None:
        """The task with this id, or None if there is none."""
        found = self._query(f"SELECT {_COLUMNS} FROM tasks WHERE id = ?", (task_id,))
        return found[0] if found else None

    def add(
        self,
        title: str,
        description: str,
        due_date: str,
        sub_tasks: str = "",
        priority: int | str = 0,
    ) -> Task:
        """Insert a new pending task and return it."""
        level = _to_int(priority)
        if (
            not title
            or not description
            or not due_date
            or not MIN_PRIORITY <= level <= MAX_PRIORITY
        ):
            raise InvalidTaskError(
                "Please fill in all fields correctly.\n"
                "Priority must be between 0 and 5."
            )
        with self._conn:
            cursor = self._conn.execute(
                "INSERT INTO tasks (title, description, due_date, sub_tasks, priority) "
                "VALUES (?, ?, ?, ?, ?)",
                (title, description, due_date, sub_tasks, level),
            )
        task = self.get(cursor.lastrowid)
        assert task is not None
        return task

    def set_status(self, task_id: int, status: str) -> None:
        with self._conn:
            self._conn.execute(
                "UPDATE tasks SET status = ? WHERE id = ?", (status, task_id)
            )

    def delete(self, task_id: int) -> None:
        with self._conn:
            self._conn.execute("DELETE FROM tasks WHERE id = ?", (task_id,))

    def restore(self, task: Task) -> None:
        """Insert a task again under its original id."""
        try:
            with self._conn:
                self._conn.execute(
                    f"INSERT INTO tasks ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
                    (
                        task.id,
                        task.title,
                        task.description,
                        task.due_date,
                        task.sub_tasks,
                        task.priority,
                        task.status,
                    ),
                )
        except sqlite3.IntegrityError as err:
            raise InvalidTaskError(f"Cannot restore task {task.id}: {err}") from err

    def overwrite(self, task: Task) -> None:
        """Replace every stored field of the task with the given id."""
        with self._conn:
            self._conn.execute(
                "UPDATE tasks SET title=?, description=?, due_date=?, sub_tasks=?, "
                "priority=?, status=? WHERE id=?",
                (
                    task.title,
                    task.description,
                    task.due_date,
                    task.sub_tasks,
                    task.priority,
                    task.status,
                    task.id,
                ),
            )

    def search(self, text: str) -> list[Task]:
        """Tasks whose title or description contains the text."""
        if not text:
            raise InvalidTaskError("Please enter a search term.")
        pattern = f"%{text}%"
        return self._query(
            f"SELECT {_COLUMNS} FROM tasks "
            "WHERE title LIKE ? OR description LIKE ? ORDER BY id",
            (pattern, pattern),
        )