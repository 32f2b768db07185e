"""Core task records and helpers shared across the board."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable
from dataclasses import dataclass

PENDING = "pending"
IN_PROGRESS = "in progress"
COMPLETE = "complete"
STATUSES = (PENDING, IN_PROGRESS, COMPLETE)

LIST_SEPARATOR = " - Due: "
NOTIFICATION_SEPARATOR = " - "

_LABEL_PATTERN = re.compile(r"\((\d+)\)\s*(.+)")


@dataclass
class Task:
    """A single to-do item as stored in the database."""

    id: int = 0
    title: str = ""
    description: str = ""
    due_date: str = ""
    sub_tasks: str = ""
    priority: int = 0
    status: str = PENDING

    def list_label(self) -> str:
        """Text shown for this task in a status column."""
        return f"({self.id}) {self.title}{LIST_SEPARATOR}{self.due_date}"

    def subtask_list(self) -> list[str]:
        """The comma-separated subtasks, with empty parts dropped."""
        return [part for part in self.sub_tasks.split(",") if part]


class ActionType(enum.Enum):
    """Kind of change remembered for undo and redo."""

    UPDATE = "update"
    DELETE = "delete"


@dataclass
class TaskAction:
    """A snapshot of a task together with the kind of change made to it."""

    task: Task
    type: ActionType


def find_task(tasks: Iterable[Task], task_id: int) -> Task | None:
    """Return the first task with the given id, or None."""
    return next((task for task in tasks if task.id == task_id), None)


def parse_task_id(text: str, separator: str = LIST_SEPARATOR) -> int:
    """Extract the task id from a list label such as ``(3) Title - Due: ...``.

    Raises ValueError when the label has no separator or no id prefix.
    """
    parts = text.split(separator)
    if len(parts) < 2:
        raise ValueError("Please select a valid task.")
    match = _LABEL_PATTERN.fullmatch(parts[0])
    if match is None:
        raise ValueError("Could not extract task ID and title.")
    return int(match.group(1))