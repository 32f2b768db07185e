"""Grouping, recommendations and due-date notifications for tasks."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from .models import COMPLETE, IN_PROGRESS, PENDING, STATUSES, Task

_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})")

OVERDUE = "Overdue!"
DUE_TODAY = "Due Today! Stay focused."
DUE_TOMORROW = "Due Tomorrow! Be prepared."


def _parse_date(text: str) -> date | None:
    match = _DATE_PATTERN.fullmatch(text)
    if match is None:
        return None
    try:
        return date(*(int(part) for part in match.groups()))
    except ValueError:
        return None


@dataclass
class Notification:
    """A reminder about a task that is overdue or due soon."""

    task: Task
    message: str

    def __str__(self) -> str:
        return f"({self.task.id}) {self.task.title} - {self.message}"


def group_by_status(tasks: Iterable[Task]) -> dict[str, list[Task]]:
    """Split tasks into pending, in-progress and complete columns.

    Tasks with any other status are left out.
    """
    columns: dict[str, list[Task]] = {status: [] for status in STATUSES}
    for task in tasks:
        if task.status in columns:
            columns[task.status].append(task)
    return columns


def build_dependency_graph(tasks: Iterable[Task]) -> dict[int, set[int]]:
    """Map each task id to the ids of tasks whose title it mentions."""
    tasks = list(tasks)
    title_to_id = {task.title.lower(): task.id for task in tasks}
    graph: dict[int, set[int]] = {}
    for task in tasks:
        description = task.description.lower()
        title = task.title.lower()
        graph[task.id] = {
            other_id
            for other_title, other_id in title_to_id.items()
            if other_id != task.id
            and (other_title in description or other_title in title)
        }
    return graph


def recommend(
    tasks: Iterable[Task], graph: dict[int, set[int]], limit: int = 5
) -> list[Task]:
    """Unfinished tasks whose dependencies are all complete, best first.

    Ordered by priority (highest first), then by valid due date (earliest
    first, tasks without a valid date last), then by id.
    """
    tasks = list(tasks)
    completed = {task.id for task in tasks if task.status == COMPLETE}
    candidates = [
        task
        for task in tasks
        if task.status != COMPLETE and graph.get(task.id, set()) <= completed
    ]

    def rank(task: Task) -> tuple[int, int, int, int]:
        due = _parse_date(task.due_date)
        if due is None:
            return (-task.priority, 1, 0, task.id)
        return (-task.priority, 0, due.toordinal(), 0)

    candidates.sort(key=rank)
    return candidates[: max(limit, 0)]


def recommendation_label(task: Task) -> str:
    """Text shown for a recommended task."""
    return f"{task.title} (Priority: {task.priority}, Due: {task.due_date})"


def notifications(
    tasks: Iterable[Task], today: date | None = None
) -> list[Notification]:
    """Reminders for active tasks that are overdue or due today or tomorrow.

    A due date that cannot be read counts as overdue.
    """
    today = today or date.today()
    tomorrow = today + timedelta(days=1)
    reminders: list[Notification] = []
    for task in tasks:
        if task.status not in (PENDING, IN_PROGRESS):
            continue
        due = _parse_date(task.due_date)
        if due is None or due < today:
            message = OVERDUE
        elif due == today:
            message = DUE_TODAY
        elif due == tomorrow:
            message = DUE_TOMORROW
        else:
            continue
        reminders.append(Notification(task, message))
    return reminders