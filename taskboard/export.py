"""Export of tasks to a JSON document."""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Union

from .models import Task


def _quoted(text: str) -> str:
    return text.replace('"', '\\"')


def task_json(task: Task, level: int = 2, is_last: bool = True) -> str:
    """One task as an indented JSON object, followed by a newline."""
    indent = " " * (level * 2)
    lines = [
        f"{indent}{{",
        f'{indent}  "id": {task.id},',
        f'{indent}  "title": "{_quoted(task.title)}",',
        f'{indent}  "description": "{_quoted(task.description)}",',
        f'{indent}  "dueDate": "{task.due_date}",',
        f'{indent}  "priority": {task.priority},',
        f'{indent}  "status": "{task.status}",',
        f'{indent}  "subtasks": "{_quoted(task.sub_tasks)}"',
        f"{indent}}}" + ("" if is_last else ","),
    ]
    return "\n".join(lines) + "\n"


def render_export(tasks: Iterable[Task]) -> str:
    """The whole export document for the given tasks."""
    tasks = list(tasks)
    body = "".join(
        task_json(task, 2, position == len(tasks) - 1)
        for position, task in enumerate(tasks)
    )
    return '{\n  "tasks": [\n' + body + "  ]\n}\n"


def write_export(
    tasks: Iterable[Task], path: Union[str, "os.PathLike[str]"]
) -> None:
    """Write the export document to a file."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(render_export(tasks))