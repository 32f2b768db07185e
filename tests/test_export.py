import json

import pytest

from taskboard.export import render_export, task_json, write_export
from taskboard.models import Task


def _task(task_id=1, title="Plan trip", description="book hotel", sub_tasks="a,b"):
    return Task(
        id=task_id,
        title=title,
        description=description,
        due_date="2024-06-01",
        sub_tasks=sub_tasks,
        priority=2,
        status="pending",
    )


def test_empty_export_document():
    assert render_export([]) == '{\n  "tasks": [\n  ]\n}\n'


def test_task_json_layout():
    text = task_json(_task(), 0, True)
    assert text.splitlines() == [
        "{",
        '  "id": 1,',
        '  "title": "Plan trip",',
        '  "description": "book hotel",',
        '  "dueDate": "2024-06-01",',
        '  "priority": 2,',
        '  "status": "pending",',
        '  "subtasks": "a,b"',
        "}",
    ]
    assert text.endswith("}\n")


def test_task_json_comma_when_not_last():
    assert task_json(_task(), 2, False).endswith("},\n")
    assert task_json(_task(), 2, True).endswith("}\n")


@pytest.mark.parametrize("level", [0, 1, 3])
def test_task_json_indentation(level):
    lines = task_json(_task(), level, True).splitlines()
    indent = " " * (level * 2)
    assert all(line.startswith(indent) for line in lines)
    assert lines[0] == indent + "{"


def test_quotes_are_escaped_and_parse_back():
    task = _task(title='Say "hi"', description='a "b" c', sub_tasks='x "y"')
    data = json.loads(render_export([task]))
    exported = data["tasks"][0]
    assert exported["title"] == task.title
    assert exported["description"] == task.description
    assert exported["subtasks"] == task.sub_tasks


def test_export_round_trips_through_json():
    tasks = [_task(1), _task(2, title="Second", sub_tasks=""), _task(3)]
    data = json.loads(render_export(tasks))
    assert [item["id"] for item in data["tasks"]] == [1, 2, 3]
    assert data["tasks"][1]["subtasks"] == ""
    assert data["tasks"][0]["dueDate"] == tasks[0].due_date
    assert data["tasks"][2]["priority"] == tasks[2].priority


def test_write_export_creates_file(tmp_path):
    target = tmp_path / "tasks.json"
    tasks = [_task(1), _task(2)]
    write_export(tasks, target)
    assert target.read_text(encoding="utf-8") == render_export(tasks)


def test_write_export_to_missing_directory_fails(tmp_path):
    with pytest.raises(OSError):
        write_export([_task()], tmp_path / "missing" / "tasks.json")