"""Command-line front end for the task board."""

from __future__ import annotations

import argparse
import os
import shlex
import sys
from datetime import date
from typing import Union

from .dialog import DialogResult, TaskOptions
from .export import write_export
from .history import History
from .models import COMPLETE, IN_PROGRESS, PENDING, STATUSES
from .planner import (
    build_dependency_graph,
    group_by_status,
    notifications,
    recommend,
    recommendation_label,
)
from .storage import DEFAULT_PATH, TaskStore

NOTIFICATION = "notification"

_ALLOWED = {
    PENDING: {
        DialogResult.SET_TO_IN_PROGRESS,
        DialogResult.SET_TO_COMPLETE,
        DialogResult.DELETE,
    },
    IN_PROGRESS: {
        DialogResult.SET_TO_PENDING,
        DialogResult.SET_TO_COMPLETE,
        DialogResult.DELETE,
    },
    COMPLETE: {
        DialogResult.SET_TO_PENDING,
        DialogResult.SET_TO_IN_PROGRESS,
        DialogResult.DELETE,
    },
    NOTIFICATION: {
        DialogResult.SET_TO_PENDING,
        DialogResult.SET_TO_COMPLETE,
        DialogResult.DELETE,
    },
}

_STATUS_RESULTS = {
    PENDING: DialogResult.SET_TO_PENDING,
    IN_PROGRESS: DialogResult.SET_TO_IN_PROGRESS,
    COMPLETE: DialogResult.SET_TO_COMPLETE,
}

_HEADINGS = {PENDING: "Pending", IN_PROGRESS: "In Progress", COMPLETE: "Complete"}

_ORDERS = ("id", "deadline", "priority")


class TodoApp:
    """A task store together with its undo history."""

    def __init__(self, path: Union[str, "os.PathLike[str]"] = DEFAULT_PATH) -> None:
        self.store = TaskStore(path)
        self.history = History(self.store)

    def board(self, order: str = "id") -> dict[str, list[str]]:
        """Task labels grouped into status columns, in the given order."""
        loaders = {
            "id": self.store.all_tasks,
            "deadline": self.store.tasks_by_deadline,
            "priority": self.store.tasks_by_priority,
        }
        try:
            loader = loaders[order]
        except KeyError:
            raise ValueError(f"Unknown order {order!r}.") from None
        columns = group_by_status(loader())
        return {
            status: [task.list_label() for task in tasks]
            for status, tasks in columns.items()
        }

    def handle_choice(
        self, task_id: int, result: DialogResult, origin: str | None = None
    ) -> str | None:
        """Apply a choice made for a task shown in the given list.

        Returns the message to show, or None when the choice changes nothing.
        """
        task = self.store.get(task_id)
        if task is None:
            raise LookupError(f"No task with id {task_id}.")
        origin = task.status if origin is None else origin
        try:
            allowed = _ALLOWED[origin]
        except KeyError:
            raise ValueError(f"Unknown list {origin!r}.") from None
        if result not in allowed:
            return None
        if result is DialogResult.DELETE:
            self.history.delete(task_id)
            return f"The task '{task.title}' has been deleted."
        status = result.status
        self.history.change_status(task_id, status)
        return f"The task '{task.title}' has been updated to '{status}'."


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskboard", description="Keep a to-do board in a SQLite file."
    )
    parser.add_argument("--db", default=DEFAULT_PATH, help="database file")
    sub = parser.add_subparsers(dest="command")

    add = sub.add_parser("add", help="add a task")
    add.add_argument("title")
    add.add_argument("description")
    add.add_argument("due_date")
    add.add_argument("--subtasks", default="")
    add.add_argument("--priority", default="0")

    listing = sub.add_parser("list", help="show the board")
    listing.add_argument("--sort", choices=_ORDERS, default="id")

    show = sub.add_parser("show", help="show one task")
    show.add_argument("id", type=int)

    origins = (*STATUSES, NOTIFICATION)
    status = sub.add_parser("status", help="change a task's status")
    status.add_argument("id", type=int)
    status.add_argument("status", choices=STATUSES)
    status.add_argument("--checked", type=int, nargs="*", default=[])
    status.add_argument("--all-checked", action="store_true")
    status.add_argument("--from", dest="origin", choices=origins)

    delete = sub.add_parser("delete", help="delete a task")
    delete.add_argument("id", type=int)
    delete.add_argument("--from", dest="origin", choices=origins)

    sub.add_parser("undo", help="undo the last change")
    sub.add_parser("redo", help="redo the last undone change")

    search = sub.add_parser("search", help="find tasks by text")
    search.add_argument("text")

    notify = sub.add_parser("notify", help="show overdue and upcoming tasks")
    notify.add_argument("--today", type=date.fromisoformat)

    export = sub.add_parser("export", help="write all tasks as JSON")
    export.add_argument("path")

    rec = sub.add_parser("recommend", help="suggest what to do next")
    rec.add_argument("--limit", type=int, default=5)
    return parser


def _print_recommendations(app: TodoApp, limit: int = 5) -> None:
    tasks = app.store.all_tasks()
    for task in recommend(tasks, build_dependency_graph(tasks), limit):
        print(recommendation_label(task))


def _run(app: TodoApp, args: argparse.Namespace) -> None:
    command = args.command
    if command == "add":
        task = app.store.add(
            args.title, args.description, args.due_date, args.subtasks, args.priority
        )
        print(f"Added {task.list_label()}")
    elif command == "list":
        for status, labels in app.board(args.sort).items():
            print(f"{_HEADINGS[status]}:")
            for label in labels:
                print(f"  {label}")
        if args.sort == "id":
            print("Recommended:")
            _print_recommendations(app)
    elif command == "show":
        task = app.store.get(args.id)
        if task is None:
            raise LookupError(f"No task with id {args.id}.")
        print(TaskOptions(task).summary())
    elif command == "status":
        task = app.store.get(args.id)
        if task is None:
            raise LookupError(f"No task with id {args.id}.")
        options = TaskOptions(task)
        for index in args.checked:
            options.set_checked(index)
        if args.all_checked:
            for index in range(len(options.subtasks)):
                options.set_checked(index)
        result = options.choose(_STATUS_RESULTS[args.status])
        message = app.handle_choice(task.id, result, args.origin)
        print(message if message is not None else "No change.")
    elif command == "delete":
        task = app.store.get(args.id)
        if task is None:
            raise LookupError(f"No task with id {args.id}.")
        result = TaskOptions(task).choose(DialogResult.DELETE)
        message = app.handle_choice(task.id, result, args.origin)
        print(message if message is not None else "No change.")
    elif command == "undo":
        app.history.undo()
        print("Undo performed.")
    elif command == "redo":
        app.history.redo()
        print("Redo performed.")
    elif command == "search":
        found = app.store.search(args.text)
        for task in found:
            print(task.list_label())
        if not found:
            print("No tasks found.")
    elif command == "notify":
        for reminder in notifications(app.store.active_tasks(), args.today):
            print(reminder)
    elif command == "export":
        write_export(app.store.all_tasks(), args.path)
        print(f"Tasks exported to {args.path}")
    elif command == "recommend":
        _print_recommendations(app, args.limit)


def _execute(app: TodoApp, args: argparse.Namespace) -> int:
    try:
        _run(app, args)
    except (LookupError, ValueError, OSError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0


def _shell(app: TodoApp, parser: argparse.ArgumentParser) -> int:
    status = 0
    while True:
        try:
            line = input("taskboard> ")
        except EOFError:
            break
        line = line.strip()
        if not line:
            continue
        if line in ("quit", "exit"):
            break
        try:
            words = shlex.split(line)
        except ValueError as err:
            print(f"error: {err}", file=sys.stderr)
            status = 1
            continue
        try:
            args = parser.parse_args(words)
        except SystemExit:
            status = 1
            continue
        if args.command is None:
            continue
        status = _execute(app, args)
    return status


def main(argv: list[str] | None = None) -> int:
    """Run one command, or an interactive session when none is given."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    app = TodoApp(args.db)
    try:
        if args.command is None:
            return _shell(app, parser)
        return _execute(app, args)
    finally:
        app.store.close()


if __name__ == "__main__":
    sys.exit(main())