# taskboard

A small personal to-do board kept in a SQLite database. Tasks sit in three
columns: **pending**, **in progress** and **complete**. Each task has a title,
a description, a due date (`YYYY-MM-DD`), an optional comma-separated list of
subtasks and a priority from 0 to 5.

What it does:

- lists tasks in their columns, in database order, by deadline or by priority;
- moves a task between columns or deletes it, with undo and redo;
- refuses to mark a task complete until every subtask is ticked;
- reminds you of pending and in-progress tasks that are overdue, due today or
  due tomorrow (a due date that cannot be read counts as overdue);
- recommends tasks to work on next: unfinished tasks whose title-mentioned
  dependencies are all complete, ordered by priority, then due date, then id;
- searches titles and descriptions;
- exports every task to a JSON file.

## Installing

```
pip install .
```

## Running

```
taskboard
```

With no command this starts an interactive session (prompt `taskboard> `,
leave with `quit`, `exit` or end-of-file) on the database `todo.db` in the
current directory, creating it if needed. Use `--db PATH` for another file.

The same commands can also be given directly, for example
`taskboard add "Write report" "Summarise the results" 2030-01-15 --subtasks draft,review --priority 4`.

| Command | What it does |
| --- | --- |
| `add TITLE DESCRIPTION DUE_DATE [--subtasks LIST] [--priority N]` | add a pending task |
| `list [--sort id\|deadline\|priority]` | show the board; in id order it also shows recommendations |
| `show ID` | show one task and its subtasks |
| `status ID STATUS [--checked N ...] [--all-checked] [--from LIST]` | move a task to `pending`, `in progress` or `complete`; tick subtasks by position to allow completion |
| `delete ID [--from LIST]` | delete a task |
| `undo` / `redo` | reverse or reapply the last status change or deletion |
| `search TEXT` | find tasks whose title or description contains the text |
| `notify [--today YYYY-MM-DD]` | list overdue tasks and those due today or tomorrow |
| `export PATH` | write all tasks as JSON |
| `recommend [--limit N]` | suggest what to do next (five by default) |

`--from` names the list the task was picked from (`pending`, `in progress`,
`complete` or `notification`); each list offers only certain moves, and a
move it does not offer prints `No change.`. Errors are printed as
`error: ...` and the command exits with status 1.

## Using it from Python

```python
from taskboard.storage import TaskStore
from taskboard.history import History
from taskboard.planner import build_dependency_graph, recommend
from taskboard.export import write_export

with TaskStore("todo.db") as store:
    store.add("Write report", "Summarise the results", "2030-01-15", "draft,review", 4)
    task = store.tasks_by_priority()[0]

    history = History(store)
    history.change_status(task.id, "in progress")
    history.undo()   # back to pending
    history.redo()   # in progress again

    tasks = store.all_tasks()
    for rec in recommend(tasks, build_dependency_graph(tasks), 5):
        print(rec.title)

    write_export(tasks, "tasks.json")
```

`taskboard.dialog.TaskOptions` holds the subtask checklist for one task and
checks which choices are allowed; `taskboard.cli.TodoApp` combines a store
with its history.

Invalid input, such as an empty title, description or due date, a priority
outside 0–5, or an empty search term, raises
`taskboard.storage.InvalidTaskError`. Undoing or redoing with nothing to undo
or redo raises `taskboard.history.HistoryEmptyError`. Marking a task complete
with unticked subtasks raises `taskboard.dialog.IncompleteSubtasksError`.

## What it does not do

There is no graphical window: the board is used from the command line or
from Python. The undo and redo history is kept in memory only, so it lasts
for one interactive session or one `History` object; separate `taskboard`
invocations cannot undo each other's changes.

## Running the tests

```
pip install ".[test]"
pytest
```