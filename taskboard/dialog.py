"""Options offered for a single task: status changes, deletion and subtasks."""

from __future__ import annotations

import enum

from .models import COMPLETE, IN_PROGRESS, PENDING, Task

SUBTASK_HINT = "Check subtasks as you complete them."


class DialogResult(enum.Enum):
    """The choice made for a task."""

    NONE = "none"
    SET_TO_PENDING = "set to pending"
    SET_TO_IN_PROGRESS = "set to in progress"
    SET_TO_COMPLETE = "set to complete"
    DELETE = "delete"

    @property
    def status(self) -> str | None:
        """The status this choice moves a task to, if it is a status change."""
        return _RESULT_STATUS.get(self)


_RESULT_STATUS = {
    DialogResult.SET_TO_PENDING: PENDING,
    DialogResult.SET_TO_IN_PROGRESS: IN_PROGRESS,
    DialogResult.SET_TO_COMPLETE: COMPLETE,
}

_DISABLED_BY_STATUS = {
    PENDING: DialogResult.SET_TO_PENDING,
    IN_PROGRESS: DialogResult.SET_TO_IN_PROGRESS,
}


class IncompleteSubtasksError(ValueError):
    """Raised when a task is marked complete while subtasks remain open."""


class TaskOptions:
    """The choices available for one task, with its subtask checklist."""

    def __init__(self, task: Task) -> None:
        self.task = task
        self.subtasks = [
            name.strip() for name in task.subtask_list() if name.strip()
        ]
        self._checked = [False] * len(self.subtasks)
        self.result = DialogResult.NONE

    def summary(self) -> str:
        """A readable description of the task and its subtasks."""
        task = self.task
        lines = [task.title]
        if task.due_date:
            lines.append(f"Due Date: {task.due_date}")
        if task.description:
            lines.append(f"Description: {task.description}")
        if task.priority > 0:
            lines.append(f"Priority: {task.priority}")
        lines.append(f"Status: {task.status}")
        if task.subtask_list():
            lines.append("")
            lines.append(SUBTASK_HINT)
        for index, (name, done) in enumerate(zip(self.subtasks, self._checked)):
            mark = "x" if done else " "
            lines.append(f"  [{mark}] {index}: {name}")
        return "\n".join(lines)

    def set_checked(self, index: int, checked: bool = True) -> None:
        """Tick or untick the subtask at the given position."""
        if not 0 <= index < len(self._checked):
            raise IndexError(f"No subtask at position {index}.")
        self._checked[index] = checked

    def all_subtasks_done(self) -> bool:
        """True when every subtask is ticked (or there are none)."""
        return all(self._checked)

    def enabled_actions(self) -> frozenset[DialogResult]:
        """The choices that may be made right now."""
        enabled = set(DialogResult)
        disabled = _DISABLED_BY_STATUS.get(self.task.status)
        if disabled is not None:
            enabled.discard(disabled)
        # Completion depends only on the subtasks, whatever the current status.
        if not self.all_subtasks_done():
            enabled.discard(DialogResult.SET_TO_COMPLETE)
        return frozenset(enabled)

    def choose(self, result: DialogResult) -> DialogResult:
        """Make a choice, checking that it is allowed, and return it."""
        if result is DialogResult.SET_TO_COMPLETE and not self.all_subtasks_done():
            raise IncompleteSubtasksError(
                "Please complete all subtasks before marking the task as complete."
            )
        if result not in self.enabled_actions():
            raise ValueError(f"Cannot {result.value}: the task is already {self.task.status}.")
        self.result = result
        return result