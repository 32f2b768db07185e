"""Undo and redo of status changes and deletions."""

from __future__ import annotations

from dataclasses import replace

from .models import ActionType, TaskAction
from .storage import TaskStore


class HistoryEmptyError(LookupError):
    """Raised when there is nothing to undo or redo."""


class History:
    """Applies changes to a store while remembering how to reverse them."""

    def __init__(self, store: TaskStore) -> None:
        self._store = store
        self._undo: list[TaskAction] = []
        self._redo: list[TaskAction] = []

    def _snapshot(self, task_id: int, kind: ActionType) -> None:
        task = self._store.get(task_id)
        if task is not None:
            self._undo.append(TaskAction(replace(task), kind))
        self._redo.clear()

    def record_update(self, task_id: int) -> None:
        """Remember the current state of a task before it is changed."""
        self._snapshot(task_id, ActionType.UPDATE)

    def record_delete(self, task_id: int) -> None:
        """Remember a task before it is deleted."""
        self._snapshot(task_id, ActionType.DELETE)

    def change_status(self, task_id: int, status: str) -> None:
        """Set a task's status, keeping the old state for undo."""
        self.record_update(task_id)
        self._store.set_status(task_id, status)

    def delete(self, task_id: int) -> None:
        """Delete a task, keeping it for undo."""
        self.record_delete(task_id)
        self._store.delete(task_id)

    def undo(self) -> TaskAction:
        """Reverse the most recent change and return the action reversed."""
        if not self._undo:
            raise HistoryEmptyError("Nothing to undo.")
        action = self._undo.pop()
        if action.type is ActionType.DELETE:
            self._store.restore(action.task)
            self._redo.append(TaskAction(action.task, ActionType.DELETE))
        else:
            current = self._store.get(action.task.id)
            if current is not None:
                self._store.overwrite(action.task)
                self._redo.append(TaskAction(current, ActionType.UPDATE))
        return action

    def redo(self) -> TaskAction:
        """Apply again the most recently undone change and return it."""
        if not self._redo:
            raise HistoryEmptyError("Nothing to redo.")
        action = self._redo.pop()
        if action.type is ActionType.DELETE:
            self._store.delete(action.task.id)
            self._undo.append(TaskAction(action.task, ActionType.DELETE))
        else:
            current = self._store.get(action.task.id)
            if current is not None:
                self._store.overwrite(action.task)
                # Recording an update starts a fresh branch, so later redos are dropped.
                self._undo.append(TaskAction(current, ActionType.UPDATE))
                self._redo.clear()
        return action