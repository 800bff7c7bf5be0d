# src/todo_cli/tasks/task_collection.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..errors import EmptyTitleError, SerializationError, TaskNotFoundError
from .task_models import Priority, Task, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    pending: int
    completed: int
    overdue: int


class TaskCollection:
    """
    In-memory owner of all tasks and the only place ids are issued.

    Invariants:
    - ids are unique and strictly increasing in insertion order
    - next_id is greater than every id ever issued (deleted ids are not reused)

    Query methods return new lists; reordering or truncating them does not
    affect the collection. The Task objects in them are the live instances,
    not snapshots: callers treat them as read-only and change state only via
    complete()/delete(). Assigning task.completed directly is not prevented.
    """

    def __init__(self, *, allow_empty_titles: bool = True) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        self.allow_empty_titles = allow_empty_titles

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- mutations ----

    def add(
        self,
        title: str,
        priority: Priority = Priority.MEDIUM,
        due_date: datetime | None = None,
    ) -> int:
        if not self.allow_empty_titles and not title.strip():
            raise EmptyTitleError()

        task = Task.create(title, priority, due_date)
        task.id = self._next_id
        self._next_id += 1
        self._tasks.append(task)
        logger.debug("Task added id=%s priority=%s due=%s", task.id, priority.value, due_date)
        return task.id

    def complete(self, task_id: int) -> None:
        """Mark a task completed. Completing a completed task is not an error."""
        task = self.find(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        task.complete()
        logger.debug("Task completed id=%s", task_id)

    def delete(self, task_id: int) -> None:
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[idx]
                logger.debug("Task deleted id=%s", task_id)
                return
        raise TaskNotFoundError(task_id)

    def clear_completed(self) -> list[int]:
        """Remove every completed task; returns the removed ids in insertion order."""
        removed = [t.id for t in self._tasks if t.completed]
        if removed:
            self._tasks = [t for t in self._tasks if not t.completed]
            logger.info("Cleared %d completed task(s)", len(removed))
        return removed

    # ---- queries ----

    def find(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def list_all(self) -> list[Task]:
        return list(self._tasks)

    def list_pending(self) -> list[Task]:
        return [t for t in self._tasks if not t.completed]

    def list_completed(self) -> list[Task]:
        return [t for t in self._tasks if t.completed]

    def list_overdue(self, now: datetime | None = None) -> list[Task]:
        if now is None:
            now = utc_now()
        return [t for t in self._tasks if t.is_overdue(now)]

    def by_priority(self) -> list[Task]:
        # sorted() is stable: equal priorities keep insertion order.
        return sorted(self._tasks, key=lambda t: t.priority.rank)

    def count(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def stats(self, now: datetime | None = None) -> TaskStats:
        completed = len(self.list_completed())
        return TaskStats(
            total=len(self._tasks),
            pending=len(self._tasks) - completed,
            completed=completed,
            overdue=len(self.list_overdue(now)),
        )

    # ---- serialization ----

    def to_dict(self) -> dict[str, Any]:
        return {
            "tasks": [t.to_dict() for t in self._tasks],
            "next_id": self._next_id,
        }

    @classmethod
    def from_dict(cls, data: Any, *, allow_empty_titles: bool = True) -> TaskCollection:
        if not isinstance(data, dict):
            raise SerializationError("Top-level JSON value must be an object")
        raw_tasks = data.get("tasks")
        next_id = data.get("next_id")
        if not isinstance(raw_tasks, list):
            raise SerializationError("'tasks' must be a list")
        if not isinstance(next_id, int) or isinstance(next_id, bool) or next_id < 1:
            raise SerializationError(f"'next_id' must be a positive integer, got {next_id!r}")

        tasks = [Task.from_dict(item) for item in raw_tasks]

        seen: set[int] = set()
        for task in tasks:
            if task.id < 1:
                raise SerializationError(f"Task id must be positive, got {task.id}")
            if task.id in seen:
                raise SerializationError(f"Duplicate task id {task.id}")
            seen.add(task.id)
        if seen and next_id <= max(seen):
            raise SerializationError(
                f"'next_id' ({next_id}) must be greater than every task id (max {max(seen)})"
            )

        collection = cls(allow_empty_titles=allow_empty_titles)
        collection._tasks = tasks
        collection._next_id = next_id
        return collection
