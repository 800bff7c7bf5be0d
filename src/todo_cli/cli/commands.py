# src/todo_cli/cli/commands.py

"""
Command handlers: load -> mutate/query -> save -> render.

Handlers raise TodoError subclasses; main.py turns them into a message
and exit status 1.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, time, timezone
from enum import StrEnum
from pathlib import Path
from typing import Any

import click

from ..errors import InvalidDateError, TaskNotFoundError
from ..tasks.task_collection import TaskCollection
from ..tasks.task_models import Priority
from ..tasks.task_store import load_collection, save_collection
from .display import (
    format_task,
    print_info,
    print_statistics,
    print_success,
    print_task_detail,
    print_tasks,
)

logger = logging.getLogger(__name__)


class ListFilter(StrEnum):
    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"
    OVERDUE = "overdue"


_LIST_TITLES = {
    ListFilter.ALL: "📋 All Tasks",
    ListFilter.PENDING: "⏳ Pending Tasks",
    ListFilter.COMPLETED: "✅ Completed Tasks",
    ListFilter.OVERDUE: "⚠️  Overdue Tasks",
}


@dataclass(slots=True)
class AppContext:
    # Settings object (real Settings or a test double with the same attributes).
    settings: Any
    data_file: Path

    def load(self) -> TaskCollection:
        return load_collection(
            self.data_file,
            allow_empty_titles=bool(getattr(self.settings, "allow_empty_titles", False)),
        )

    def save(self, collection: TaskCollection) -> None:
        save_collection(collection, self.data_file)


def parse_due_date(raw: str) -> datetime:
    """YYYY-MM-DD -> end of that day (23:59:59) in UTC."""
    try:
        day = datetime.strptime(raw.strip(), "%Y-%m-%d").date()
    except ValueError as e:
        raise InvalidDateError(raw) from e
    return datetime.combine(day, time(23, 59, 59), tzinfo=timezone.utc)


def handle_add(app: AppContext, title: str, priority_raw: str, due_raw: str | None) -> int:
    # Validate all input before touching the file.
    priority = Priority.parse(priority_raw)
    due_date = parse_due_date(due_raw) if due_raw is not None else None

    collection = app.load()
    task_id = collection.add(title, priority, due_date)
    app.save(collection)
    logger.info("Added task id=%s", task_id)

    print_success(f"Task added successfully! (ID: {task_id})")
    task = collection.find(task_id)
    if task is not None:
        print_task_detail(task)
    return task_id


def handle_list(app: AppContext, list_filter: ListFilter, by_priority: bool = False) -> None:
    collection = app.load()

    if list_filter is ListFilter.PENDING:
        tasks = collection.list_pending()
    elif list_filter is ListFilter.COMPLETED:
        tasks = collection.list_completed()
    elif list_filter is ListFilter.OVERDUE:
        tasks = collection.list_overdue()
    elif by_priority:
        tasks = collection.by_priority()
    else:
        tasks = collection.list_all()

    if by_priority and list_filter is not ListFilter.ALL:
        # Same stable ordering as TaskCollection.by_priority(), applied to the filtered view.
        tasks = sorted(tasks, key=lambda t: t.priority.rank)

    print_tasks(tasks, _LIST_TITLES[list_filter])
    click.echo()
    print_statistics(collection.stats())


def handle_complete(app: AppContext, task_id: int) -> None:
    collection = app.load()

    # collection.complete() is idempotent; the notice is shown only here.
    task = collection.find(task_id)
    if task is not None and task.completed:
        print_info(f"Task {task_id} is already completed")
        return

    collection.complete(task_id)
    app.save(collection)
    logger.info("Completed task id=%s", task_id)

    print_success(f"Task {task_id} marked as completed!")
    task = collection.find(task_id)
    if task is not None:
        click.echo()
        click.echo(format_task(task))


def handle_delete(app: AppContext, task_id: int) -> None:
    collection = app.load()
    task = collection.find(task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    title = task.title

    collection.delete(task_id)
    app.save(collection)
    logger.info("Deleted task id=%s", task_id)

    print_success(f"Task {task_id} '{title}' deleted!")


def handle_show(app: AppContext, task_id: int) -> None:
    task = app.load().find(task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    print_task_detail(task)


def handle_clear(app: AppContext, force: bool) -> int:
    """Returns the number of tasks removed (0 when cancelled or nothing to do)."""
    collection = app.load()
    pending_removal = len(collection.list_completed())

    if pending_removal == 0:
        print_info("No completed tasks to clear")
        return 0

    if not force:
        confirmed = click.confirm(
            f"⚠️  About to delete {pending_removal} completed task(s). Are you sure?",
            default=False,
        )
        if not confirmed:
            print_info("Operation cancelled")
            return 0

    removed = collection.clear_completed()
    app.save(collection)

    print_success(f"Cleared {len(removed)} completed task(s)!")
    return len(removed)
