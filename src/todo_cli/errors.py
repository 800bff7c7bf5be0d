# src/todo_cli/errors.py

"""
Error types raised by the core and the storage layer.

The CLI catches TodoError at the top level and turns it into a message
plus a non-zero exit status. Nothing in the core calls sys.exit().
"""

from __future__ import annotations


class TodoError(Exception):
    """Base class for all expected failures."""


class TaskNotFoundError(TodoError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task with ID {task_id} not found")


# ---- storage ----


class StorageError(TodoError):
    """Any failure of the persistence adapter."""


class StorageIOError(StorageError):
    """Underlying file read/write failed (wraps OSError)."""


class SerializationError(StorageError):
    """Persisted content is malformed or could not be encoded."""


# ---- user input ----


class InvalidInputError(TodoError):
    """Malformed value supplied by the user."""


class InvalidPriorityError(InvalidInputError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid priority '{value}'. Use: high, medium, or low")


class InvalidDateError(InvalidInputError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid date format '{value}'. Expected: YYYY-MM-DD")


class EmptyTitleError(InvalidInputError):
    def __init__(self) -> None:
        super().__init__("Task title must not be empty")
