# src/todo_cli/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

from ..errors import InvalidPriorityError, SerializationError

_PRIORITY_ALIASES = {
    "high": "High",
    "h": "High",
    "medium": "Medium",
    "m": "Medium",
    "low": "Low",
    "l": "Low",
}


class Priority(StrEnum):
    """
    Task priority.

    Values are the tokens written to the JSON file ("High", "Medium", "Low").
    """

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        # High sorts first.
        return _PRIORITY_RANK[self]

    @classmethod
    def parse(cls, raw: str) -> Priority:
        """Parse user input: high/h, medium/m, low/l, case-insensitive."""
        key = (raw or "").strip().lower()
        if key not in _PRIORITY_ALIASES:
            raise InvalidPriorityError(raw)
        return cls(_PRIORITY_ALIASES[key])

    @classmethod
    def from_json(cls, raw: Any) -> Priority:
        try:
            return cls(raw)
        except ValueError as e:
            raise SerializationError(f"Unknown priority token {raw!r}") from e


_PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """ISO-8601 in UTC with a trailing Z."""
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def parse_timestamp(raw: Any) -> datetime:
    if not isinstance(raw, str):
        raise SerializationError(f"Expected timestamp string, got {raw!r}")
    try:
        value = datetime.fromisoformat(raw)
    except ValueError as e:
        raise SerializationError(f"Invalid timestamp {raw!r}") from e
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(slots=True)
class Task:
    id: int
    title: str
    priority: Priority
    completed: bool = False
    created_at: datetime = field(default_factory=utc_now)
    due_date: datetime | None = None

    @classmethod
    def create(cls, title: str, priority: Priority, due_date: datetime | None = None) -> Task:
        """New pending task; the owning collection assigns the id."""
        return cls(id=0, title=title, priority=priority, due_date=due_date)

    def complete(self) -> None:
        self.completed = True

    def is_overdue(self, now: datetime | None = None) -> bool:
        if self.due_date is None or self.completed:
            return False
        if now is None:
            now = utc_now()
        return now > self.due_date

    # ---- serialization ----

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
            "priority": self.priority.value,
            "created_at": format_timestamp(self.created_at),
            "due_date": format_timestamp(self.due_date) if self.due_date is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        if not isinstance(data, dict):
            raise SerializationError(f"Task record must be an object, got {type(data).__name__}")
        try:
            raw_id = data["id"]
            title = data["title"]
            completed = data["completed"]
            priority = data["priority"]
            created_at = data["created_at"]
        except KeyError as e:
            raise SerializationError(f"Task record is missing field {e.args[0]!r}") from e

        # bool is an int subclass; an id of true/false is still malformed.
        if not isinstance(raw_id, int) or isinstance(raw_id, bool):
            raise SerializationError(f"Task id must be an integer, got {raw_id!r}")
        if not isinstance(title, str):
            raise SerializationError(f"Task {raw_id} title must be a string")
        if not isinstance(completed, bool):
            raise SerializationError(f"Task {raw_id} completed must be a boolean")

        raw_due = data.get("due_date")
        return cls(
            id=raw_id,
            title=title,
            priority=Priority.from_json(priority),
            completed=completed,
            created_at=parse_timestamp(created_at),
            due_date=parse_timestamp(raw_due) if raw_due is not None else None,
        )
