# tests/conftest.py

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_cli.tasks.task_collection import TaskCollection
from todo_cli.tasks.task_models import Priority


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the CLI.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep tests isolated from the developer's own task file.
    """
    return SimpleNamespace(
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        data_dir=tmp_path,
        data_file=tmp_path / "todos.json",
        allow_empty_titles=False,
    )


@pytest.fixture()
def collection() -> TaskCollection:
    """Four tasks: Low, High (overdue), Medium, High (completed)."""
    c = TaskCollection()
    c.add("Water plants", Priority.LOW)
    c.add("File taxes", Priority.HIGH, datetime(2020, 1, 1, 23, 59, 59, tzinfo=timezone.utc))
    c.add("Buy milk", Priority.MEDIUM)
    c.add("Book flights", Priority.HIGH)
    c.complete(4)
    return c


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """The CLI reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)
