# src/todo_cli/tasks/task_store.py

"""
JSON file persistence for TaskCollection.

Every function takes the file path explicitly; there is no module-level
default path.

Limitations (accepted):
- save() overwrites the whole file in place; a crash mid-write can leave a
  truncated file behind
- no locking: two processes saving the same path race, last writer wins
"""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path

from ..errors import SerializationError, StorageError, StorageIOError
from .task_collection import TaskCollection

logger = logging.getLogger(__name__)


def save_collection(collection: TaskCollection, path: str | Path) -> None:
    path = Path(path)
    try:
        payload = json.dumps(collection.to_dict(), ensure_ascii=False, indent=2)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to encode tasks: {e}") from e

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload + "\n", "utf-8")
    except OSError as e:
        raise StorageIOError(f"File operation failed: {e}") from e

    logger.debug(
        "Saved %d task(s) next_id=%s to %s", collection.count(), collection.next_id, path
    )


def load_collection(path: str | Path, *, allow_empty_titles: bool = True) -> TaskCollection:
    """
    Load a collection from `path`.

    A missing or blank file is a first run, not an error: a fresh collection
    (next_id == 1) is returned.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("No task file at %s, starting empty", path)
        return TaskCollection(allow_empty_titles=allow_empty_titles)

    try:
        raw = path.read_text("utf-8")
    except OSError as e:
        raise StorageIOError(f"File operation failed: {e}") from e
    except UnicodeDecodeError as e:
        raise SerializationError(f"Task file is not valid UTF-8: {e}") from e

    if not raw.strip():
        logger.debug("Task file %s is empty, starting empty", path)
        return TaskCollection(allow_empty_titles=allow_empty_titles)

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise SerializationError(f"JSON parsing failed: {e}") from e

    collection = TaskCollection.from_dict(data, allow_empty_titles=allow_empty_titles)
    logger.debug(
        "Loaded %d task(s) next_id=%s from %s", collection.count(), collection.next_id, path
    )
    return collection


def file_exists(path: str | Path) -> bool:
    return Path(path).exists()


def delete_file(path: str | Path) -> None:
    """Remove the file if present. A missing file is not an error."""
    path = Path(path)
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        raise StorageIOError(f"File operation failed: {e}") from e
    logger.debug("Deleted %s", path)


def backup_file(source: str | Path, dest: str | Path) -> None:
    source = Path(source)
    if not source.exists():
        raise StorageError(f"Source file '{source}' does not exist")
    try:
        shutil.copyfile(source, dest)
    except OSError as e:
        raise StorageIOError(f"File operation failed: {e}") from e
    logger.info("Backed up %s to %s", source, dest)
