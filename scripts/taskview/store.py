"""
JSON-backed TaskListProvider.

Reads ``data/db.json``; when the file is missing, unreadable or does not
describe a usable collection, a default collection is written in its place.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence

from taskview.models import Task, TaskList

logger = logging.getLogger(__name__)

DB_PATH = Path("data") / "db.json"


class StoreError(Exception):
    """Base class for store access failures."""


class StoreReadError(StoreError):
    """The store file could not be read."""


class StoreParseError(StoreError):
    """The store file does not describe a usable collection."""


def _parse_datetime(s: Any) -> datetime:
    """Parse an ISO 8601 timestamp, tolerating 'Z' and nanoseconds."""
    if not isinstance(s, str):
        raise StoreParseError(f"expected timestamp string, got {s!r}")
    try:
        return datetime.fromisoformat(s.replace("Z", "+00:00"))
    except ValueError as exc:
        raise StoreParseError(f"invalid timestamp {s!r}") from exc


def _require(data: dict, key: str, kind: type) -> Any:
    value = data.get(key)
    # bool is an int subclass; ids must be real integers
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise StoreParseError(f"field {key!r} must be {kind.__name__}")
    return value


def _task_from_dict(data: Any) -> Task:
    """Convert task dict to Task."""
    if not isinstance(data, dict):
        raise StoreParseError("task entry must be an object")
    tags = _require(data, "tags", list)
    if not all(isinstance(tag, str) for tag in tags):
        raise StoreParseError("tags must be strings")
    return Task(
        id=_require(data, "id", int),
        name=_require(data, "name", str),
        tags=tuple(tags),
        start_date=_parse_datetime(data.get("start_date")),
        due_date=_parse_datetime(data.get("due_date")),
    )


def _list_from_dict(data: Any) -> TaskList:
    """Convert task list dict to TaskList."""
    if not isinstance(data, dict):
        raise StoreParseError("task list entry must be an object")
    tasks = tuple(_task_from_dict(t) for t in _require(data, "tasks", list))
    name = _require(data, "name", str)
    if not tasks:
        raise StoreParseError(f"task list {name!r} has no tasks")
    return TaskList(id=_require(data, "id", int), name=name, tasks=tasks)


def parse_collection(raw: str) -> list[TaskList]:
    """Parse the serialized store into task lists.

    Raises StoreParseError unless the result is a non-empty collection of
    non-empty lists.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise StoreParseError(f"invalid JSON: {exc}") from exc
    if not isinstance(data, list) or not data:
        raise StoreParseError("store must be a non-empty array of task lists")
    return [_list_from_dict(entry) for entry in data]


def _task_to_dict(task: Task) -> dict:
    return {
        "id": task.id,
        "name": task.name,
        "tags": list(task.tags),
        "start_date": task.start_date.isoformat(),
        "due_date": task.due_date.isoformat(),
    }


def dump_collection(task_lists: Sequence[TaskList]) -> str:
    """Serialize task lists to the store format."""
    return json.dumps(
        [
            {
                "id": task_list.id,
                "name": task_list.name,
                "tasks": [_task_to_dict(t) for t in task_list.tasks],
            }
            for task_list in task_lists
        ],
        indent=2,
    )


def default_collection(now: datetime | None = None) -> list[TaskList]:
    """Seed collection written when no usable store exists."""
    if now is None:
        now = datetime.now().astimezone()

    def task(tid: int, name: str, tag: str) -> Task:
        return Task(id=tid, name=name, tags=(tag,), start_date=now, due_date=now)

    return [
        TaskList(
            id=0,
            name="Personal",
            tasks=(
                task(0, "Clean up your room", "JP"),
                task(1, "Watch ThePrimeagen", "rust"),
            ),
        ),
        TaskList(
            id=1,
            name="School",
            tasks=(
                task(0, "Math HW", "MATH"),
                task(1, "Smart Book", "2070"),
            ),
        ),
    ]


class FileTaskListProvider:
    """TaskListProvider implementation that reads from db.json."""

    def __init__(self, db_file: Path | None = None):
        self._db_file = db_file if db_file is not None else DB_PATH

    @property
    def db_file(self) -> Path:
        return self._db_file

    def read(self) -> list[TaskList]:
        """Read and parse the store, raising StoreError on any failure."""
        try:
            raw = self._db_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreReadError(f"error reading {self._db_file}: {exc}") from exc
        return parse_collection(raw)

    def write(self, task_lists: Sequence[TaskList]) -> None:
        self._db_file.parent.mkdir(parents=True, exist_ok=True)
        self._db_file.write_text(dump_collection(task_lists), encoding="utf-8")

    def load(self) -> list[TaskList]:
        """Load the collection, seeding the store with defaults if needed."""
        try:
            return self.read()
        except StoreReadError as exc:
            if self._db_file.exists():
                logger.warning("Failed to read store: %s", exc)
            else:
                logger.info("No store at %s; writing defaults", self._db_file)
        except StoreParseError as exc:
            logger.warning("Failed to parse store %s: %s", self._db_file, exc)

        default = default_collection()
        try:
            self.write(default)
        except OSError as exc:
            logger.error("Could not write default store %s: %s", self._db_file, exc)
        return default
