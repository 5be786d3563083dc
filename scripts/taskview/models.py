"""
Data model for task lists.

Protocols define the interface; implementations can be swapped
for testing or alternative data sources.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, Sequence


@dataclass(frozen=True)
class Task:
    """Immutable snapshot of a single task."""

    id: int
    name: str
    tags: tuple[str, ...]
    start_date: datetime
    due_date: datetime


@dataclass(frozen=True)
class TaskList:
    """A named, ordered sequence of tasks.

    Navigation addresses lists by position; ``id`` is carried for the
    store only and need not be unique.
    """

    id: int
    name: str
    tasks: tuple[Task, ...]

    def __len__(self) -> int:
        return len(self.tasks)


class TaskListProvider(Protocol):
    """Protocol for obtaining the task-list collection."""

    def load(self) -> Sequence[TaskList]:
        """Return a non-empty collection whose lists are all non-empty."""
        ...
