"""Shared builders for test collections."""

from datetime import datetime

from taskview.models import Task, TaskList

WHEN = datetime(2024, 3, 5, 7, 8, 9)


def make_lists(*counts: int) -> list[TaskList]:
    """One list per count, each holding that many tasks."""
    return [
        TaskList(
            id=i,
            name=f"List {i}",
            tasks=tuple(
                Task(
                    id=t,
                    name=f"Task {i}.{t}",
                    tags=(f"tag{t}",),
                    start_date=WHEN,
                    due_date=WHEN,
                )
                for t in range(count)
            ),
        )
        for i, count in enumerate(counts)
    ]
