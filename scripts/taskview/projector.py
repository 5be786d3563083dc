"""Pure derivation of render-ready panes from the collection and cursor."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Sequence

from taskview.models import TaskList

if TYPE_CHECKING:
    from taskview.navigation import Cursor

DATE_FORMAT = "%m/%d/%y %H:%M:%S"


@dataclass(frozen=True)
class ListRow:
    name: str
    highlighted: bool


@dataclass(frozen=True)
class TaskRow:
    name: str
    tags: tuple[str, ...]
    start_date: str
    due_date: str
    highlighted: bool


ListPane = tuple[ListRow, ...]


@dataclass(frozen=True)
class TaskPane:
    """Rows of the active list, titled with the list's name.

    Unlike ListPane this is not a bare tuple: the task table also needs the
    active list's name for its border title.
    """

    title: str
    rows: tuple[TaskRow, ...]


def format_timestamp(ts: datetime) -> str:
    """Format a timestamp in the local time zone."""
    return ts.astimezone().strftime(DATE_FORMAT)


def project_lists(task_lists: Sequence[TaskList], cursor: Cursor) -> ListPane:
    return tuple(
        ListRow(name=task_list.name, highlighted=i == cursor.list_index)
        for i, task_list in enumerate(task_lists)
    )


def project_tasks(task_lists: Sequence[TaskList], cursor: Cursor) -> TaskPane:
    task_list = task_lists[cursor.list_index]
    rows = tuple(
        TaskRow(
            name=task.name,
            tags=task.tags,
            start_date=format_timestamp(task.start_date),
            due_date=format_timestamp(task.due_date),
            highlighted=i == cursor.task_index,
        )
        for i, task in enumerate(task_list.tasks)
    )
    return TaskPane(title=task_list.name, rows=rows)


def project(task_lists: Sequence[TaskList], cursor: Cursor) -> tuple[ListPane, TaskPane]:
    """Both panes for one frame."""
    return project_lists(task_lists, cursor), project_tasks(task_lists, cursor)
