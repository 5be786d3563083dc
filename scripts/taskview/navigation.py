"""Selection state machine and the consumer loop that drives it."""

from __future__ import annotations

import logging
import queue
from dataclasses import dataclass, replace
from typing import Callable, Final, Sequence

from taskview.events import Event, InputFailed, KeyPress, Tick
from taskview.models import TaskList
from taskview.projector import ListPane, TaskPane, project

logger = logging.getLogger(__name__)

TITLE = "Tasks But Good"

KEY_QUIT = "q"
KEY_DOWN = "j"
KEY_UP = "k"
KEY_ENTER_TASKS = "l"
KEY_LEAVE_TASKS = "h"


@dataclass(frozen=True)
class Cursor:
    """Two-level selection: active list, and active task when focused."""

    list_index: int = 0
    task_index: int | None = None

    @property
    def in_task_focus(self) -> bool:
        return self.task_index is not None


class _Quit:
    def __repr__(self) -> str:
        return "QUIT"


QUIT: Final = _Quit()

Renderer = Callable[[ListPane, TaskPane, str], None]


class SelectionStateMachine:
    """Applies navigation keys to a Cursor over a fixed collection.

    Bounds are read from the collection on every transition, so the task
    bound always belongs to the currently selected list.
    """

    def __init__(self, task_lists: Sequence[TaskList]) -> None:
        if not task_lists:
            raise ValueError("at least one task list is required")
        self._task_lists = task_lists

    def _task_count(self, cursor: Cursor) -> int:
        return len(self._task_lists[cursor.list_index].tasks)

    def apply(self, cursor: Cursor, event: Event) -> Cursor | _Quit:
        """Return the cursor after ``event``, or QUIT."""
        if not isinstance(event, KeyPress):
            return cursor

        key = event.key
        if key == KEY_QUIT:
            return QUIT

        if cursor.task_index is None:
            last_list = len(self._task_lists) - 1
            if key == KEY_DOWN:
                return replace(cursor, list_index=min(cursor.list_index + 1, last_list))
            if key == KEY_UP:
                return replace(cursor, list_index=max(cursor.list_index - 1, 0))
            if key == KEY_ENTER_TASKS and self._task_count(cursor) > 0:
                return replace(cursor, task_index=0)
            return cursor

        last_task = self._task_count(cursor) - 1
        if key == KEY_DOWN:
            return replace(cursor, task_index=min(cursor.task_index + 1, last_task))
        if key == KEY_UP:
            return replace(cursor, task_index=max(cursor.task_index - 1, 0))
        if key == KEY_LEAVE_TASKS:
            return replace(cursor, task_index=None)
        return cursor


def run_session(
    channel: queue.Queue[Event],
    task_lists: Sequence[TaskList],
    render: Renderer,
    title: str = TITLE,
) -> Cursor:
    """Consume events until QUIT, drawing once up front and once per event.

    Returns the final cursor. Re-raises the input failure if the event
    source aborted.
    """
    machine = SelectionStateMachine(task_lists)
    cursor = Cursor()
    render(*project(task_lists, cursor), title)

    while True:
        event = channel.get()
        if isinstance(event, InputFailed):
            raise event.error
        result = machine.apply(cursor, event)
        if result is QUIT:
            logger.debug("Quit at %s", cursor)
            return cursor
        if not isinstance(event, Tick) and result != cursor:
            logger.debug("%s -> %s", cursor, result)
        cursor = result
        render(*project(task_lists, cursor), title)
