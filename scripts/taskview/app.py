"""
taskview TUI application.

Textual is the render driver only: key presses are forwarded to a KeyFeed
read by the EventSource thread, and the consumer loop runs in a thread
worker, handing each frame back to the app.
"""

from __future__ import annotations

import logging
from typing import Sequence

from textual import events, work
from textual.app import App

from taskview.events import TICK_INTERVAL, EventSource, InputDeviceError, KeyFeed
from taskview.models import TaskList
from taskview.navigation import TITLE, Cursor, run_session
from taskview.projector import ListPane, TaskPane
from taskview.views.panes import PanesScreen

logger = logging.getLogger(__name__)


class TaskViewApp(App):
    """Main taskview application."""

    TITLE = TITLE

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(
        self,
        task_lists: Sequence[TaskList],
        tick_interval: float = TICK_INTERVAL,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._task_lists = task_lists
        self._feed = KeyFeed()
        self._source = EventSource(self._feed, tick_interval=tick_interval)
        self._panes: PanesScreen | None = None
        self._session_closed = False
        self.final_cursor: Cursor | None = None
        self.failure: InputDeviceError | None = None

    async def on_mount(self) -> None:
        """Called when app is mounted."""
        self._panes = PanesScreen()
        await self.push_screen(self._panes)
        self._source.start()
        self._consume()

    def on_unmount(self) -> None:
        self._session_closed = True
        self._feed.close()

    def on_key(self, event: events.Key) -> None:
        key = event.character if event.is_printable and event.character else event.key
        self._feed.push(key)

    @work(thread=True, name="taskview-session")
    def _consume(self) -> None:
        """Run the session loop until 'q' or input failure."""
        try:
            self.final_cursor = run_session(
                self._source.channel, self._task_lists, self._draw_from_thread
            )
        except InputDeviceError as exc:
            if self._session_closed:
                return
            self.failure = exc
        self._post_to_app(self.exit)

    def _draw_from_thread(
        self, list_pane: ListPane, task_pane: TaskPane, title: str
    ) -> None:
        self._post_to_app(self.draw, list_pane, task_pane, title)

    def _post_to_app(self, callback, *args) -> None:
        if self._session_closed:
            return
        try:
            self.call_from_thread(callback, *args)
        except RuntimeError as exc:
            # App loop already gone (e.g. ctrl+c)
            logger.debug("Dropped call after shutdown: %s", exc)

    def draw(self, list_pane: ListPane, task_pane: TaskPane, title: str) -> None:
        """Draw one frame."""
        self._panes.show(list_pane, task_pane, title)


def run(
    task_lists: Sequence[TaskList], tick_interval: float = TICK_INTERVAL
) -> Cursor | None:
    """Run the TUI until 'q'. Raises InputDeviceError if input fails."""
    app = TaskViewApp(task_lists, tick_interval=tick_interval)
    app.run()
    if app.failure is not None:
        raise app.failure
    return app.final_cursor
