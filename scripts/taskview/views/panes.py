"""Screen showing the title bar, the list pane and the task table."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Static
from rich.text import Text

from taskview.projector import ListPane, TaskPane
from taskview.views.renderables import list_renderable, task_table


class TitleBar(Static):
    """Application title."""

    DEFAULT_CSS = """
    TitleBar {
        height: 3;
        border: double red;
        color: red;
        content-align: center middle;
    }
    """


class ListPanel(Static):
    """Names of all task lists."""

    DEFAULT_CSS = """
    ListPanel {
        width: 20%;
        height: 100%;
        border: solid white;
        border-title-align: left;
    }
    """

    pane: ListPane = ()

    def on_mount(self) -> None:
        self.border_title = "Lists"

    def show(self, pane: ListPane) -> None:
        self.pane = pane
        self.update(list_renderable(pane))


class TaskTablePanel(Static):
    """Tasks of the active list."""

    DEFAULT_CSS = """
    TaskTablePanel {
        width: 80%;
        height: 100%;
        border: solid white;
        border-title-align: left;
    }
    """

    pane: TaskPane | None = None

    def show(self, pane: TaskPane) -> None:
        self.border_title = pane.title
        self.pane = pane
        self.update(task_table(pane))


class PanesScreen(Screen):
    """Main screen. Holds no selection state; it only shows frames."""

    DEFAULT_CSS = """
    PanesScreen {
        padding: 1 2;
    }

    #panes {
        height: 1fr;
    }
    """

    def compose(self) -> ComposeResult:
        yield TitleBar(id="title")
        with Horizontal(id="panes"):
            yield ListPanel(id="lists")
            yield TaskTablePanel(id="tasks")

    def show(self, list_pane: ListPane, task_pane: TaskPane, title: str) -> None:
        self.query_one(TitleBar).update(Text(title))
        self.query_one(ListPanel).show(list_pane)
        self.query_one(TaskTablePanel).show(task_pane)
