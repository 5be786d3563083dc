"""Rich renderables for projected panes.

Shared by the Textual widgets and the one-shot printer.
"""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text
from rich import box

from taskview.projector import ListPane, TaskPane

HIGHLIGHT_STYLE = Style(color="black", bgcolor="red", bold=True)
TITLE_STYLE = Style(color="red")
TASK_HEADERS = ("Name", "Tags", "Start Date", "Due Date")
# Relative widths of the task columns
TASK_RATIOS = (3, 3, 2, 2)


def format_tags(tags: tuple[str, ...]) -> str:
    return ", ".join(tags)


def list_renderable(pane: ListPane) -> Text:
    """One line per list; the active list is highlighted."""
    text = Text()
    for i, row in enumerate(pane):
        if i:
            text.append("\n")
        text.append(row.name, style=HIGHLIGHT_STYLE if row.highlighted else "")
    return text


def task_table(pane: TaskPane) -> Table:
    table = Table(box=None, expand=True, pad_edge=False, header_style="bold")
    for header, ratio in zip(TASK_HEADERS, TASK_RATIOS):
        table.add_column(header, ratio=ratio, no_wrap=True, overflow="ellipsis")
    for row in pane.rows:
        table.add_row(
            row.name,
            format_tags(row.tags),
            row.start_date,
            row.due_date,
            style=HIGHLIGHT_STYLE if row.highlighted else None,
        )
    return table


def frame(list_pane: ListPane, task_pane: TaskPane, title: str) -> RenderableType:
    """A whole frame for printing outside the TUI."""
    heading = Panel(
        Text(title, justify="center"),
        box=box.DOUBLE,
        style=TITLE_STYLE,
    )
    body = Table.grid(expand=True)
    body.add_column(ratio=1)
    body.add_column(ratio=4)
    body.add_row(
        Panel(list_renderable(list_pane), title="Lists", title_align="left"),
        Panel(task_table(task_pane), title=task_pane.title, title_align="left"),
    )
    return Group(heading, body)
