"""
taskview command line.

Usage:
    taskview                      Open the viewer (q to quit)
    taskview --once               Print the lists once and exit (no TUI)
    taskview --db PATH            Use another store (default: ./data/db.json)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from rich.console import Console

from taskview.events import TICK_INTERVAL, InputDeviceError
from taskview.models import TaskList
from taskview.navigation import TITLE, Cursor
from taskview.projector import project
from taskview.store import DB_PATH, FileTaskListProvider
from taskview.views.renderables import frame

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _positive_float(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if seconds <= 0:
        raise argparse.ArgumentTypeError("must be greater than zero")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskview",
        description="Terminal viewer for task lists (j/k move, l/h switch pane, q quit)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=DB_PATH,
        help=f"Path to the task list store (default: {DB_PATH})",
    )
    parser.add_argument(
        "--tick-interval",
        type=_positive_float,
        default=TICK_INTERVAL,
        metavar="SECONDS",
        help=f"Redraw cadence when idle (default: {TICK_INTERVAL:g})",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Print the lists once and exit (no TUI)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write log records to this file instead of stderr",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: WARNING)",
    )
    return parser


def configure_logging(level: str, log_file: Path | None = None) -> None:
    handlers: list[logging.Handler] = []
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    else:
        handlers.append(logging.StreamHandler())
    for handler in handlers:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logging.basicConfig(level=getattr(logging, level), handlers=handlers, force=True)


def print_once(task_lists: Sequence[TaskList], console: Console | None = None) -> int:
    """Print the initial frame and exit."""
    console = console or Console()
    list_pane, task_pane = project(task_lists, Cursor())
    console.print(frame(list_pane, task_pane, TITLE))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    task_lists = FileTaskListProvider(args.db).load()

    if args.once:
        return print_once(task_lists)

    from taskview.app import run

    try:
        run(task_lists, tick_interval=args.tick_interval)
    except InputDeviceError as e:
        logger.error("Input device failed: %s", e)
        print(f"taskview: input device failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
