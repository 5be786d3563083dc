"""Tests for cli.py - argument parsing, logging setup and entry point."""

import logging
from pathlib import Path

import pytest

from helpers import make_lists
from taskview import cli
from taskview.events import InputDeviceError
from taskview.store import dump_collection


@pytest.fixture
def no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> list:
    calls = []
    monkeypatch.setattr(cli, "configure_logging", lambda *args: calls.append(args))
    return calls


@pytest.fixture
def basic_config(monkeypatch: pytest.MonkeyPatch) -> list:
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    yield calls
    for kwargs in calls:
        for handler in kwargs["handlers"]:
            handler.close()


class TestBuildParser:
    """Tests for build_parser function."""

    def test_defaults(self) -> None:
        args = cli.build_parser().parse_args([])

        assert args.db == Path("data") / "db.json"
        assert args.tick_interval == 1.0
        assert args.once is False
        assert args.log_file is None
        assert args.log_level == "WARNING"

    def test_overrides(self, tmp_path: Path) -> None:
        args = cli.build_parser().parse_args(
            ["--db", str(tmp_path / "x.json"), "--tick-interval", "0.5", "--once"]
        )

        assert args.db == tmp_path / "x.json"
        assert args.tick_interval == 0.5
        assert args.once

    @pytest.mark.parametrize("value", ["0", "-2", "soon"])
    def test_rejects_bad_tick_interval(self, value: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.build_parser().parse_args(["--tick-interval", value])

        assert exc_info.value.code == 2


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_log_file(self, tmp_path: Path, basic_config: list) -> None:
        log_file = tmp_path / "logs" / "taskview.log"

        cli.configure_logging("INFO", log_file)

        assert len(basic_config) == 1
        kwargs = basic_config[0]
        assert kwargs["level"] == logging.INFO
        assert kwargs["force"] is True
        (handler,) = kwargs["handlers"]
        assert isinstance(handler, logging.FileHandler)
        assert Path(handler.baseFilename) == log_file
        assert log_file.parent.is_dir()

        record = logging.LogRecord(
            "taskview.test", logging.INFO, __file__, 1, "hello %s", ("there",), None
        )
        assert "[INFO] taskview.test: hello there" in handler.format(record)

    def test_stderr_by_default(self, basic_config: list) -> None:
        cli.configure_logging("DEBUG")

        kwargs = basic_config[0]
        assert kwargs["level"] == logging.DEBUG
        (handler,) = kwargs["handlers"]
        assert type(handler) is logging.StreamHandler


class TestMain:
    """Tests for main function."""

    def test_once_prints_initial_frame(
        self, tmp_path: Path, capsys: pytest.CaptureFixture, no_logging_setup: list
    ) -> None:
        db = tmp_path / "db.json"
        db.write_text(dump_collection(make_lists(2, 1)))

        code = cli.main(["--db", str(db), "--once"])

        assert code == 0
        out = capsys.readouterr().out
        assert "Tasks But Good" in out
        assert "List 0" in out
        assert "List 1" in out
        assert no_logging_setup == [("WARNING", None)]

    def test_once_seeds_missing_store(
        self, tmp_path: Path, capsys: pytest.CaptureFixture, no_logging_setup: list
    ) -> None:
        db = tmp_path / "data" / "db.json"

        assert cli.main(["--db", str(db), "--once"]) == 0

        assert db.exists()
        assert "Personal" in capsys.readouterr().out

    def test_runs_tui_with_options(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, no_logging_setup: list
    ) -> None:
        import taskview.app

        calls = []
        monkeypatch.setattr(
            taskview.app, "run", lambda lists, tick_interval: calls.append((lists, tick_interval))
        )
        db = tmp_path / "db.json"
        db.write_text(dump_collection(make_lists(1)))

        assert cli.main(["--db", str(db), "--tick-interval", "0.2"]) == 0

        assert len(calls) == 1
        assert [tl.name for tl in calls[0][0]] == ["List 0"]
        assert calls[0][1] == 0.2

    def test_input_failure_exits_nonzero(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture,
        no_logging_setup: list,
    ) -> None:
        import taskview.app

        def fail(lists, tick_interval):
            raise InputDeviceError("key feed closed")

        monkeypatch.setattr(taskview.app, "run", fail)
        db = tmp_path / "db.json"
        db.write_text(dump_collection(make_lists(1)))

        assert cli.main(["--db", str(db)]) == 1
        assert "input device failed" in capsys.readouterr().err
