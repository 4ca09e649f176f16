"""Tests for the process-level helpers in flagbind.cli."""

import json
import sys

import pytest

from flagbind.cli import describe, exit_code, json_print, parse_args, report_error, show_help
from flagbind.errors import HelpRequested, MissingValue, ParseFromFailure, UnknownFlag
from flagbind.flag import Opt, Toggle
from flagbind.flagset import FlagSet


def _sample() -> tuple[FlagSet, Opt, Toggle]:
    fs = FlagSet()
    num = fs.add("num", "A number to use.", Opt(int))
    quiet = fs.add("quiet", "Suppress [bold]output[/bold].", Toggle())
    return fs, num, quiet


# ---------------------------------------------------------------------------
# show_help()
# ---------------------------------------------------------------------------


class TestShowHelp:
    def test_one_block_per_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        fs, _, _ = _sample()
        show_help(fs.help_info)
        err = capsys.readouterr().err
        assert "--num" in err
        assert "A number to use." in err
        assert err.index("--num") < err.index("--quiet")

    def test_markup_printed_literally(self, capsys: pytest.CaptureFixture[str]) -> None:
        fs, _, _ = _sample()
        show_help(fs.help_info)
        assert "Suppress [bold]output[/bold]." in capsys.readouterr().err

    def test_nothing_on_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        fs, _, _ = _sample()
        show_help(fs.help_info)
        assert capsys.readouterr().out == ""

    def test_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        show_help({})
        assert capsys.readouterr().err == ""


# ---------------------------------------------------------------------------
# exit_code() / describe() / report_error()
# ---------------------------------------------------------------------------


class TestDiagnostics:
    def test_exit_codes(self) -> None:
        assert exit_code(HelpRequested()) == 0
        assert exit_code(UnknownFlag("x")) == 1
        assert exit_code(MissingValue("x")) == 1
        assert exit_code(ParseFromFailure("x", "v", "m")) == 1

    def test_describe(self) -> None:
        assert describe(HelpRequested()) is None
        assert describe(UnknownFlag("x")) == "Unknown flag -x"
        assert describe(MissingValue("x")) == "Missing value for flag -x"
        assert describe(ParseFromFailure("x", "v", "m")) == "Invalid value 'v' for flag -x: m"

    def test_report_error_prints_message_and_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        fs, _, _ = _sample()
        status = report_error(UnknownFlag("bogus"), fs.help_info)
        err = capsys.readouterr().err
        assert status == 1
        assert "error:" in err
        assert "Unknown flag -bogus" in err
        assert "--num" in err

    def test_report_help_prints_only_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        fs, _, _ = _sample()
        status = report_error(HelpRequested(), fs.help_info)
        err = capsys.readouterr().err
        assert status == 0
        assert "error:" not in err
        assert "--quiet" in err


# ---------------------------------------------------------------------------
# parse_args()
# ---------------------------------------------------------------------------


class TestParseArgs:
    def test_success_returns_rest(self) -> None:
        fs, num, quiet = _sample()
        assert parse_args(fs, ["in.txt", "-num", "3", "-quiet"]) == ["in.txt"]
        assert num.value == 3
        assert quiet.value is True

    def test_reads_sys_argv(self, monkeypatch: pytest.MonkeyPatch) -> None:
        fs, num, _ = _sample()
        monkeypatch.setattr(sys, "argv", ["prog", "-num", "8", "out"])
        assert parse_args(fs) == ["out"]
        assert num.value == 8

    def test_help_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        fs, _, _ = _sample()
        with pytest.raises(SystemExit) as exc_info:
            parse_args(fs, ["-h"])
        assert exc_info.value.code == 0
        assert "--num" in capsys.readouterr().err

    def test_unknown_flag_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        fs, _, _ = _sample()
        with pytest.raises(SystemExit) as exc_info:
            parse_args(fs, ["-nope"])
        assert exc_info.value.code == 1
        assert "Unknown flag -nope" in capsys.readouterr().err

    def test_missing_value_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        fs, _, _ = _sample()
        with pytest.raises(SystemExit) as exc_info:
            parse_args(fs, ["-num"])
        assert exc_info.value.code == 1
        assert "Missing value for flag -num" in capsys.readouterr().err

    def test_bad_value_names_value(self, capsys: pytest.CaptureFixture[str]) -> None:
        fs, num, _ = _sample()
        with pytest.raises(SystemExit) as exc_info:
            parse_args(fs, ["-num", "many"])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "'many'" in err
        assert "-num" in err
        assert num.value is None

    def test_type_error_in_destination_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        class Raw:
            def parse_from(self, token: str) -> None:
                bytes(token)  # type: ignore[call-overload]

        fs = FlagSet()
        fs.add("raw", "Raw bytes.", Raw())
        with pytest.raises(SystemExit) as exc_info:
            parse_args(fs, ["-raw", "x"])
        assert exc_info.value.code == 1
        assert "Invalid value 'x' for flag -raw" in capsys.readouterr().err

    def test_flagset_method_delegates(self, capsys: pytest.CaptureFixture[str]) -> None:
        fs, num, _ = _sample()
        assert fs.parse_args(["-num", "2"]) == []
        assert num.value == 2
        with pytest.raises(SystemExit) as exc_info:
            fs.parse_args(["-help"])
        assert exc_info.value.code == 0


# ---------------------------------------------------------------------------
# json_print()
# ---------------------------------------------------------------------------


class TestOutputHelpers:
    def test_json_print(self, capsys: pytest.CaptureFixture[str]) -> None:
        json_print({"status": "ok", "count": 42})
        captured = capsys.readouterr()
        assert json.loads(captured.out) == {"status": "ok", "count": 42}
        assert captured.err == ""
