"""Tests for consoleprompts.output — status message helpers."""

from consoleprompts.lib.log_lib import init_output
from consoleprompts.output import (
    get_output, print_error, print_info, print_ok, print_step, print_warn,
    register_tip, trace, Tip,
)


def test_print_ok_format(capsys):
    """print_ok should output '[OK] message' format."""
    print_ok("it works")
    assert "[OK] it works" in capsys.readouterr().out


def test_print_warn_format(capsys):
    print_warn("careful")
    assert "[WARN] careful" in capsys.readouterr().out


def test_print_info_format(capsys):
    print_info("indented")
    assert capsys.readouterr().out == "  indented\n"


def test_print_step_format(capsys):
    """print_step should output '== Step N/M: msg ==' format."""
    print_step(2, 5, "Numbers")
    assert "== Step 2/5: Numbers ==" in capsys.readouterr().out


class TestQuietAxisSuppression:
    """print_*() functions respect the THAC0 quiet axis."""

    def test_quiet_QQ_still_shows_prints(self, capsys):
        """-QQ (verbosity -2) still shows print_*() functions."""
        init_output(verbosity=-2)
        print_ok("still visible")
        print_info("still visible")
        captured = capsys.readouterr()
        assert "[OK] still visible" in captured.out
        assert "  still visible" in captured.out

    def test_quiet_QQQ_suppresses_prints(self, capsys):
        """-QQQ (verbosity -3) suppresses all print_*() except errors."""
        init_output(verbosity=-3)
        print_ok("hidden")
        print_warn("hidden")
        print_step(1, 3, "hidden")
        print_info("hidden")
        assert capsys.readouterr().out == ""

    def test_QQQ_still_shows_errors(self, capsys):
        init_output(verbosity=-3)
        print_error("visible error")
        assert "ERROR: visible error" in capsys.readouterr().err

    def test_quiet_QQQQ_suppresses_everything(self, capsys):
        """-QQQQ (verbosity -4) suppresses even errors (hard wall)."""
        init_output(verbosity=-4)
        print_ok("hidden")
        print_error("also hidden")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestReExports:
    """output.py re-exports the log_lib public API."""

    def test_exports(self):
        assert callable(get_output)
        assert callable(register_tip)
        assert callable(trace)
        assert Tip is not None
