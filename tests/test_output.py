"""Tests for the command output manager."""

from __future__ import annotations

import json

import pytest

from oauth_tooling.output import (
    OutputFormat,
    OutputManager,
    _should_disable_color,
    get_output,
    reset_output,
    set_output,
)


@pytest.fixture()
def non_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("oauth_tooling.output._is_tty", lambda: False)


class TestFormatResolution:
    def test_auto_resolves_to_json_when_piped(self, non_tty: None) -> None:
        assert OutputManager().format == OutputFormat.JSON

    def test_auto_resolves_to_rich_on_tty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("oauth_tooling.output._is_tty", lambda: True)
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "xterm")
        assert OutputManager().format == OutputFormat.RICH

    def test_no_color_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "")
        assert _should_disable_color() is True

    def test_term_dumb(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "dumb")
        assert _should_disable_color() is True


class TestStreams:
    def test_print_json_goes_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        out = OutputManager(format=OutputFormat.JSON, no_color=True)
        out.print_json({"access_token": "abc"})
        captured = capsys.readouterr()
        assert json.loads(captured.out) == {"access_token": "abc"}
        assert captured.err == ""

    def test_error_always_shown(self, capsys: pytest.CaptureFixture[str]) -> None:
        OutputManager(no_color=True, quiet=True).error("bad [thing]")
        assert capsys.readouterr().err == "Error: bad [thing]\n"

    def test_warn_suppressed_by_quiet(self, capsys: pytest.CaptureFixture[str]) -> None:
        OutputManager(no_color=True, quiet=True).warn("hmm")
        assert capsys.readouterr().err == ""

    def test_warn_with_cause(self, capsys: pytest.CaptureFixture[str]) -> None:
        OutputManager(no_color=True).warn("Error validating token", ValueError("x"))
        assert capsys.readouterr().err == "Warning: Error validating token x\n"

    def test_debug_requires_verbose(self, capsys: pytest.CaptureFixture[str]) -> None:
        OutputManager(no_color=True).debug("hidden")
        OutputManager(no_color=True, verbose=True).debug("shown")
        assert capsys.readouterr().err == "[debug] shown\n"


def test_global_instance_management() -> None:
    reset_output()
    first = get_output()
    assert get_output() is first
    custom = OutputManager(quiet=True)
    set_output(custom)
    assert get_output() is custom
    reset_output()
    assert get_output() is not custom
