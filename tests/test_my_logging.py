"""Tests for the debug logging helpers."""

import pytest

from corsguard.my_logging import debug_log, is_debug_enabled, setup_debug_logging


@pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes"])
def test_debug_enabled(monkeypatch, value):
    monkeypatch.setenv("CORSGUARD_DEBUG", value)

    assert is_debug_enabled() is True


@pytest.mark.parametrize("value", ["", "0", "false", "no"])
def test_debug_disabled(monkeypatch, value):
    monkeypatch.setenv("CORSGUARD_DEBUG", value)

    assert is_debug_enabled() is False


def test_debug_log_writes_one_line(monkeypatch, capsys):
    monkeypatch.setenv("CORSGUARD_DEBUG", "true")

    debug_log("CORS origin not allowed", origin="https://cors.test", method="GET")

    assert capsys.readouterr().err == "[DEBUG] CORS origin not allowed origin=https://cors.test method=GET\n"


def test_debug_log_without_context(monkeypatch, capsys):
    monkeypatch.setenv("CORSGUARD_DEBUG", "true")

    debug_log("plain message")

    assert capsys.readouterr().err == "[DEBUG] plain message\n"


def test_debug_log_silent_by_default(capsys):
    debug_log("hidden", key="value")

    assert capsys.readouterr().err == ""


def test_setup_debug_logging(monkeypatch, capsys):
    assert setup_debug_logging() is False
    assert capsys.readouterr().err == ""

    monkeypatch.setenv("CORSGUARD_DEBUG", "yes")

    assert setup_debug_logging() is True
    assert "Debug mode enabled" in capsys.readouterr().err
