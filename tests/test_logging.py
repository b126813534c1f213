"""Tests for setup_logging: structlog routed through stdlib handlers to stderr."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from project_inspector.core.logging import setup_logging


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    logging.getLogger("project_inspector").setLevel(logging.NOTSET)


class TestSetupLogging:
    def test_json_format_goes_to_stderr(self, monkeypatch, capsys):
        monkeypatch.setenv("PROJECT_INSPECTOR_LOG_FORMAT", "json")
        monkeypatch.delenv("PROJECT_INSPECTOR_LOG_LEVEL", raising=False)
        setup_logging()

        structlog.get_logger("project_inspector.tests").warning("detector.failed", detector="framework")

        captured = capsys.readouterr()
        assert captured.out == ""
        lines = [line for line in captured.err.splitlines() if line.strip()]
        record = json.loads(lines[-1])
        assert record["event"] == "detector.failed"
        assert record["detector"] == "framework"
        assert record["level"] == "warning"
        assert record["logger"] == "project_inspector.tests"
        assert "timestamp" in record

    def test_level_from_env(self, monkeypatch, capsys):
        monkeypatch.setenv("PROJECT_INSPECTOR_LOG_FORMAT", "json")
        monkeypatch.setenv("PROJECT_INSPECTOR_LOG_LEVEL", "error")
        setup_logging()

        structlog.get_logger("project_inspector.tests").warning("command.start")

        assert capsys.readouterr().err == ""

    def test_verbose_enables_debug(self, monkeypatch, capsys):
        monkeypatch.setenv("PROJECT_INSPECTOR_LOG_FORMAT", "json")
        monkeypatch.delenv("PROJECT_INSPECTOR_LOG_LEVEL", raising=False)
        setup_logging(verbose=True)

        structlog.get_logger("project_inspector.tests").debug("command.exit", returncode=2)

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["event"] == "command.exit"
        assert record["level"] == "debug"
