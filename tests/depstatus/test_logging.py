"""Tests for structured logging setup."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from depstatus.core.config import Settings
from depstatus.core.logging import setup_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


class TestSetupLogging:
    def test_json_format(self, capsys):
        setup_logging(Settings(log_format="json"))

        structlog.get_logger("depstatus.test").info("analysis.completed", crates=2)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "analysis.completed"
        assert record["crates"] == 2
        assert record["level"] == "info"
        assert record["logger"] == "depstatus.test"
        assert "timestamp" in record

    def test_console_format(self, capsys):
        setup_logging(Settings(log_format="console"))

        structlog.get_logger("depstatus.test").info("analysis.completed", crates=2)

        out = capsys.readouterr().out
        assert "analysis.completed" in out
        assert "crates=2" in out
        assert not out.lstrip().startswith("{")

    def test_level_filters_records(self, capsys):
        setup_logging(Settings(log_level="WARNING", log_format="json"))
        log = structlog.get_logger("depstatus.test")

        log.info("analysis.completed")
        log.warning("analysis.failed")

        events = [json.loads(line)["event"] for line in capsys.readouterr().out.splitlines()]
        assert events == ["analysis.failed"]

    def test_stdlib_records_share_the_formatter(self, capsys):
        setup_logging(Settings(log_format="json"))

        logging.getLogger("depstatus.stdlib").warning("plain %s", "record")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["event"] == "plain record"
        assert record["level"] == "warning"
