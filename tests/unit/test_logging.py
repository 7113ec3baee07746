"""Tests for pidprobe logging utilities."""

from __future__ import annotations

import json

import structlog

from pidprobe.logging import configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output_to_stderr(self, capsys) -> None:
        configure_logging(level="INFO", json_output=True)
        get_logger("test").info("tool_invocation_started", pid=100)

        captured = capsys.readouterr()
        assert captured.out == ""
        record = json.loads(captured.err.strip())
        assert record["event"] == "tool_invocation_started"
        assert record["pid"] == 100
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_warning_level_name(self, capsys) -> None:
        configure_logging(level="INFO", json_output=True)
        get_logger("test").warning("careful")

        assert json.loads(capsys.readouterr().err.strip())["level"] == "warning"

    def test_level_filters(self, capsys) -> None:
        configure_logging(level="WARNING", json_output=True)
        log = get_logger("test")
        log.info("hidden")
        log.warning("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def test_unknown_level_falls_back_to_info(self, capsys) -> None:
        configure_logging(level="chatty", json_output=True)
        log = get_logger("test")
        log.debug("hidden")
        log.info("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def test_console_renderer_is_default(self) -> None:
        configure_logging()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
