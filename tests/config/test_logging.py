"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from exclctl.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("exclctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("exclctl").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("exclctl.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "exclctl.test"
        assert "timestamp" in parsed

    def test_service_debug_records_rendered(self, capfd: pytest.CaptureFixture[str]) -> None:
        from exclctl.services.exclusions import ExclusionService

        configure_logging(verbose=True, log_json=True)
        ExclusionService(["exc monday <09:00:00"]).check()

        lines = [json.loads(line) for line in capfd.readouterr().err.strip().splitlines()]
        parsed = [line for line in lines if line["event"] == "rules_parsed"]
        assert parsed[0]["count"] == 1
        assert parsed[0]["level"] == "debug"
        assert all(line["logger"] == "exclctl.services.exclusions" for line in lines)

    def test_debug_hidden_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("exclctl.services.exclusions").debug("hidden")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

    def test_expand_logs_rule_context(self, capfd: pytest.CaptureFixture[str]) -> None:
        from datetime import datetime

        from exclctl.services.exclusions import ExclusionService

        configure_logging(verbose=True, log_json=True)
        ExclusionService(["exc monday <09:00:00"]).expand(
            datetime(2024, 12, 2), datetime(2024, 12, 3)
        )

        lines = [json.loads(line) for line in capfd.readouterr().err.strip().splitlines()]
        [expanded] = [line for line in lines if line["event"] == "rule_expanded"]
        assert expanded["op"] == "expand"
        assert expanded["rule"] == "exc monday <09:00:00"
        assert expanded["intervals"] == 1
