"""
Tests for the logging module.

Tests verify:
- JSON output carries service metadata and bound context
- Level filtering
- Repository failures are logged before PersistenceError propagates
"""

import json
import sqlite3

import pytest
import structlog
from structlog.testing import capture_logs

from order_spine.errors import PersistenceError
from order_spine.logging import bind_context, configure_logging, get_logger, unbind_context
from order_spine.models import Order
from order_spine.repositories import OrderRepository


class TestConfigureLogging:
    def test_json_output(self, capsys):
        configure_logging(level="INFO", json_format=True, service="orders-test")
        get_logger("tests").info("order_saved", order_id="o1")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "order_saved"
        assert payload["order_id"] == "o1"
        assert payload["level"] == "info"
        assert payload["logger_name"] == "tests"
        assert payload["service.name"] == "orders-test"
        assert "timestamp" in payload

    def test_debug_suppressed_at_info(self, capsys):
        configure_logging(level="INFO", json_format=True)
        get_logger("tests").debug("noisy")
        assert "noisy" not in capsys.readouterr().err

    def test_bound_context(self, capsys):
        configure_logging(level="INFO", json_format=True)
        bind_context(command="orders.save")
        get_logger().info("step")
        unbind_context("command")
        get_logger().info("after")

        lines = [json.loads(x) for x in capsys.readouterr().err.strip().splitlines()]
        assert lines[-2]["command"] == "orders.save"
        assert "command" not in lines[-1]


class TestRepositoryLogging:
    def test_failure_logged(self):
        repo = OrderRepository(sqlite3.connect(":memory:"))
        with capture_logs() as logs:
            with pytest.raises(PersistenceError):
                repo.save(Order("o1", 1.0, 1.0, 2.0))

        events = [e for e in logs if e["event"] == "order_save_failed"]
        assert len(events) == 1
        assert events[0]["order_id"] == "o1"
        assert events[0]["log_level"] == "warning"

    def test_success_logged_at_debug(self, repo):
        with capture_logs() as logs:
            repo.save(Order("o1", 1.0, 1.0, 2.0))
            repo.list_all()

        assert [e["event"] for e in logs] == ["order_saved", "orders_listed"]
        assert logs[1]["count"] == 1


class TestGetLogger:
    def test_logger_created_before_configuration(self, capsys):
        structlog.reset_defaults()
        logger = get_logger(__name__)

        configure_logging(level="DEBUG", json_format=True)
        logger.debug("late_configured")

        captured = capsys.readouterr()
        assert captured.out == ""
        payload = json.loads(captured.err.strip().splitlines()[-1])
        assert payload["event"] == "late_configured"
        assert payload["logger_name"] == __name__

    def test_repository_logs_stay_off_stdout(self, repo, capsys):
        configure_logging(level="DEBUG", json_format=True)
        repo.save(Order("o1", 1.0, 1.0, 2.0))
        repo.count_all()

        captured = capsys.readouterr()
        assert captured.out == ""
        events = [json.loads(x)["event"] for x in captured.err.strip().splitlines()]
        assert "order_saved" in events
