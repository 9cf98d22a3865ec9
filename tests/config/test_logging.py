"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Generator

import pytest
import structlog
from click.testing import CliRunner

from touban.config.logging import bind_command, configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    pkg_level = logging.getLogger("touban").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("touban").setLevel(pkg_level)
    structlog.contextvars.clear_contextvars()


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("touban").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_quiet_by_default(self) -> None:
        configure_logging()
        assert logging.getLogger("touban").level == logging.WARNING

    def test_json_lines_on_stderr(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("touban.test").warning("rotation", selected=2)
        captured = capfd.readouterr()
        assert captured.out == ""
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "rotation"
        assert parsed["selected"] == 2
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "touban.test"
        assert "timestamp" in parsed

    def test_service_debug_logs_flow_through(self, capfd: pytest.CaptureFixture[str]) -> None:
        from touban.services.ledger import LedgerService

        configure_logging(verbose=True, log_json=True)
        LedgerService().show("x")
        lines = [json.loads(line) for line in capfd.readouterr().err.splitlines()]
        assert any(
            rec["logger"] == "touban.services.ledger"
            and "INVALID_TOKEN_CHARACTER" in rec["event"]
            for rec in lines
        )

    def test_debug_hidden_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("touban.services.ledger").debug("noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(log_json=False)
        configure_logging(log_json=True)
        assert len(logging.getLogger().handlers) == 1

    def test_command_tags_every_record(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True, command="assign")
        logging.getLogger("touban.services.ledger").debug("picked")
        structlog.get_logger("touban.test").warning("reset")
        records = [json.loads(line) for line in capfd.readouterr().err.splitlines()]
        assert [rec["command"] for rec in records] == ["assign", "assign"]

    def test_reconfigure_drops_previous_command(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True, command="create")
        configure_logging(log_json=True)
        structlog.get_logger("touban.test").warning("plain")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert "command" not in parsed


class TestBindCommand:
    def test_binds_and_clears(self) -> None:
        structlog.contextvars.bind_contextvars(stale=True)
        bind_command("show")
        assert structlog.contextvars.get_contextvars() == {"command": "show"}
        bind_command(None)
        assert structlog.contextvars.get_contextvars() == {}

    def test_cli_binds_invoked_subcommand(
        self, cli_runner: CliRunner, make_token: Callable[..., str]
    ) -> None:
        from touban.cli import cli

        result = cli_runner.invoke(cli, ["show", "--book", make_token([("A", 0)])])
        assert result.exit_code == 0
        assert structlog.contextvars.get_contextvars() == {"command": "show"}
