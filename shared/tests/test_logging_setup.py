"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from shared.logging import setup_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


def test_json_logs_carry_service_and_context(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(log_level="DEBUG", json_logs=True, service_name="edge-proxy")
    structlog.contextvars.bind_contextvars(request_id="req-7")

    structlog.get_logger("tests").info("downstream_call_succeeded", dependency="payments")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "downstream_call_succeeded"
    assert record["dependency"] == "payments"
    assert record["service"] == "edge-proxy"
    assert record["request_id"] == "req-7"
    assert record["level"] == "info"
    assert "timestamp" in record


def test_noisy_loggers_are_raised_to_warning() -> None:
    setup_logging(log_level="DEBUG")

    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger().level == logging.DEBUG


def test_stdlib_records_are_rendered(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(json_logs=True, service_name="edge-proxy")

    logging.getLogger("uvicorn.error").info("server started")

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["event"] == "server started"
    assert record["service"] == "edge-proxy"
