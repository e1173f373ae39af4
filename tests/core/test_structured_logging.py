"""Tests for JSON log output (LOG_JSON=true)."""

from __future__ import annotations

import json
import logging
import sys

from app.core.logging import _ContainerFormatter, _JsonFormatter


def _record(msg: str, *args: object, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="app.services.users_service",
        level=level,
        pathname="users_service.py",
        lineno=42,
        msg=msg,
        args=args,
        exc_info=None,
    )


def test_json_formatter_produces_valid_json() -> None:
    output = _JsonFormatter().format(
        _record("Created user id=%s email=%s", "u-1", "alice@example.com")
    )
    parsed = json.loads(output)
    assert parsed["level"] == "INFO"
    assert parsed["logger"] == "app.services.users_service"
    assert parsed["message"] == "Created user id=u-1 email=alice@example.com"
    assert "timestamp" in parsed


def test_json_formatter_includes_request_context_fields() -> None:
    record = _record("GET /users")
    record.request_id = "abc-123"  # type: ignore[attr-defined]
    record.method = "GET"  # type: ignore[attr-defined]
    record.path = "/users"  # type: ignore[attr-defined]
    record.status_code = 404  # type: ignore[attr-defined]
    record.duration_ms = 3.2  # type: ignore[attr-defined]

    parsed = json.loads(_JsonFormatter().format(record))
    assert parsed["request_id"] == "abc-123"
    assert parsed["method"] == "GET"
    assert parsed["path"] == "/users"
    assert parsed["status_code"] == 404
    assert parsed["duration_ms"] == 3.2


def test_json_formatter_omits_absent_context_fields() -> None:
    parsed = json.loads(_JsonFormatter().format(_record("hello")))
    assert "request_id" not in parsed
    assert "duration_ms" not in parsed


def test_json_formatter_includes_exception_info() -> None:
    try:
        raise ValueError("test error")
    except ValueError:
        record = _record("Failed to list users", level=logging.ERROR)
        record.exc_info = sys.exc_info()
        output = _JsonFormatter().format(record)

    parsed = json.loads(output)
    assert "ValueError: test error" in parsed["exception"]


def test_container_formatter_is_plain_text() -> None:
    output = _ContainerFormatter().format(_record("server started"))
    assert "INFO" in output
    assert "app.services.users_service" in output
    assert "server started" in output
    assert not output.startswith("{")
