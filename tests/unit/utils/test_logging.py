"""Unit tests for the structured logging framework.

Tests cover:
- get_logger returns a structlog BoundLogger
- JSON output with ISO timestamps, level and logger name
- Sanitization of credential-bearing fields
- Context binding
- Events emitted by schema builders
"""

import json
import logging

import pytest
import structlog

from ddlkit.utils.logging import (
    REDACTED_VALUE,
    _configure_structlog,
    bind_context,
    get_logger,
    sanitization_processor,
    sanitize_for_logging,
)


def _last_event(caplog: pytest.LogCaptureFixture) -> dict:
    assert len(caplog.records) >= 1
    return json.loads(caplog.records[-1].message)


@pytest.mark.unit
def test_get_logger_returns_bound_logger() -> None:
    """Verify get_logger returns a structlog logger."""
    logger = get_logger("test_module")

    # structlog returns a BoundLoggerLazyProxy that wraps BoundLogger
    assert hasattr(logger, "bind")
    assert hasattr(logger, "info")
    assert hasattr(logger, "error")


@pytest.mark.unit
def test_json_output_structure(caplog: pytest.LogCaptureFixture) -> None:
    """JSON output contains timestamp, level, logger and event."""
    caplog.set_level(logging.INFO)

    get_logger("test_logger").info("test_event", table="users")

    log_data = _last_event(caplog)
    assert log_data["event"] == "test_event"
    assert log_data["level"] == "info"
    assert log_data["logger"] == "test_logger"
    assert log_data["table"] == "users"
    assert "T" in log_data["timestamp"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "key",
    ["password", "DB_PASSWORD", "access_token", "api_key", "client_secret",
     "url", "database_url", "DATABASE_URL", "dsn", "mysql_dsn"],
)
def test_sanitize_redacts_sensitive_keys(key: str) -> None:
    """Credential-bearing keys are redacted."""
    sanitized = sanitize_for_logging({key: "value", "table": "users"})

    assert sanitized[key] == REDACTED_VALUE
    assert sanitized["table"] == "users"


@pytest.mark.unit
@pytest.mark.parametrize("key", ["urls_checked", "dialect", "sql", "curl_target"])
def test_sanitize_keeps_other_keys(key: str) -> None:
    """Keys that merely contain url/dsn text are kept."""
    assert sanitize_for_logging({key: "value"})[key] == "value"


@pytest.mark.unit
def test_sanitize_handles_nested_dicts() -> None:
    """Nested dictionaries are sanitized."""
    data = {"engine": {"url": "mysql://u:p@db/app", "dialect": "mysql"}}
    sanitized = sanitize_for_logging(data)

    assert sanitized["engine"]["url"] == REDACTED_VALUE
    assert sanitized["engine"]["dialect"] == "mysql"


@pytest.mark.unit
def test_sanitize_returns_copy() -> None:
    data = {"password": "secret"}
    sanitize_for_logging(data)
    assert data["password"] == "secret"


@pytest.mark.unit
def test_sanitization_processor() -> None:
    """Processor form used in the structlog chain."""
    event = sanitization_processor(None, "info", {"event": "connect", "dsn": "x"})  # type: ignore[arg-type]
    assert event == {"event": "connect", "dsn": REDACTED_VALUE}


@pytest.mark.unit
def test_sanitization_in_logged_output(caplog: pytest.LogCaptureFixture) -> None:
    """Sensitive data is sanitized in actual log output."""
    caplog.set_level(logging.INFO)

    get_logger("test_logger").info("connection.opened", database_url="mysql://u:p@db/app")

    assert _last_event(caplog)["database_url"] == REDACTED_VALUE


@pytest.mark.unit
def test_context_binding_persists(caplog: pytest.LogCaptureFixture) -> None:
    """Bound context persists across log statements."""
    caplog.set_level(logging.INFO)

    logger = bind_context(dialect="postgresql", datasource="default")
    logger.info("first_event", table="users")
    logger.info("second_event", table="posts")

    assert len(caplog.records) >= 2
    for record in caplog.records[-2:]:
        log_data = json.loads(record.message)
        assert log_data.get("dialect") == "postgresql"
        assert log_data.get("datasource") == "default"


@pytest.mark.unit
def test_bind_context_returns_bound_logger() -> None:
    logger = bind_context(dialect="mysql")
    assert isinstance(logger, structlog.stdlib.BoundLogger)


@pytest.mark.unit
def test_unsupported_operation_logs_warning(
    caplog: pytest.LogCaptureFixture, sqlite_schema
) -> None:
    """Unsupported dialect operations log a warning before raising."""
    caplog.set_level(logging.WARNING)

    with pytest.raises(NotImplementedError):
        sqlite_schema.rename_index("users", "a", "b")

    log_data = _last_event(caplog)
    assert log_data["event"] == "schema.operation.unsupported"
    assert log_data["level"] == "warning"
    assert log_data["dialect"] == "sqlite"
    assert log_data["operation"] == "rename_index"


@pytest.mark.unit
def test_create_table_logs_debug_event(
    caplog: pytest.LogCaptureFixture, postgres_schema
) -> None:
    """create_table emits a debug event with the table and key columns."""
    caplog.set_level(logging.DEBUG)

    postgres_schema.create_table("users", {"id": "primaryKey", "name": "string"})

    events = [json.loads(record.message) for record in caplog.records]
    built = [event for event in events if event.get("event") == "schema.create_table.built"]
    assert built[-1]["table"] == "users"
    assert built[-1]["primary_keys"] == ["id"]
    assert built[-1]["column_count"] == 2


@pytest.mark.unit
def test_configuration_event_rendered_as_json(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    """configuration.loaded is emitted after structlog is configured."""
    monkeypatch.setattr(logging.root, "handlers", list(logging.root.handlers))
    caplog.set_level(logging.DEBUG)

    _configure_structlog()

    log_data = _last_event(caplog)
    assert log_data["event"] == "configuration.loaded"
    assert log_data["level"] == "debug"
    assert log_data["logger"] == "ddlkit.utils.logging"
    assert "log_level" in log_data
