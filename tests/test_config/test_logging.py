"""Testes para config.logging.

Cobre: configure_logging, get_logger, log_fallback,
CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("CRITICAL", logging.CRITICAL)],
    )
    def test_configure_logging_levels(self, level: str, expected: int) -> None:
        """Nível é case-insensitive."""
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_configure_logging_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "editai-checkout"


class TestGetLogger:
    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("checkout.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "checkout.module"
        assert get_logger("checkout.module") is logger


class TestLogFallback:
    """log_fallback registra passo best-effort como warning."""

    def test_log_fallback_basic(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "notification_reassert")
        logger.warning.assert_called_once()
        args, kwargs = logger.warning.call_args
        assert args == ("Fallback applied for %s", "notification_reassert")
        assert kwargs["extra"] == {"fallback_used": True, "component": "notification_reassert"}

    def test_log_fallback_with_reason_and_elapsed(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "subscription_payments", reason="ConnectError", elapsed_ms=12.5)
        extra = logger.warning.call_args[1]["extra"]
        assert extra["reason"] == "ConnectError"
        assert extra["elapsed_ms"] == 12.5


class TestCorrelationIdFilter:
    def test_filter_adds_correlation_id_from_getter(self) -> None:
        filter_ = CorrelationIdFilter("checkout", lambda: "corr-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "checkout"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        filter_ = CorrelationIdFilter("svc", None)
        record = _record(level=logging.ERROR)
        assert filter_.filter(record) is True
        assert record.correlation_id == ""


class TestCreateJsonFormatter:
    def test_required_log_fields(self) -> None:
        assert isinstance(REQUIRED_LOG_FIELDS, frozenset)
        assert {"asctime", "levelname", "name", "message", "correlation_id", "service"} == (
            REQUIRED_LOG_FIELDS
        )
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_renames_fields_and_keeps_extras(self) -> None:
        formatter = create_json_formatter()
        record = _record("subscription_created")
        record.correlation_id = "abc-123"
        record.service = "editai-checkout"
        record.subscription_id = "sub_1"

        output = json.loads(formatter.format(record))

        assert output["message"] == "subscription_created"
        assert output["level"] == "INFO"
        assert output["logger"] == "test.logger"
        assert output["correlation_id"] == "abc-123"
        assert output["service"] == "editai-checkout"
        assert output["subscription_id"] == "sub_1"
