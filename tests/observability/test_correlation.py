"""
Test suite for correlation ID handling and log helpers.

System role: Verification of request tracing utilities
"""

import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from chat_backend.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from chat_backend.observability.log_utils import safe_log_value
from chat_backend.observability.logger import CorrelationIdFilter
from chat_backend.observability.middleware import CorrelationMiddleware


class TestCorrelationContext:
    """Test suite for the correlation ContextVar helpers."""

    def test_set_should_generate_id_when_none_given(self) -> None:
        value = set_correlation_id()

        assert value
        assert get_correlation_id() == value
        clear_correlation_id()
        assert get_correlation_id() == ""

    def test_set_should_keep_given_id(self) -> None:
        assert set_correlation_id("req-1") == "req-1"
        clear_correlation_id()

    def test_filter_should_stamp_records(self) -> None:
        set_correlation_id("req-2")
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "req-2"
        clear_correlation_id()


class TestCorrelationMiddleware:
    """Test suite for CorrelationMiddleware."""

    def test_should_generate_header_and_expose_id_to_handlers(self) -> None:
        app = FastAPI()
        app.add_middleware(CorrelationMiddleware)

        @app.get("/echo")
        async def echo() -> dict:
            return {"correlation_id": get_correlation_id()}

        response = TestClient(app).get("/echo")

        header = response.headers["X-Correlation-ID"]
        assert header
        assert response.json()["correlation_id"] == header


class TestSafeLogValue:
    """Test suite for safe_log_value."""

    def test_should_truncate_long_strings(self) -> None:
        result = safe_log_value("x" * 50, max_length=10)

        assert result.startswith("x" * 10)
        assert "truncated, 50 total" in result

    def test_should_summarize_collections(self) -> None:
        assert safe_log_value(["a", "b"]) == "list(2 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"
        assert safe_log_value(None) == "None"
