"""
Test suite for the exception hierarchy.

System role: Verification of error tagging used for HTTP mapping and logs
"""

from chat_backend.core.exceptions import (
    ChatBackendError,
    GatewayError,
    InvalidIdentifierError,
    InvalidRequestError,
    SessionNotFoundError,
    StoreUnavailableError,
)


class TestSessionNotFoundError:
    """Test suite for not-found errors and their causes."""

    def test_not_found_should_record_missing_cause(self) -> None:
        err = SessionNotFoundError("abc")

        assert err.session_id == "abc"
        assert err.cause == "missing"
        assert err.details == {"session_id": "abc", "cause": "missing"}

    def test_invalid_identifier_should_be_a_not_found_error(self) -> None:
        err = InvalidIdentifierError("not-a-uuid")

        assert isinstance(err, SessionNotFoundError)
        assert err.cause == "invalid_identifier"
        assert err.details["cause"] == "invalid_identifier"


class TestErrorDetails:
    """Test suite for error context and string rendering."""

    def test_invalid_request_should_carry_field(self) -> None:
        err = InvalidRequestError("Content and sessionId is required", field="content")

        assert err.field == "content"
        assert "content" in str(err)

    def test_gateway_error_should_carry_model(self) -> None:
        err = GatewayError("timeout", model="gpt-3.5-turbo")

        assert err.details == {"model": "gpt-3.5-turbo"}

    def test_store_unavailable_should_carry_operation(self) -> None:
        err = StoreUnavailableError("down", operation="create")

        assert err.details["operation"] == "create"

    def test_str_without_details_should_be_message(self) -> None:
        assert str(ChatBackendError("plain")) == "plain"

    def test_all_errors_should_share_base(self) -> None:
        for err in (
            InvalidRequestError("x"),
            SessionNotFoundError("x"),
            GatewayError("x"),
            StoreUnavailableError("x"),
        ):
            assert isinstance(err, ChatBackendError)
