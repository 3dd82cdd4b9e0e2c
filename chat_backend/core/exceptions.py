"""
Exception hierarchy for the session chat backend.

Provides a tagged exception structure for the four failure kinds the
service distinguishes: invalid requests, unknown sessions, completion
gateway failures and an unreachable store.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ChatBackendError(Exception):
    """Base exception for all session chat backend errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidRequestError(ChatBackendError):
    """Raised when a required input is missing or empty."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid request error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)


class SessionNotFoundError(ChatBackendError):
    """Raised when a session id does not resolve to a stored session."""

    cause = "missing"

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize session not found error.

        Args:
            session_id: ID of the missing session
            details: Additional context
        """
        details = details or {}
        details["session_id"] = session_id
        details["cause"] = self.cause
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}", details)


class InvalidIdentifierError(SessionNotFoundError):
    """
    Raised when a session id is not a well-formed identifier.

    Subclasses SessionNotFoundError so callers answer it exactly like an
    unknown id, while ``cause`` keeps the two apart in logs.
    """

    cause = "invalid_identifier"


class GatewayError(ChatBackendError):
    """Raised when the external completion call fails."""

    def __init__(
        self,
        message: str,
        model: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize gateway error.

        Args:
            message: Error message
            model: Model identifier that was called
            details: Additional context
        """
        details = details or {}
        if model:
            details["model"] = model
        super().__init__(message, details)


class StoreUnavailableError(ChatBackendError):
    """Raised when the session store cannot be reached."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store unavailable error.

        Args:
            message: Error message
            operation: Store operation that failed (create, get, update, delete)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
