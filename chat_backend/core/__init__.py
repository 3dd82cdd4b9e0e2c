"""
Core business logic module.

Contains the exception hierarchy and the completion gateway.
"""

from chat_backend.core.exceptions import (
    ChatBackendError,
    GatewayError,
    InvalidIdentifierError,
    InvalidRequestError,
    SessionNotFoundError,
    StoreUnavailableError,
)

__all__ = [
    "ChatBackendError",
    "GatewayError",
    "InvalidIdentifierError",
    "InvalidRequestError",
    "SessionNotFoundError",
    "StoreUnavailableError",
]
