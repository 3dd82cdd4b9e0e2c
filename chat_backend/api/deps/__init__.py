"""API-specific dependencies."""

from .dependencies import (
    AppServices,
    get_completion_gateway,
    get_conversation_service,
    get_session_service,
)

__all__ = [
    "AppServices",
    "get_completion_gateway",
    "get_conversation_service",
    "get_session_service",
]
