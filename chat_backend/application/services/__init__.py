"""Service orchestrators."""

from .conversation_service import FALLBACK_REPLY, ConversationService
from .session_service import DEFAULT_PROJECTION, SessionService

__all__ = [
    "ConversationService",
    "DEFAULT_PROJECTION",
    "FALLBACK_REPLY",
    "SessionService",
]
