"""Supporting adapters."""

from .message_adapter import stringify_content, to_chat_messages

__all__ = ["stringify_content", "to_chat_messages"]
