"""Completion gateway for the external chat model."""

from chat_backend.core.completion.completion_gateway import CompletionGateway

__all__ = ["CompletionGateway"]
