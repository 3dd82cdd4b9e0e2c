"""
Completion gateway.

Sends an ordered list of plain message strings to an external
chat-completion model and returns the text of its first choice.
The model is built with LangChain's init_chat_model, so the provider
(OpenAI by default) is a configuration value.

Dependencies: langchain, langchain_core, chat_backend.application.adapters
System role: External LLM adapter for session replies
"""

import logging
from typing import Any, Sequence

from langchain.chat_models import init_chat_model
from langchain_core.language_models import BaseChatModel

from chat_backend.application.adapters.message_adapter import (
    stringify_content,
    to_chat_messages,
)
from chat_backend.configs.completion import CompletionSettings
from chat_backend.core.exceptions import GatewayError

logger = logging.getLogger(__name__)


class CompletionGateway:
    """
    Adapter to the external chat-completion API.

    The chat model is created on first use; a missing API key therefore
    surfaces as a GatewayError on the first call rather than at startup.
    """

    def __init__(
        self,
        model_id: str = "gpt-3.5-turbo",
        provider: str = "openai",
        max_tokens: int = 80,
        timeout_seconds: float = 10.0,
        api_key: str | None = None,
        base_url: str | None = None,
        system_prompt: str | None = None,
        chat_model: BaseChatModel | None = None,
    ) -> None:
        """
        Initialize completion gateway.

        Args:
            model_id: Chat model identifier
            provider: LangChain model provider name
            max_tokens: Response length cap
            timeout_seconds: Request timeout
            api_key: Provider API key (falls back to the provider's env var)
            base_url: Optional OpenAI-compatible endpoint
            system_prompt: Optional system message prepended to every request
            chat_model: Pre-built chat model, used instead of init_chat_model
        """
        self.model_id = model_id
        self.provider = provider
        self.max_tokens = max_tokens
        self.timeout_seconds = timeout_seconds
        self.system_prompt = system_prompt
        self._api_key = api_key
        self._base_url = base_url
        self._chat_model = chat_model

    @classmethod
    def from_settings(cls, settings: CompletionSettings) -> "CompletionGateway":
        """Build a gateway from completion settings."""
        return cls(
            model_id=settings.model,
            provider=settings.provider,
            max_tokens=settings.max_tokens,
            timeout_seconds=settings.timeout_seconds,
            api_key=settings.api_key,
            base_url=settings.base_url,
            system_prompt=settings.system_prompt,
        )

    @property
    def chat_model(self) -> BaseChatModel:
        """
        Get the chat model, creating it on first access.

        Raises:
            GatewayError: If the provider client cannot be constructed
        """
        if self._chat_model is None:
            kwargs: dict[str, Any] = {
                "model_provider": self.provider,
                "max_tokens": self.max_tokens,
                "timeout": self.timeout_seconds,
                "max_retries": 0,
            }
            if self._api_key:
                kwargs["api_key"] = self._api_key
            if self._base_url:
                kwargs["base_url"] = self._base_url
            try:
                self._chat_model = init_chat_model(self.model_id, **kwargs)
            except Exception as e:
                raise GatewayError(
                    f"Could not initialize chat model: {e}",
                    model=self.model_id,
                ) from e
        return self._chat_model

    async def complete(self, messages: Sequence[str]) -> str | None:
        """
        Request a reply for the given conversation.

        Args:
            messages: Ordered message history, newest last

        Returns:
            str | None: First choice text, or None when there is nothing
            to send or the model returned an empty reply

        Raises:
            GatewayError: On transport, auth or timeout failure
        """
        if not messages:
            return None

        chat_messages = to_chat_messages(messages, system_prompt=self.system_prompt)
        model = self.chat_model

        try:
            response = await model.ainvoke(chat_messages)
        except Exception as e:
            raise GatewayError(
                f"Completion request failed: {type(e).__name__}: {e}",
                model=self.model_id,
            ) from e

        reply = stringify_content(response).strip()
        logger.debug(
            "Completion received",
            extra={"model": self.model_id, "turns": len(chat_messages), "reply_len": len(reply)},
        )
        return reply or None
