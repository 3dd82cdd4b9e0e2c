"""
Completion API configuration settings.

Settings for the external chat-completion model used to answer
session messages.

Dependencies: pydantic_settings
System role: LLM provider configuration for the completion gateway
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class CompletionSettings(BaseSettings):
    """Chat-completion provider configuration."""

    provider: str = Field(
        default="openai",
        description="LangChain model provider passed to init_chat_model",
    )
    model: str = Field(default="gpt-3.5-turbo", description="Chat model identifier")
    max_tokens: int = Field(default=80, description="Response length cap in tokens")
    timeout_seconds: float = Field(
        default=10.0,
        description="Request timeout after which the fallback reply is used",
    )
    api_key: str | None = Field(default=None, description="Provider API key")
    base_url: str | None = Field(
        default=None,
        description="Optional OpenAI-compatible endpoint (local proxies)",
    )
    system_prompt: str | None = Field(
        default=None,
        description="Optional system message prepended to every request",
    )

    class Config:
        """Pydantic config for environment variable loading."""

        env_prefix = "COMPLETION_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
