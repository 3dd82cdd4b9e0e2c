"""
Test suite for configuration settings.

System role: Verification of environment-driven configuration
"""

from chat_backend.configs import Settings
from chat_backend.configs.completion import CompletionSettings
from chat_backend.configs.database import DatabaseSettings


class TestDatabaseSettings:
    """Test suite for DatabaseSettings URL construction."""

    def test_should_build_asyncpg_url_from_parts(self) -> None:
        settings = DatabaseSettings(
            host="db", port=5433, user="app", password="pw", db="chat", sslmode="disable", url=None
        )

        assert settings.async_database_url == "postgresql+asyncpg://app:pw@db:5433/chat"
        assert settings.is_sqlite is False

    def test_should_add_ssl_param_when_required(self) -> None:
        settings = DatabaseSettings(sslmode="require", url=None)

        assert settings.async_database_url.endswith("?ssl=require")

    def test_url_override_should_win(self) -> None:
        settings = DatabaseSettings(url="sqlite+aiosqlite:///./chat.db")

        assert settings.async_database_url == "sqlite+aiosqlite:///./chat.db"
        assert settings.is_sqlite is True

    def test_should_read_prefixed_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("POSTGRES_HOST", "example.internal")
        monkeypatch.delenv("POSTGRES_URL", raising=False)

        assert DatabaseSettings().host == "example.internal"


class TestCompletionSettings:
    """Test suite for CompletionSettings defaults and env mapping."""

    def test_defaults_should_match_observed_configuration(self, monkeypatch) -> None:
        for name in ("COMPLETION_MODEL", "COMPLETION_MAX_TOKENS", "COMPLETION_PROVIDER"):
            monkeypatch.delenv(name, raising=False)

        settings = CompletionSettings()

        assert settings.provider == "openai"
        assert settings.model == "gpt-3.5-turbo"
        assert settings.max_tokens == 80
        assert 5 <= settings.timeout_seconds <= 10

    def test_should_read_prefixed_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("COMPLETION_MODEL", "gpt-4o-mini")

        assert CompletionSettings().model == "gpt-4o-mini"


class TestSettings:
    """Test suite for the aggregated Settings."""

    def test_should_aggregate_sub_settings(self) -> None:
        settings = Settings()

        assert isinstance(settings.database, DatabaseSettings)
        assert isinstance(settings.completion, CompletionSettings)
