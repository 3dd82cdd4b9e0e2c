"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory async database, stub completion gateways, app settings
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from typing import Sequence

import pytest

from chat_backend.core.exceptions import GatewayError


class StubGateway:
    """Completion gateway double that records the histories it receives."""

    def __init__(self, reply: str | None = "stub reply", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[list[str]] = []

    async def complete(self, messages: Sequence[str]) -> str | None:
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from chat_backend.boundary.db.base import Base
    from chat_backend.boundary.db.models.session_model import SessionModel  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def working_gateway() -> StubGateway:
    """Gateway that answers every request with 'stub reply'."""
    return StubGateway(reply="stub reply")


@pytest.fixture
def failing_gateway() -> StubGateway:
    """Gateway whose every call fails."""
    return StubGateway(error=GatewayError("connection refused", model="gpt-3.5-turbo"))


@pytest.fixture
def sqlite_settings(tmp_path):
    """Application settings pointing at a throwaway SQLite file."""
    from chat_backend.configs import Settings
    from chat_backend.configs.completion import CompletionSettings
    from chat_backend.configs.database import DatabaseSettings

    return Settings(
        database=DatabaseSettings(
            url=f"sqlite+aiosqlite:///{tmp_path / 'sessions.db'}",
            create_tables=True,
        ),
        completion=CompletionSettings(api_key=None),
    )


@pytest.fixture
def make_gateway():
    """Factory for StubGateway instances with a custom reply or error."""
    return StubGateway
