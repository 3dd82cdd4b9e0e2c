"""
Dependency injection container.

Factory functions for FastAPI dependencies. Long-lived collaborators
(engine, session factory, completion gateway) live in an AppServices
container that the application lifespan builds and stores on
``app.state.services``.

Dependencies: chat_backend.configs, chat_backend.application, chat_backend.boundary
System role: DI container for service injection
"""

from dataclasses import dataclass

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from chat_backend.application.services import ConversationService, SessionService
from chat_backend.boundary.db import get_async_db, get_async_engine, get_async_session_factory
from chat_backend.configs import Settings
from chat_backend.core.completion import CompletionGateway


@dataclass
class AppServices:
    """Container for process-wide service instances."""

    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    completion_gateway: CompletionGateway

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppServices":
        """
        Build engine, session factory and completion gateway from settings.

        Args:
            settings: Application settings

        Returns:
            AppServices: Container owned by the caller (dispose on shutdown)
        """
        engine = get_async_engine(settings.database)
        return cls(
            engine=engine,
            session_factory=get_async_session_factory(engine),
            completion_gateway=CompletionGateway.from_settings(settings.completion),
        )

    async def dispose(self) -> None:
        """Release pooled database connections."""
        await self.engine.dispose()


def get_session_service(db: AsyncSession = Depends(get_async_db)) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SessionService: Session service instance
    """
    return SessionService(db=db)


def get_completion_gateway(request: Request) -> CompletionGateway:
    """
    Get the completion gateway built at startup.

    Returns:
        CompletionGateway: Shared gateway instance
    """
    return request.app.state.services.completion_gateway


def get_conversation_service(
    session_service: SessionService = Depends(get_session_service),
    completion_gateway: CompletionGateway = Depends(get_completion_gateway),
) -> ConversationService:
    """
    Get conversation service instance.

    Args:
        session_service: Session store for this request (injected)
        completion_gateway: Shared completion gateway (injected)

    Returns:
        ConversationService: Conversation service instance
    """
    return ConversationService(
        session_service=session_service,
        completion_gateway=completion_gateway,
    )
