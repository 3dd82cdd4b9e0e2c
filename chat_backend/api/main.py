"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, chat_backend.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chat_backend.api.deps.dependencies import AppServices
from chat_backend.boundary.db.create_tables import create_all_tables
from chat_backend.configs import Settings, get_settings
from chat_backend.observability.logger import configure_logging
from chat_backend.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

from .routers import chat_router, health_router, sessions_router, users_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Optional settings, defaults to the cached environment settings

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan context manager.

        Builds the service container on startup and disposes it on shutdown.
        """
        services = AppServices.from_settings(settings)
        if settings.database.create_tables:
            await create_all_tables(services.engine)
        app.state.services = services
        logger.info(
            "Services ready",
            extra={"environment": settings.environment, "model": settings.completion.model},
        )

        yield

        await services.dispose()
        logger.info("Services disposed")

    app = FastAPI(
        title="Session Chat API",
        description="User-scoped chat sessions with LLM replies",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Last added runs first, so the correlation ID is set before request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(sessions_router, prefix=API_PREFIX)
    app.include_router(users_router, prefix=API_PREFIX)
    app.include_router(chat_router, prefix=API_PREFIX)

    return app


if __name__ == "__main__":
    uvicorn.run(
        "chat_backend.api.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
    )
