"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, CreatedAtMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - SessionModel: Session entity
  - session_crud: CRUD operation singleton

Dependencies: sqlalchemy, chat_backend.configs
System role: Database adapter providing persistent storage for sessions
"""

from chat_backend.boundary.db.base import Base, CreatedAtMixin, UUIDMixin
from chat_backend.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from chat_backend.boundary.db.models.session_model import SessionModel
from chat_backend.boundary.db.CRUD import BaseCRUD, SessionCRUD, session_crud

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "SessionModel",
    # CRUD
    "BaseCRUD",
    "SessionCRUD",
    "session_crud",
]
