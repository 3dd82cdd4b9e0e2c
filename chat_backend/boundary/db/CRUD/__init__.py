"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from chat_backend.boundary.db.CRUD import session_crud

    session = await session_crud.get_by_id(db, session_id)
"""

from chat_backend.boundary.db.CRUD.base_crud import BaseCRUD
from chat_backend.boundary.db.CRUD.session_crud import SESSION_FIELDS, SessionCRUD, session_crud

__all__ = [
    "BaseCRUD",
    "SESSION_FIELDS",
    "SessionCRUD",
    "session_crud",
]
