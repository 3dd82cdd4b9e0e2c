"""
Session CRUD operations.

Provides Create, Read, Update, Delete operations for SessionModel
with session-specific query methods (projections, user filter,
message appends).

Dependencies: sqlalchemy, chat_backend.boundary.db.models
System role: Session persistence operations
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chat_backend.boundary.db.CRUD.base_crud import BaseCRUD
from chat_backend.boundary.db.models.session_model import SessionModel

SESSION_FIELDS = ("id", "user", "title", "messages", "created_at")


class SessionCRUD(BaseCRUD[SessionModel]):
    """
    CRUD operations for SessionModel.

    Extends BaseCRUD with projected listings and append-only
    message updates.
    """

    def __init__(self) -> None:
        """Initialize SessionCRUD with SessionModel."""
        super().__init__(SessionModel)

    async def get_projection(
        self,
        session: AsyncSession,
        fields: Sequence[str],
        user: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        Retrieve sessions restricted to the named columns.

        Args:
            session: Async database session
            fields: Column names to select (subset of SESSION_FIELDS)
            user: Optional owning user filter

        Returns:
            list[dict]: One dict per session, keyed by field name,
            in creation order

        Raises:
            ValueError: If a field name is not a session column
        """
        unknown = [field for field in fields if field not in SESSION_FIELDS]
        if unknown:
            raise ValueError(f"Unknown session fields: {', '.join(unknown)}")

        columns = [getattr(SessionModel, field) for field in fields]
        stmt = select(*columns).order_by(SessionModel.created_at)
        if user is not None:
            stmt = stmt.where(SessionModel.user == user)
        result = await session.execute(stmt)
        return [dict(row) for row in result.mappings().all()]

    async def update_title(
        self,
        session: AsyncSession,
        id: UUID,
        title: str,
    ) -> SessionModel | None:
        """
        Replace the session title.

        Args:
            session: Async database session
            id: Session UUID
            title: New title

        Returns:
            Updated SessionModel if found, None otherwise
        """
        return await self.update_by_id(session, id, title=title)

    async def append_messages(
        self,
        session: AsyncSession,
        id: UUID,
        texts: Sequence[str],
    ) -> SessionModel | None:
        """
        Append messages to the end of the session history.

        The JSON column is reassigned with a new list; in-place mutation
        of the loaded list would not be detected by the ORM.

        Args:
            session: Async database session
            id: Session UUID
            texts: Messages to append, in order

        Returns:
            Updated SessionModel if found, None otherwise
        """
        instance = await self.get_by_id(session, id)
        if instance is None:
            return None
        instance.messages = [*(instance.messages or []), *texts]
        await session.flush()
        await session.refresh(instance)
        return instance


session_crud = SessionCRUD()
