"""
Session service orchestrator.

The session store interface: durable CRUD over session records with
domain errors instead of None results. Every mutation commits before
returning.

Dependencies: chat_backend.boundary.db.CRUD, sqlalchemy
System role: Session use case orchestration
"""

import functools
import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Sequence, TypeVar
from uuid import UUID

from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from chat_backend.boundary.db.base import utc_now
from chat_backend.boundary.db.CRUD.session_crud import session_crud
from chat_backend.core.exceptions import (
    InvalidIdentifierError,
    InvalidRequestError,
    SessionNotFoundError,
    StoreUnavailableError,
)
from chat_backend.models.session import SessionRecord

logger = logging.getLogger(__name__)

DEFAULT_PROJECTION = ("id", "user", "title", "created_at")
TITLE_FORMAT = "%Y-%m-%d %H:%M:%S"

T = TypeVar("T")


def store_operation(operation: str) -> Callable:
    """
    Decorator translating connectivity failures into StoreUnavailableError.

    Args:
        operation: Operation name recorded on the error
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return await func(*args, **kwargs)
            except (DBAPIError, OSError) as e:
                service = args[0]
                try:
                    await service.db.rollback()
                except (DBAPIError, OSError) as rollback_error:
                    logger.warning(
                        f"{__name__}:{operation} - rollback failed: "
                        f"{type(rollback_error).__name__}: {rollback_error}"
                    )
                logger.error(
                    f"{__name__}:{operation} - store unavailable: {type(e).__name__}: {e}"
                )
                raise StoreUnavailableError(
                    "Session store is unavailable",
                    operation=operation,
                ) from e

        return wrapper

    return decorator


def parse_session_id(session_id: UUID | str) -> UUID:
    """
    Parse a session identifier.

    Args:
        session_id: UUID or its string form

    Returns:
        UUID: Parsed identifier

    Raises:
        InvalidIdentifierError: If the value is not a UUID
    """
    if isinstance(session_id, UUID):
        return session_id
    try:
        return UUID(str(session_id))
    except ValueError as e:
        raise InvalidIdentifierError(str(session_id)) from e


def default_title(created_at: datetime) -> str:
    """Render the title given to sessions created without one."""
    if created_at.tzinfo is not None:
        created_at = created_at.astimezone(timezone.utc)
    return created_at.strftime(TITLE_FORMAT)


class SessionService:
    """Session store interface over the sessions table."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize session service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    @store_operation("list_all")
    async def list_all(
        self,
        projection: Sequence[str] = DEFAULT_PROJECTION,
    ) -> list[dict[str, Any]]:
        """
        List every session restricted to the projected fields.

        Args:
            projection: Field names to return

        Returns:
            list[dict]: Projected sessions in creation order

        Raises:
            InvalidRequestError: If the projection names an unknown field
        """
        try:
            return await session_crud.get_projection(self.db, projection)
        except ValueError as e:
            raise InvalidRequestError(str(e), field="projection") from e

    @store_operation("list_by_user")
    async def list_by_user(
        self,
        user_id: str,
        projection: Sequence[str] = DEFAULT_PROJECTION,
    ) -> list[dict[str, Any]]:
        """
        List sessions owned by one user.

        An unknown user yields an empty list, never an error.

        Args:
            user_id: Owning user identifier
            projection: Field names to return

        Returns:
            list[dict]: Projected sessions in creation order

        Raises:
            InvalidRequestError: If user_id is empty or the projection is invalid
        """
        if not user_id:
            raise InvalidRequestError("User ID is required", field="user_id")
        try:
            return await session_crud.get_projection(self.db, projection, user=user_id)
        except ValueError as e:
            raise InvalidRequestError(str(e), field="projection") from e

    @store_operation("get")
    async def get_by_id(self, session_id: UUID | str) -> SessionRecord:
        """
        Get session by ID.

        Args:
            session_id: Session UUID or its string form

        Returns:
            SessionRecord: Full session

        Raises:
            InvalidIdentifierError: If session_id is malformed
            SessionNotFoundError: If session not found
        """
        parsed_id = parse_session_id(session_id)
        session = await session_crud.get_by_id(self.db, parsed_id)
        if session is None:
            raise SessionNotFoundError(str(parsed_id))
        return SessionRecord.model_validate(session)

    @store_operation("create")
    async def create(
        self,
        user: str | None,
        title: str | None = None,
        messages: Sequence[str] | None = None,
        created_at: datetime | None = None,
    ) -> SessionRecord:
        """
        Create new session.

        Args:
            user: Owning user identifier
            title: Optional title, defaults to the creation timestamp
            messages: Optional initial history, defaults to empty
            created_at: Optional creation time, defaults to now (UTC)

        Returns:
            SessionRecord: Created session with generated ID

        Raises:
            InvalidRequestError: If user is empty
        """
        if not user:
            raise InvalidRequestError("User is required", field="user")

        created_at = created_at or utc_now()
        session = await session_crud.create(
            self.db,
            user=user,
            title=title or default_title(created_at),
            messages=list(messages or []),
            created_at=created_at,
        )
        await self.db.commit()
        logger.info(f"{__name__}:create - session_id={session.id} user={user}")
        return SessionRecord.model_validate(session)

    @store_operation("update_title")
    async def update_title(self, session_id: UUID | str, new_title: str) -> SessionRecord:
        """
        Replace the session title, leaving every other field untouched.

        Args:
            session_id: Session UUID or its string form
            new_title: Title to set

        Returns:
            SessionRecord: Updated session

        Raises:
            InvalidRequestError: If new_title is empty
            InvalidIdentifierError: If session_id is malformed
            SessionNotFoundError: If session not found
        """
        if not new_title:
            raise InvalidRequestError("Session ID and title is required", field="title")

        parsed_id = parse_session_id(session_id)
        session = await session_crud.update_title(self.db, parsed_id, new_title)
        if session is None:
            raise SessionNotFoundError(str(parsed_id))
        await self.db.commit()
        return SessionRecord.model_validate(session)

    async def append_message(self, session_id: UUID | str, text: str) -> SessionRecord:
        """
        Append one message to the session history.

        Args:
            session_id: Session UUID or its string form
            text: Message to append

        Returns:
            SessionRecord: Updated session

        Raises:
            InvalidIdentifierError: If session_id is malformed
            SessionNotFoundError: If session not found
        """
        return await self.append_messages(session_id, text)

    @store_operation("append_messages")
    async def append_messages(self, session_id: UUID | str, *texts: str) -> SessionRecord:
        """
        Append several messages in one durable update.

        Args:
            session_id: Session UUID or its string form
            *texts: Messages to append, in order

        Returns:
            SessionRecord: Updated session

        Raises:
            InvalidIdentifierError: If session_id is malformed
            SessionNotFoundError: If session not found
        """
        parsed_id = parse_session_id(session_id)
        session = await session_crud.append_messages(self.db, parsed_id, texts)
        if session is None:
            raise SessionNotFoundError(str(parsed_id))
        await self.db.commit()
        return SessionRecord.model_validate(session)

    @store_operation("delete")
    async def delete_by_id(self, session_id: UUID | str) -> None:
        """
        Delete session by ID.

        Args:
            session_id: Session UUID or its string form

        Raises:
            InvalidIdentifierError: If session_id is malformed
            SessionNotFoundError: If session not found
        """
        parsed_id = parse_session_id(session_id)
        deleted = await session_crud.delete_by_id(self.db, parsed_id)
        if not deleted:
            raise SessionNotFoundError(str(parsed_id))
        await self.db.commit()
        logger.info(f"{__name__}:delete - session_id={parsed_id}")
