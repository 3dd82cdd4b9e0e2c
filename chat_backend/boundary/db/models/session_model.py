"""
Session ORM model.

Represents a user-owned conversation with its ordered message history.

Dependencies: sqlalchemy, chat_backend.boundary.db.base
System role: Session persistence for chat conversations
"""

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from chat_backend.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class SessionModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Session ORM model.

    Messages are stored as a JSON array of strings. The array is only ever
    replaced by a longer copy of itself, so insertion order is preserved
    and entries are never removed individually.

    Attributes:
        id: UUID primary key (auto-generated)
        user: Owning user identifier (not validated, never reassigned)
        title: Human-readable title, mutable
        messages: Ordered message history
        created_at: Session creation timestamp (UTC)
    """

    __tablename__ = "sessions"

    user: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        doc="Owning user identifier",
    )
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Session title, defaults to the creation timestamp",
    )
    messages: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        doc="Ordered message history (user messages and replies)",
    )
