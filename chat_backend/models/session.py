"""
Session domain models and schemas.

Request/response schemas for session operations.

Dependencies: pydantic
System role: Session API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateSessionRequest(BaseModel):
    """Request schema for creating a session for any user."""

    user: str | None = Field(default=None, description="Owning user identifier")
    title: str | None = Field(default=None, description="Title, defaults to creation time")
    messages: list[str] = Field(default_factory=list, description="Initial message history")


class CreateUserSessionRequest(BaseModel):
    """Request schema for creating a session under /users/{user_id}."""

    title: str | None = Field(default=None, description="Title, defaults to creation time")


class SessionRecord(BaseModel):
    """Full session including its message history."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user: str
    title: str
    messages: list[str]
    created_at: datetime


class SessionSummary(BaseModel):
    """Listing projection without the message history."""

    id: uuid.UUID | None = None
    user: str | None = None
    title: str | None = None
    created_at: datetime | None = None
