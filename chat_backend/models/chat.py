"""
Chat domain models and schemas.

Request schema for appending a message to a session.

Dependencies: pydantic
System role: Chat API contracts
"""

from pydantic import BaseModel, Field


class AppendMessageRequest(BaseModel):
    """Request schema for chat messages."""

    # Optional so a missing value reaches the service and is reported as 400.
    content: str | None = Field(default=None, description="User message")
