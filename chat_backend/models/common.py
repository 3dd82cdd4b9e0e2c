"""
Common response models.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain acknowledgement response."""

    message: str = Field(description="Human-readable status message")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
