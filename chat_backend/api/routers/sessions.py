"""
Session API endpoints.

Routes:
- GET /sessions - List all sessions (without message history)
- POST /sessions - Create session for a user
- GET /sessions/{id} - Get session with messages
- PUT /sessions/{id}?title= - Update session title
- DELETE /sessions/{id} - Delete session

Dependencies: chat_backend.application.services.session_service, chat_backend.models
System role: Session management HTTP API
"""

import logging

from fastapi import APIRouter, Body, Depends, Query

from chat_backend.api.deps import get_session_service
from chat_backend.application.services.session_service import SessionService
from chat_backend.models.common import MessageResponse
from chat_backend.models.session import CreateSessionRequest, SessionRecord, SessionSummary

from .session_error_handling import handle_session_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("", response_model=list[SessionSummary])
@handle_session_errors
async def list_sessions(
    session_service: SessionService = Depends(get_session_service),
) -> list[SessionSummary]:
    """
    List all sessions with id, user, title and created_at only.

    Raises:
        HTTPException(500): Retrieval failed
    """
    sessions = await session_service.list_all()
    return [SessionSummary(**session) for session in sessions]


@router.post("", response_model=SessionRecord)
@handle_session_errors
async def create_session(
    request: CreateSessionRequest | None = Body(default=None),
    session_service: SessionService = Depends(get_session_service),
) -> SessionRecord:
    """
    Create new session for the given user.

    Args:
        request: CreateSessionRequest with user, optional title and messages
        session_service: Injected SessionService

    Returns:
        SessionRecord: Created session

    Raises:
        HTTPException(400): Missing user
        HTTPException(500): Creation failed
    """
    request = request or CreateSessionRequest()
    return await session_service.create(
        user=request.user,
        title=request.title,
        messages=request.messages,
    )


@router.get("/{session_id}", response_model=SessionRecord)
@handle_session_errors
async def get_session(
    session_id: str,
    session_service: SessionService = Depends(get_session_service),
) -> SessionRecord:
    """
    Get a session with its full message history.

    Raises:
        HTTPException(404): Session not found or malformed id
        HTTPException(500): Retrieval failed
    """
    return await session_service.get_by_id(session_id)


@router.put("/{session_id}", response_model=SessionRecord)
@handle_session_errors
async def update_session_title(
    session_id: str,
    title: str | None = Query(default=None, description="New session title"),
    session_service: SessionService = Depends(get_session_service),
) -> SessionRecord:
    """
    Update the session title.

    Args:
        session_id: Session UUID
        title: New title (query parameter)
        session_service: Injected SessionService

    Returns:
        SessionRecord: Updated session

    Raises:
        HTTPException(400): Missing title
        HTTPException(404): Session not found
        HTTPException(500): Update failed
    """
    return await session_service.update_title(session_id, title)


@router.delete("/{session_id}", response_model=MessageResponse)
@handle_session_errors
async def delete_session(
    session_id: str,
    session_service: SessionService = Depends(get_session_service),
) -> MessageResponse:
    """
    Delete session by ID.

    Raises:
        HTTPException(404): Session not found
        HTTPException(500): Deletion failed
    """
    await session_service.delete_by_id(session_id)
    return MessageResponse(message="Session deleted")
