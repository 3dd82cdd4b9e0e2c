"""
User-scoped session endpoints.

Routes:
- GET /users/{user_id}/sessions - List a user's sessions (empty list for unknown users)
- POST /users/{user_id}/sessions - Create an empty session for a user

Dependencies: chat_backend.application.services.session_service, chat_backend.models
System role: Per-user session HTTP API
"""

from fastapi import APIRouter, Body, Depends

from chat_backend.api.deps import get_session_service
from chat_backend.application.services.session_service import SessionService
from chat_backend.models.session import CreateUserSessionRequest, SessionRecord, SessionSummary

from .session_error_handling import handle_session_errors

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}/sessions", response_model=list[SessionSummary])
@handle_session_errors
async def list_user_sessions(
    user_id: str,
    session_service: SessionService = Depends(get_session_service),
) -> list[SessionSummary]:
    """List the sessions owned by user_id."""
    sessions = await session_service.list_by_user(user_id)
    return [SessionSummary(**session) for session in sessions]


@router.post("/{user_id}/sessions", response_model=SessionRecord)
@handle_session_errors
async def create_user_session(
    user_id: str,
    request: CreateUserSessionRequest | None = Body(default=None),
    session_service: SessionService = Depends(get_session_service),
) -> SessionRecord:
    """
    Create a session with no messages for user_id.

    The title defaults to the creation timestamp unless the body sets one.
    """
    title = request.title if request else None
    return await session_service.create(user=user_id, title=title)
