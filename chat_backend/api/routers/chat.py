"""Chat API endpoints.

Routes:
- PUT /sessions/{session_id}/messages - Append a message and the model's reply

Dependencies: chat_backend.application.services.conversation_service
System role: Chat messaging HTTP API
"""

import logging

from fastapi import APIRouter, Body, Depends

from chat_backend.api.deps import get_conversation_service
from chat_backend.application.services.conversation_service import ConversationService
from chat_backend.models.chat import AppendMessageRequest
from chat_backend.models.session import SessionRecord

from .session_error_handling import handle_session_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["chat"])


@router.put("/{session_id}/messages", response_model=SessionRecord)
@handle_session_errors
async def post_message(
    session_id: str,
    request: AppendMessageRequest | None = Body(default=None),
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> SessionRecord:
    """Send a message to a session and record the reply.

    Flow:
    1. ConversationService validates input and loads the session
    2. The full history plus the new message goes to the completion model
    3. The message and the reply (or the fallback text) are appended together

    Args:
        session_id: Session UUID
        request: AppendMessageRequest with content
        conversation_service: Injected ConversationService

    Returns:
        SessionRecord: Session including the two new messages

    Raises:
        HTTPException(400): Missing content
        HTTPException(404): Session not found
        HTTPException(500): Store failure
    """
    content = request.content if request else None
    return await conversation_service.post_message(session_id, content)
