"""
Conversation service.

Appends a user message to a session and records a reply from the
completion gateway. A failed or empty completion degrades to a fixed
fallback reply; it never fails the request.

Dependencies: chat_backend.application.services.session_service, chat_backend.core.completion
System role: Chat service orchestration layer
"""

import logging
from uuid import UUID

from chat_backend.application.services.session_service import SessionService
from chat_backend.core.completion.completion_gateway import CompletionGateway
from chat_backend.core.exceptions import GatewayError, InvalidRequestError
from chat_backend.models.session import SessionRecord
from chat_backend.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "Sorry, I don't understand."


class ConversationService:
    """
    Chat service for session conversations.

    Holds the session store and completion gateway it was constructed with;
    the session read for one call lives only for that call.
    """

    def __init__(
        self,
        session_service: SessionService,
        completion_gateway: CompletionGateway,
    ) -> None:
        """
        Initialize conversation service.

        Args:
            session_service: Session store interface
            completion_gateway: Adapter to the external chat model
        """
        self.session_service = session_service
        self.completion_gateway = completion_gateway

    async def post_message(
        self,
        session_id: UUID | str | None,
        content: str | None,
    ) -> SessionRecord:
        """
        Add a user message to a session and append the reply.

        Flow:
        1. Reject missing session id or empty content before touching the store
        2. Load the session
        3. Send the stored history plus the new message to the gateway
        4. Fall back to FALLBACK_REPLY when the gateway fails or returns nothing
        5. Persist [content, reply] in one update

        Args:
            session_id: Session UUID or its string form
            content: User message

        Returns:
            SessionRecord: Updated session

        Raises:
            InvalidRequestError: If session_id or content is missing
            SessionNotFoundError: If session not found (or id malformed)
            StoreUnavailableError: If the store cannot be reached
        """
        if session_id is None or not str(session_id).strip():
            raise InvalidRequestError("Content and sessionId is required", field="session_id")
        if not content or not content.strip():
            raise InvalidRequestError("Content and sessionId is required", field="content")

        session = await self.session_service.get_by_id(session_id)

        history = [*session.messages, content]
        reply = await self._request_reply(history, session.id)

        updated = await self.session_service.append_messages(session.id, content, reply)
        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:post_message - session_id={session.id} messages={len(updated.messages)}",
            session_id=session.id,
            message_count=len(updated.messages),
            content=content,
        )
        return updated

    async def _request_reply(self, history: list[str], session_id: UUID) -> str:
        """Ask the gateway for a reply, using the fallback on any failure."""
        try:
            reply = await self.completion_gateway.complete(history)
        except GatewayError as e:
            logger.warning(
                f"{__name__}:post_message - completion failed, using fallback "
                f"session_id={session_id}: {e}"
            )
            return FALLBACK_REPLY

        if reply is None:
            logger.warning(
                f"{__name__}:post_message - empty completion, using fallback "
                f"session_id={session_id}"
            )
            return FALLBACK_REPLY
        return reply
