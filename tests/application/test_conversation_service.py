"""
Test suite for ConversationService.

Tests input validation, history construction, fallback replies and
persistence ordering with a mocked session store and stub gateway.

System role: Verification of the conversation orchestration layer
"""

import logging
import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from chat_backend.application.services.conversation_service import (
    FALLBACK_REPLY,
    ConversationService,
)
from chat_backend.core.exceptions import (
    InvalidIdentifierError,
    InvalidRequestError,
    SessionNotFoundError,
    StoreUnavailableError,
)
from chat_backend.models.session import SessionRecord


@pytest.fixture
def sample_session_id() -> uuid.UUID:
    """Provide sample session UUID for testing."""
    return uuid.uuid4()


@pytest.fixture
def existing_session(sample_session_id: uuid.UUID) -> SessionRecord:
    """Session with two prior messages."""
    return SessionRecord(
        id=sample_session_id,
        user="u1",
        title="2024-01-01 00:00:00",
        messages=["a", "b"],
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def mock_session_service(existing_session: SessionRecord) -> AsyncMock:
    """Session store double that appends in memory."""
    service = AsyncMock()
    service.get_by_id = AsyncMock(return_value=existing_session)

    async def append_messages(session_id, *texts):
        return existing_session.model_copy(
            update={"messages": [*existing_session.messages, *texts]}
        )

    service.append_messages = AsyncMock(side_effect=append_messages)
    return service


class TestPostMessageValidation:
    """Test suite for request validation before any store access."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, "", "   "])
    async def test_empty_content_should_fail_without_touching_store(
        self,
        content,
        mock_session_service: AsyncMock,
        working_gateway,
        sample_session_id: uuid.UUID,
    ) -> None:
        service = ConversationService(mock_session_service, working_gateway)

        with pytest.raises(InvalidRequestError):
            await service.post_message(sample_session_id, content)

        assert mock_session_service.get_by_id.await_count == 0
        assert mock_session_service.append_messages.await_count == 0
        assert working_gateway.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("session_id", [None, "", "  "])
    async def test_missing_session_id_should_fail_without_touching_store(
        self,
        session_id,
        mock_session_service: AsyncMock,
        working_gateway,
    ) -> None:
        service = ConversationService(mock_session_service, working_gateway)

        with pytest.raises(InvalidRequestError):
            await service.post_message(session_id, "hi")

        mock_session_service.get_by_id.assert_not_called()


class TestPostMessageFlow:
    """Test suite for the post_message happy path and fallbacks."""

    @pytest.mark.asyncio
    async def test_should_send_history_plus_content_and_append_reply(
        self,
        mock_session_service: AsyncMock,
        working_gateway,
        sample_session_id: uuid.UUID,
    ) -> None:
        service = ConversationService(mock_session_service, working_gateway)

        result = await service.post_message(sample_session_id, "hi")

        assert working_gateway.calls == [["a", "b", "hi"]]
        assert result.messages == ["a", "b", "hi", "stub reply"]
        mock_session_service.append_messages.assert_awaited_once_with(
            sample_session_id, "hi", "stub reply"
        )

    @pytest.mark.asyncio
    async def test_should_log_truncated_content_with_context(
        self,
        mock_session_service: AsyncMock,
        working_gateway,
        sample_session_id: uuid.UUID,
        caplog,
    ) -> None:
        caplog.set_level(
            logging.INFO, logger="chat_backend.application.services.conversation_service"
        )
        service = ConversationService(mock_session_service, working_gateway)

        await service.post_message(sample_session_id, "x" * 500)

        record = next(r for r in caplog.records if hasattr(r, "message_count"))
        assert record.session_id == str(sample_session_id)
        assert record.message_count == "4"
        assert record.content.startswith("x" * 200 + "... (truncated")

    @pytest.mark.asyncio
    async def test_gateway_failure_should_use_fallback_reply(
        self,
        mock_session_service: AsyncMock,
        failing_gateway,
        sample_session_id: uuid.UUID,
    ) -> None:
        service = ConversationService(mock_session_service, failing_gateway)

        result = await service.post_message(sample_session_id, "hi")

        assert result.messages[-2:] == ["hi", FALLBACK_REPLY]
        assert FALLBACK_REPLY == "Sorry, I don't understand."

    @pytest.mark.asyncio
    async def test_empty_gateway_result_should_use_fallback_reply(
        self,
        mock_session_service: AsyncMock,
        make_gateway,
        sample_session_id: uuid.UUID,
    ) -> None:
        service = ConversationService(mock_session_service, make_gateway(reply=None))

        result = await service.post_message(sample_session_id, "hi")

        assert result.messages[-1] == FALLBACK_REPLY

    @pytest.mark.asyncio
    async def test_history_sent_to_gateway_should_not_mutate_loaded_session(
        self,
        mock_session_service: AsyncMock,
        existing_session: SessionRecord,
        working_gateway,
        sample_session_id: uuid.UUID,
    ) -> None:
        service = ConversationService(mock_session_service, working_gateway)

        await service.post_message(sample_session_id, "hi")

        assert existing_session.messages == ["a", "b"]


class TestPostMessageErrors:
    """Test suite for store errors propagating unchanged."""

    @pytest.mark.asyncio
    async def test_not_found_should_propagate(
        self,
        mock_session_service: AsyncMock,
        working_gateway,
        sample_session_id: uuid.UUID,
    ) -> None:
        mock_session_service.get_by_id.side_effect = SessionNotFoundError(str(sample_session_id))
        service = ConversationService(mock_session_service, working_gateway)

        with pytest.raises(SessionNotFoundError):
            await service.post_message(sample_session_id, "hi")

        assert working_gateway.calls == []
        mock_session_service.append_messages.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_identifier_should_propagate_as_not_found(
        self,
        mock_session_service: AsyncMock,
        working_gateway,
    ) -> None:
        mock_session_service.get_by_id.side_effect = InvalidIdentifierError("nope")
        service = ConversationService(mock_session_service, working_gateway)

        with pytest.raises(SessionNotFoundError) as exc_info:
            await service.post_message("nope", "hi")

        assert exc_info.value.cause == "invalid_identifier"

    @pytest.mark.asyncio
    async def test_store_unavailable_on_write_should_propagate(
        self,
        mock_session_service: AsyncMock,
        working_gateway,
        sample_session_id: uuid.UUID,
    ) -> None:
        mock_session_service.append_messages.side_effect = StoreUnavailableError(
            "down", operation="append_messages"
        )
        service = ConversationService(mock_session_service, working_gateway)

        with pytest.raises(StoreUnavailableError):
            await service.post_message(sample_session_id, "hi")
