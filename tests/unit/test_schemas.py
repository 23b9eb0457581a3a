"""Unit tests for transcript and wire models."""

import pytest
from pydantic import ValidationError

from news_chat.models.schemas import (
    ChatReply,
    ChatRequest,
    SessionCreated,
    Source,
    Turn,
    TurnRole,
)


class TestTurn:
    """Tests for the Turn model."""

    def test_defaults(self) -> None:
        turn = Turn(role=TurnRole.USER, content="hi", timestamp=1)

        assert turn.sources is None
        assert turn.error is False

    def test_role_accepts_plain_string(self) -> None:
        turn = Turn(role="assistant", content="hello", timestamp=1)

        assert turn.role == TurnRole.ASSISTANT

    def test_rejects_unknown_role(self) -> None:
        with pytest.raises(ValidationError):
            Turn(role="system", content="x", timestamp=1)

    def test_is_immutable(self) -> None:
        turn = Turn(role=TurnRole.USER, content="hi", timestamp=1)

        with pytest.raises(ValidationError):
            turn.content = "changed"


class TestWireModels:
    """Tests for request and response payloads."""

    def test_session_created_reads_camel_case(self) -> None:
        created = SessionCreated.model_validate({"sessionId": "abc123"})

        assert created.session_id == "abc123"

    def test_session_created_rejects_empty_id(self) -> None:
        with pytest.raises(ValidationError):
            SessionCreated.model_validate({"sessionId": ""})

    def test_chat_request_serializes_camel_case(self) -> None:
        request = ChatRequest(message="  latest on elections ", session_id="abc123")

        assert request.model_dump(by_alias=True) == {
            "message": "latest on elections",
            "sessionId": "abc123",
        }

    def test_chat_request_rejects_blank_message(self) -> None:
        with pytest.raises(ValidationError):
            ChatRequest(message="   ", session_id="abc123")

    def test_chat_reply_with_sources(self) -> None:
        reply = ChatReply.model_validate(
            {
                "response": "Here's what's happening...",
                "sources": [{"title": "Reuters", "link": "https://reuters.com/a"}],
                "timestamp": 1_700_000_000_000,
            }
        )

        assert reply.sources == [Source(title="Reuters", link="https://reuters.com/a")]
        assert reply.timestamp == 1_700_000_000_000

    def test_chat_reply_sources_optional(self) -> None:
        reply = ChatReply.model_validate({"response": "ok", "timestamp": 1})

        assert reply.sources is None

    def test_chat_reply_requires_timestamp(self) -> None:
        with pytest.raises(ValidationError):
            ChatReply.model_validate({"response": "ok"})
