"""Pydantic models for the transcript and the news service wire format.

Provides type safety and validation for everything crossing the HTTP boundary,
and immutable turn objects for the transcript.

Models:
    - Turn: One user or assistant message in the transcript
    - Source: Article reference attached to assistant turns
    - SessionCreated: Create-session response body
    - ChatRequest: Outgoing chat payload
    - ChatReply: Chat response with sources and server timestamp
    - ErrorBody: Optional error payload on failed responses
    - ControllerSnapshot: Read-only controller state for the UI
"""

from news_chat.models.schemas import (
    ChatReply,
    ChatRequest,
    ControllerSnapshot,
    ErrorBody,
    SessionCreated,
    Source,
    Turn,
    TurnRole,
)

__all__ = [
    "ChatReply",
    "ChatRequest",
    "ControllerSnapshot",
    "ErrorBody",
    "SessionCreated",
    "Source",
    "Turn",
    "TurnRole",
]
