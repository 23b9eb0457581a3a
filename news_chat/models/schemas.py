from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TurnRole(str, Enum):
    """Speaker of a transcript turn."""

    USER = "user"
    ASSISTANT = "assistant"


class Source(BaseModel):
    """A news article cited by an assistant reply.

    Attributes:
        title: Headline shown to the user.
        link: URL of the article.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    link: str


class Turn(BaseModel):
    """A single entry in the chat transcript.

    Attributes:
        role: Who produced the turn.
        content: Message text, may contain markdown.
        timestamp: Milliseconds since the epoch.
        sources: Cited articles, assistant turns only.
        error: Whether this turn is a failure placeholder.
    """

    model_config = ConfigDict(frozen=True)

    role: TurnRole
    content: str
    timestamp: int
    sources: tuple[Source, ...] | None = None
    error: bool = False


class SessionCreated(BaseModel):
    """Response body of the create-session call."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(..., alias="sessionId", min_length=1)


class ChatRequest(BaseModel):
    """Request payload for the chat endpoint.

    Attributes:
        message: The user's trimmed question.
        session_id: Server-issued session identifier.
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., min_length=1)
    session_id: str = Field(..., alias="sessionId")

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class ChatReply(BaseModel):
    """Successful response from the chat endpoint.

    Attributes:
        response: The assistant's answer.
        sources: Articles the answer was grounded on.
        timestamp: Server time of the reply, milliseconds since the epoch.
    """

    response: str
    sources: list[Source] | None = None
    timestamp: int


class ErrorBody(BaseModel):
    """Error payload the service may attach to a non-2xx response."""

    error: str | None = None


class ControllerSnapshot(BaseModel):
    """Read-only view of the session controller for the UI."""

    model_config = ConfigDict(frozen=True)

    session_id: str | None
    transcript: tuple[Turn, ...]
    busy: bool
    pending: bool
    last_error: str | None
