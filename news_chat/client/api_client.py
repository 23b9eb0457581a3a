"""Async HTTP client for the news assistant service.

Wraps the three remote operations the chat client depends on:
creating a session, sending a chat turn, and relinquishing a session.
Every failure is translated into one of the errors in ``news_chat.client.errors``
so callers never deal with httpx or validation exceptions directly.
"""

import logging
from types import TracebackType
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from news_chat.client.config import ClientConfig, get_client_config
from news_chat.client.errors import (
    AdvisoryCleanupError,
    ChatRequestError,
    ConnectivityError,
)
from news_chat.models.schemas import ChatReply, ChatRequest, ErrorBody, SessionCreated

logger = logging.getLogger(__name__)


def _server_error_message(response: httpx.Response) -> str | None:
    """Extract the ``error`` field from a failed response, if it has one."""
    try:
        return ErrorBody.model_validate(response.json()).error
    except (ValueError, ValidationError):
        return None


def _path_segment(value: str) -> str:
    """Percent-encode an opaque id so it stays one literal path segment."""
    segment = quote(value, safe="")
    if segment in {".", ".."}:
        return segment.replace(".", "%2E")
    return segment


class NewsApiClient:
    """Client for the news assistant REST API.

    Holds one ``httpx.AsyncClient`` for its lifetime. Use as an async
    context manager or call ``aclose()`` when done.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            http_client: Optional pre-built httpx client. Its base URL is used
                         as is; tests pass one bound to an ASGI transport.
        """
        self._config = config or get_client_config()
        self._client = http_client or httpx.AsyncClient(
            base_url=self._config.api_url,
            timeout=self._config.request_timeout,
        )

    async def __aenter__(self) -> "NewsApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def create_session(self) -> str:
        """Ask the service for a new conversation session.

        Returns:
            The server-issued session identifier.

        Raises:
            ConnectivityError: If the service is unreachable, answers with a
                non-2xx status, or returns a malformed body.
        """
        try:
            response = await self._client.post("/sessions")
            response.raise_for_status()
            created = SessionCreated.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            raise ConnectivityError(
                f"Session creation failed: HTTP {e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            raise ConnectivityError(f"Connection failed: {e}") from e
        except (ValueError, ValidationError) as e:
            raise ConnectivityError(f"Malformed session response: {e}") from e

        return created.session_id

    async def send_chat(self, message: str, session_id: str) -> ChatReply:
        """Send one user turn and wait for the assistant's reply.

        Args:
            message: The user's message.
            session_id: Session identifier from ``create_session``.

        Returns:
            The parsed reply with sources and server timestamp.

        Raises:
            ChatRequestError: If the request fails for any reason. The
                server's ``error`` message is attached when present.
        """
        try:
            payload = ChatRequest(message=message, session_id=session_id)
        except ValidationError as e:
            raise ChatRequestError(f"Invalid chat request: {e}") from e

        try:
            response = await self._client.post(
                "/chat",
                json=payload.model_dump(by_alias=True),
            )
        except httpx.RequestError as e:
            raise ChatRequestError(f"Connection failed: {e}") from e

        if response.is_error:
            server_message = _server_error_message(response)
            raise ChatRequestError(
                f"Chat request failed: HTTP {response.status_code}",
                server_message=server_message,
                status_code=response.status_code,
            )

        try:
            return ChatReply.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ChatRequestError(
                f"Malformed chat response: {e}",
                status_code=response.status_code,
            ) from e

    async def delete_session(self, session_id: str) -> None:
        """Relinquish a session on the server. The response body is ignored.

        Raises:
            AdvisoryCleanupError: If the request fails or is rejected.
        """
        try:
            response = await self._client.delete(f"/sessions/{_path_segment(session_id)}")
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise AdvisoryCleanupError(
                f"Failed to relinquish session {session_id}: {e}"
            ) from e
