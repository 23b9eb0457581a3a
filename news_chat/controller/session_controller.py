"""Session controller: the client-side conversation state machine.

Owns the session identifier, the transcript, the busy flag and the last
user-visible error. State changes only through ``initialize``, ``send`` and
``reset``; the UI reads snapshots and never mutates anything directly.

Failure handling:
    - Session creation failures leave the controller uninitialized with a
      banner-level ``last_error``.
    - Chat failures append a marked error turn and set ``last_error``.
    - Session relinquish failures are logged and absorbed.

No operation raises to the caller for a remote failure.
"""

import logging
import time
from collections.abc import Callable

from news_chat.client.api_client import NewsApiClient
from news_chat.client.errors import (
    AdvisoryCleanupError,
    ChatRequestError,
    ConnectivityError,
)
from news_chat.models.schemas import ControllerSnapshot, Turn, TurnRole

logger = logging.getLogger(__name__)

GREETING = (
    "Hello! I'm your news assistant. "
    "Ask me about the latest news from around the world!"
)
APOLOGY = "Sorry, I encountered an error processing your request. Please try again."
CONNECTIVITY_ERROR = (
    "Failed to connect to server. Please make sure the backend is running."
)
CHAT_ERROR = "Failed to get response from server"


def _now_ms() -> int:
    return int(time.time() * 1000)


class SessionController:
    """Drives one conversation against the news assistant service.

    At most one session is live and at most one chat request is in flight
    per instance.
    """

    def __init__(
        self,
        api: NewsApiClient,
        clock: Callable[[], int] | None = None,
    ) -> None:
        """Initialize the controller without contacting the service.

        Args:
            api: Client for the remote service.
            clock: Returns the current time in epoch milliseconds.
                   Defaults to the system clock.
        """
        self._api = api
        self._clock = clock or _now_ms
        self._session_id: str | None = None
        self._transcript: list[Turn] = []
        self._busy = False
        self._pending = False
        self._last_error: str | None = None

    @property
    def session_id(self) -> str | None:
        """Current server-issued session id, or None before a session exists."""
        return self._session_id

    @property
    def transcript(self) -> tuple[Turn, ...]:
        """Copy of the transcript in insertion order."""
        return tuple(self._transcript)

    @property
    def busy(self) -> bool:
        """Whether a chat turn is in flight."""
        return self._busy

    @property
    def pending(self) -> bool:
        """Whether a session is being created or reset."""
        return self._pending

    @property
    def last_error(self) -> str | None:
        """User-visible message for the latest failure, if any."""
        return self._last_error

    def snapshot(self) -> ControllerSnapshot:
        """Return an immutable copy of the current state."""
        return ControllerSnapshot(
            session_id=self._session_id,
            transcript=tuple(self._transcript),
            busy=self._busy,
            pending=self._pending,
            last_error=self._last_error,
        )

    def can_send(self, text: str) -> bool:
        """Check whether ``send(text)`` would be accepted right now."""
        return (
            bool(text.strip())
            and self._session_id is not None
            and not self._busy
            and not self._pending
        )

    async def initialize(self) -> bool:
        """Obtain a new session and start the transcript with a greeting.

        Ignored while a chat turn or another session change is in flight.

        Returns:
            True if a session was created, False if the service was
            unreachable or the call was ignored.
        """
        if self._busy or self._pending:
            logger.debug("Ignoring initialize while another operation is in flight")
            return False

        self._pending = True
        try:
            return await self._start_session()
        finally:
            self._pending = False

    async def _start_session(self) -> bool:
        try:
            session_id = await self._api.create_session()
        except ConnectivityError as e:
            logger.error(f"Failed to create session: {e}")
            self._session_id = None
            self._last_error = CONNECTIVITY_ERROR
            return False

        self._session_id = session_id
        self._transcript = [
            Turn(role=TurnRole.ASSISTANT, content=GREETING, timestamp=self._clock())
        ]
        self._last_error = None
        logger.info(f"Started session {session_id}")
        return True

    async def send(
        self,
        text: str,
        on_accepted: Callable[[], None] | None = None,
    ) -> bool:
        """Send a user turn and append the assistant's reply.

        The user turn is appended before the request is issued. Exactly one
        assistant turn follows it: the reply, or an error placeholder.

        Args:
            text: Raw user input. Surrounding whitespace is dropped.
            on_accepted: Called right after the user turn is appended, so the
                         caller can clear its input box. ``busy`` is already
                         True when it runs; the chat page relies on that to
                         show the typing indicator.

        Returns:
            False if the call was ignored (blank text, no session, or busy),
            True once the turn has been dispatched and settled.
        """
        if not self.can_send(text):
            return False

        content = text.strip()
        session_id = self._session_id
        self._transcript.append(
            Turn(role=TurnRole.USER, content=content, timestamp=self._clock())
        )
        self._busy = True
        self._last_error = None

        try:
            if on_accepted is not None:
                on_accepted()
            reply = await self._api.send_chat(content, session_id)
            self._transcript.append(
                Turn(
                    role=TurnRole.ASSISTANT,
                    content=reply.response,
                    sources=None if reply.sources is None else tuple(reply.sources),
                    timestamp=reply.timestamp,
                )
            )
        except ChatRequestError as e:
            logger.warning(f"Chat request failed: {e}")
            self._append_failure(e.server_message)
        except Exception:
            logger.exception("Unexpected error while dispatching chat turn")
            self._append_failure(None)
        finally:
            self._busy = False

        return True

    def _append_failure(self, server_message: str | None) -> None:
        self._transcript.append(
            Turn(
                role=TurnRole.ASSISTANT,
                content=APOLOGY,
                error=True,
                timestamp=self._clock(),
            )
        )
        self._last_error = server_message or CHAT_ERROR

    async def reset(self) -> bool:
        """Relinquish the current session and start a fresh conversation.

        Relinquishing is best effort; a failure never blocks the new session.
        Ignored while a chat turn or another session change is in flight.
        Sending is refused until the new session is in place.

        Returns:
            Whether the new session was created, or False if ignored.
        """
        if self._busy or self._pending:
            logger.debug("Ignoring reset while another operation is in flight")
            return False

        self._pending = True
        try:
            if self._session_id is not None:
                try:
                    await self._api.delete_session(self._session_id)
                except AdvisoryCleanupError as e:
                    logger.warning(f"Ignoring failed session cleanup: {e}")
                except Exception:
                    logger.exception("Unexpected error during session cleanup")
                self._session_id = None

            return await self._start_session()
        finally:
            self._pending = False
