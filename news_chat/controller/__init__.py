"""Conversation lifecycle for the news chat client.

Responsibilities:
    - Session provisioning and best-effort relinquishment
    - Ordered, append-only transcript with optimistic user turns
    - Serialized chat dispatch behind a busy flag
    - Mapping every remote failure to a defined state transition

The only stateful component of the client. The UI reads it, never writes it.
"""

from news_chat.controller.session_controller import (
    APOLOGY,
    CHAT_ERROR,
    CONNECTIVITY_ERROR,
    GREETING,
    SessionController,
)

__all__ = [
    "APOLOGY",
    "CHAT_ERROR",
    "CONNECTIVITY_ERROR",
    "GREETING",
    "SessionController",
]
