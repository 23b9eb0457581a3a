"""Pure display helpers for the chat page."""

from datetime import datetime


def format_time(timestamp_ms: int) -> str:
    """Render an epoch-milliseconds timestamp as local hour and minute."""
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%I:%M %p")


def session_label(session_id: str | None) -> str:
    """Shorten a session id for the footer."""
    if not session_id:
        return "Connecting..."
    return f"{session_id[:8]}..."
