"""HTTP access to the remote news assistant service.

Responsibilities:
    - Environment-driven configuration (base URL, timeout)
    - Session creation and relinquishment
    - Chat turn dispatch with reply validation
    - Translation of transport failures into a small error taxonomy

Holds no conversation state. The session controller owns that.
"""

from news_chat.client.api_client import NewsApiClient
from news_chat.client.config import ClientConfig, get_client_config
from news_chat.client.errors import (
    AdvisoryCleanupError,
    ChatRequestError,
    ConnectivityError,
    NewsApiError,
)

__all__ = [
    "AdvisoryCleanupError",
    "ChatRequestError",
    "ClientConfig",
    "ConnectivityError",
    "NewsApiClient",
    "NewsApiError",
    "get_client_config",
]
