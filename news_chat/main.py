"""Main application entry point.

Runs the NiceGUI chat page (port 8080 by default) against the news
assistant API configured by NEWS_CHAT_API_URL.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Application entry point."""
    from nicegui import ui

    from news_chat.client.config import get_client_config
    from news_chat.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    config = get_client_config()
    port = int(os.getenv("PORT", "8080"))

    logger.info(f"Using news assistant API at {config.api_url}")
    logger.info(f"Chat UI available at http://localhost:{port}/")

    ui.run(
        title="News Chatbot",
        favicon="📰",
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        reload=False,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "news-chat-secret"),
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
