"""Client configuration with environment variable loading.

Pydantic-based configuration for talking to the news assistant service.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_URL = "http://localhost:5000/api"


class ClientConfig(BaseModel):
    """Configuration for the news service HTTP client.

    Attributes:
        api_url: Base URL of the service API, without trailing slash.
        request_timeout: Seconds before a remote call is abandoned.
    """

    api_url: str = Field(
        default_factory=lambda: os.getenv(
            "NEWS_CHAT_API_URL", os.getenv("API_URL", DEFAULT_API_URL)
        ),
        description="Base URL of the news assistant API",
    )
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("NEWS_CHAT_TIMEOUT", "60")),
        gt=0.0,
        le=600.0,
        description="Timeout in seconds for each remote call",
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                "API URL must start with http:// or https://. Set NEWS_CHAT_API_URL in .env"
            )
        return v.rstrip("/")


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If the configured URL or timeout is invalid.
    """
    return ClientConfig()
