"""Pytest fixtures and shared test configuration.

Provides an in-process fake of the news assistant service and clients
wired to it through ASGITransport, so no network is involved.

Fixtures:
    - fake_service: Controllable fake news service state
    - api_client: NewsApiClient bound to the fake service
    - controller: SessionController using that client and a fixed clock
    - mock_session_id: Consistent session ID for tests
"""

from collections.abc import AsyncGenerator
from dataclasses import dataclass, field

import pytest
from fastapi import APIRouter, FastAPI
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient

from news_chat.client.api_client import NewsApiClient
from news_chat.client.config import ClientConfig
from news_chat.controller.session_controller import SessionController

FIXED_NOW = 1_699_999_000_000


@dataclass
class FakeNewsService:
    """Scriptable behaviour and call log for the fake news API."""

    session_ids: list[str] = field(default_factory=lambda: ["abc123", "def456", "ghi789"])
    create_status: int = 200
    chat_status: int = 200
    chat_error: str | None = None
    delete_status: int = 200
    reply_timestamp: int = 1_700_000_000_000
    created: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    chats: list[dict] = field(default_factory=list)

    def build_app(self) -> FastAPI:
        router = APIRouter(prefix="/api")

        @router.post("/sessions")
        async def create_session() -> JSONResponse:
            if self.create_status >= 400:
                return JSONResponse({"error": "unavailable"}, status_code=self.create_status)
            session_id = self.session_ids[len(self.created) % len(self.session_ids)]
            self.created.append(session_id)
            return JSONResponse({"sessionId": session_id})

        @router.post("/chat")
        async def chat(body: dict) -> JSONResponse:
            self.chats.append(body)
            if self.chat_status >= 400:
                payload = {"error": self.chat_error} if self.chat_error else {}
                return JSONResponse(payload, status_code=self.chat_status)
            return JSONResponse(
                {
                    "response": f"Here's what's happening with {body['message']}",
                    "sources": [{"title": "Reuters", "link": "https://reuters.com/a"}],
                    "timestamp": self.reply_timestamp,
                }
            )

        @router.delete("/sessions/{session_id}")
        async def delete_session(session_id: str) -> JSONResponse:
            self.deleted.append(session_id)
            if self.delete_status >= 400:
                return JSONResponse({"error": "boom"}, status_code=self.delete_status)
            return JSONResponse({"message": "Session cleared"})

        app = FastAPI()
        app.include_router(router)
        return app


@pytest.fixture
def mock_session_id() -> str:
    """Generate consistent session ID for testing.

    Returns:
        The first session ID the fake service hands out.
    """
    return "abc123"


@pytest.fixture
def fake_service() -> FakeNewsService:
    """Fresh fake service per test."""
    return FakeNewsService()


@pytest.fixture
async def api_client(fake_service: FakeNewsService) -> AsyncGenerator[NewsApiClient]:
    """Create a NewsApiClient talking to the fake service.

    Yields:
        Client whose requests are served in-process.
    """
    transport = ASGITransport(app=fake_service.build_app())
    http_client = AsyncClient(transport=transport, base_url="http://test/api")
    async with NewsApiClient(
        config=ClientConfig(api_url="http://test/api"),
        http_client=http_client,
    ) as client:
        yield client


@pytest.fixture
def controller(api_client: NewsApiClient) -> SessionController:
    """Controller over the fake service with a fixed clock."""
    return SessionController(api_client, clock=lambda: FIXED_NOW)
