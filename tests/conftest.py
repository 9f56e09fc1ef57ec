"""Pytest fixtures for notifier tests."""

from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from tests.utils.helpers import BRIGHTCOVE_HOST, CMS_NOTIFIER_HOST, OAUTH_HOST, FakeServices
from video_notifier.config import Settings
from video_notifier.main import create_app
from video_notifier.services.credentials import TokenStore
from video_notifier.services.notifier import VideoNotifier, create_notifier


@pytest.fixture
def test_account_id() -> str:
    """Brightcove account the notifier listens for."""
    return "775205503001"


@pytest.fixture
def test_video_id() -> str:
    """Brightcove video ID."""
    return "4020894387001"


@pytest.fixture
def test_video(test_video_id: str) -> dict[str, Any]:
    """Brightcove CMS API video record."""
    return {
        "account_id": "775205503001",
        "created_at": "2015-02-13T15:15:14.446Z",
        "description": "Markets round-up",
        "duration": 95440,
        "id": test_video_id,
        "name": "Markets close higher",
        "state": "ACTIVE",
        "tags": ["markets", "equities"],
        "custom_fields": {},
        "images": {"poster": {"src": "https://example.test/poster.jpg"}},
    }


@pytest.fixture
def settings(test_account_id: str) -> Settings:
    """Settings pointing every outbound call at the fake services."""
    return Settings(
        _env_file=None,
        brightcove_api_url=f"http://{BRIGHTCOVE_HOST}/v1/accounts/",
        brightcove_oauth_url=f"http://{OAUTH_HOST}/v3/access_token",
        brightcove_auth="Basic Y2xpZW50SWQ6Y2xpZW50U2VjcmV0",
        brightcove_account_id=test_account_id,
        cms_notifier_url=f"http://{CMS_NOTIFIER_HOST}",
    )


@pytest.fixture
def fake_services() -> FakeServices:
    return FakeServices()


@pytest.fixture
async def http_client(fake_services: FakeServices) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client whose requests are answered by the fake services."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_services.handler)) as client:
        yield client


@pytest.fixture
def token_store() -> TokenStore:
    return TokenStore("current-token")


@pytest.fixture
def notifier(settings: Settings, http_client: httpx.AsyncClient, token_store: TokenStore) -> VideoNotifier:
    return create_notifier(settings, http_client, token_store)


@pytest.fixture
def app(settings: Settings, notifier: VideoNotifier) -> FastAPI:
    """Create the FastAPI application for testing."""
    from video_notifier.config import get_settings
    from video_notifier.dependencies import get_notifier

    app = create_app()
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_notifier] = lambda: notifier
    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client with the fake services wired in."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
