"""Brightcove notifier API service."""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from video_notifier.config import get_settings
from video_notifier.routers import health, notifications
from video_notifier.services.notifier import create_notifier

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup
    settings = get_settings()
    logger.info(f"Starting video notifier in {settings.environment} mode")
    logger.info(f"Config: {settings.display()}")
    if not settings.brightcove_account_id:
        logger.error("BRIGHTCOVE_ACCOUNT_ID is not set; every push notification will be ignored")

    # One HTTP client (and one access token) shared by all requests
    client = httpx.AsyncClient(timeout=settings.request_timeout_seconds)
    app.state.notifier = create_notifier(settings, client)

    yield

    # Shutdown
    logger.info("Shutting down video notifier")
    await client.aclose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Brightcove Notifier",
        description="Relays Brightcove video-change notifications to the CMS notifier",
        version="0.1.0",
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.include_router(notifications.router, tags=["notifications"])
    app.include_router(health.router, tags=["health"])

    return app


app = create_app()
