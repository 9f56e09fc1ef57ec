"""Health and good-to-go endpoints."""

import time
from datetime import datetime, timezone
from typing import Annotated, Any, Literal

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from video_notifier.config import Settings, get_settings
from video_notifier.dependencies import Notifier

# Track when the server started
SERVER_START_TIME = time.time()

NO_CACHE_HEADERS = {"Cache-Control": "no-cache, no-store, must-revalidate"}

router = APIRouter()


@router.get("/__health")
async def health_check(
    notifier: Notifier,
    settings: Annotated[Settings, Depends(get_settings)],
) -> JSONResponse:
    """
    Health check endpoint.

    Verifies:
    - CMS notifier good-to-go (critical)
    - Brightcove credentials configured (doesn't fail health check)

    Returns:
    - 200 OK: CMS notifier reachable
    - 503 Service Unavailable: CMS notifier unreachable
    """
    health_status: dict[str, Any] = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "environment": settings.environment,
        "uptime_seconds": int(time.time() - SERVER_START_TIME),
        "components": {},
    }
    overall_status: Literal["healthy", "degraded", "unhealthy"] = "healthy"

    start = time.time()
    if await notifier.cms_notifier.good_to_go():
        health_status["components"]["cms_notifier"] = {
            "status": "healthy",
            "response_ms": int((time.time() - start) * 1000),
        }
    else:
        health_status["components"]["cms_notifier"] = {
            "status": "unhealthy",
            "error": f"{settings.cms_notifier_url}/__gtg is not good to go",
        }
        overall_status = "unhealthy"

    if settings.brightcove_configured:
        health_status["components"]["brightcove"] = {
            "status": "configured",
            "account_id": settings.brightcove_account_id,
        }
    else:
        health_status["components"]["brightcove"] = {
            "status": "not_configured",
            "note": "Brightcove account ID or OAuth authorization not set",
        }
        if overall_status == "healthy":
            overall_status = "degraded"

    health_status["status"] = overall_status
    return JSONResponse(
        content=health_status,
        status_code=503 if overall_status == "unhealthy" else 200,
        headers=NO_CACHE_HEADERS,
    )


@router.get("/__gtg")
async def good_to_go(notifier: Notifier) -> Response:
    """Good-to-go: 200 when the CMS notifier can take notifications."""
    if await notifier.cms_notifier.good_to_go():
        return PlainTextResponse("OK", headers=NO_CACHE_HEADERS)
    return PlainTextResponse("CMS notifier is not good to go", status_code=503, headers=NO_CACHE_HEADERS)
