"""Brightcove notification endpoints.

Both endpoints answer with a status code only, never a body:

POST /notify
    Brightcove push notification. Malformed events and events for other
    accounts share the webhook and are dropped with a 200.
    200 forwarded, 400 fetched record has no ID, 500 fetch/forward failure.

POST /force-notify/{video_id}
    Operator-triggered re-publish of a single video.
    200 forwarded live record, 204 forwarded not-found marker,
    400 fetched record has no ID, 429 Brightcove rate limit, 500 other failure.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError

from video_notifier.config import Settings, get_settings
from video_notifier.dependencies import Notifier, TransactionID
from video_notifier.models.events import VideoChangeEvent
from video_notifier.services.brightcove import FetchError, RateLimitedError
from video_notifier.services.enrichment import EnrichError
from video_notifier.services.forwarder import ForwardError

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/notify")
async def notify(
    request: Request,
    notifier: Notifier,
    transaction_id: TransactionID,
    settings: Annotated[Settings, Depends(get_settings)],
) -> Response:
    """Relay the video referenced by a Brightcove video-change event."""
    try:
        event = VideoChangeEvent.model_validate_json(await request.body())
    except ValidationError as e:
        logger.warning(f"tid={transaction_id} Invalid request received: {e}")
        return Response(status_code=status.HTTP_200_OK)

    if event.account_id != settings.brightcove_account_id:
        logger.warning(
            f"tid={transaction_id} account_id={event.account_id} "
            "Invalid notification event received. Unexpected accountID. Ignoring..."
        )
        return Response(status_code=status.HTTP_200_OK)
    logger.info(f"tid={transaction_id} video_id={event.video} Received notification event for video. {event}")

    try:
        await notifier.relay(event.video, transaction_id)
    except FetchError as e:
        logger.warning(f"tid={transaction_id} video_id={event.video} Fetching video unsuccessful: [{e}]")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    except EnrichError as e:
        logger.warning(f"tid={transaction_id} video_id={event.video} {e}")
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    except ForwardError as e:
        logger.warning(f"tid={transaction_id} video_id={event.video} Forwarding video unsuccessful: [{e}]")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response(status_code=status.HTTP_200_OK)


@router.post("/force-notify/{video_id}")
async def force_notify(video_id: str, notifier: Notifier, transaction_id: TransactionID) -> Response:
    """Relay a video on operator request, passing Brightcove 429s through."""
    logger.info(f"tid={transaction_id} video_id={video_id} Received force notification for video.")

    try:
        fetched = await notifier.relay(video_id, transaction_id)
    except RateLimitedError as e:
        logger.warning(f"tid={transaction_id} video_id={video_id} Fetching video unsuccessful: {e}")
        return Response(status_code=status.HTTP_429_TOO_MANY_REQUESTS)
    except FetchError as e:
        logger.warning(f"tid={transaction_id} video_id={video_id} Fetching video unsuccessful: {e}")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    except EnrichError as e:
        logger.warning(f"tid={transaction_id} video_id={video_id} {e}")
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    except ForwardError as e:
        logger.warning(f"tid={transaction_id} video_id={video_id} Forwarding video unsuccessful: [{e}]")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if fetched.not_found:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return Response(status_code=status.HTTP_200_OK)
