"""FastAPI dependencies for transaction IDs and the notifier pipeline."""

import secrets
import string
from typing import Annotated

from fastapi import Depends, Header, Request

from video_notifier.services.notifier import VideoNotifier

TRANSACTION_ID_HEADER = "X-Request-Id"
_TID_ALPHABET = string.ascii_lowercase + string.digits


def generate_transaction_id() -> str:
    """New transaction ID in the `tid_xxxxxxxxxx` form used across the platform."""
    return "tid_" + "".join(secrets.choice(_TID_ALPHABET) for _ in range(10))


async def get_transaction_id(
    x_request_id: Annotated[str | None, Header(alias=TRANSACTION_ID_HEADER)] = None,
) -> str:
    """Use the caller's X-Request-Id, or generate one when it is missing."""
    if x_request_id:
        return x_request_id
    return generate_transaction_id()


def get_notifier(request: Request) -> VideoNotifier:
    """Notifier built during application startup (see main.lifespan)."""
    return request.app.state.notifier


# Type aliases for dependency injection
TransactionID = Annotated[str, Depends(get_transaction_id)]
Notifier = Annotated[VideoNotifier, Depends(get_notifier)]
