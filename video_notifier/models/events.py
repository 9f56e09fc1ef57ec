"""Inbound Brightcove notification models."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict

# Open JSON object as served by the Brightcove CMS API.
VideoRecord = dict[str, Any]


class VideoChangeEvent(BaseModel):
    """Brightcove video-change notification body.

    Example:
        {"timestamp": 1423840514446, "account_id": "775205503001",
         "event": "video-change", "video": "4020894387001", "version": 26}
    """

    # Absent fields keep their zero value; wrongly typed ones fail validation
    model_config = ConfigDict(strict=True)

    timestamp: int = 0  # epoch milliseconds
    account_id: str = ""
    event: str = ""
    video: str = ""
    version: int = 0

    @property
    def occurred_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp // 1000, tz=timezone.utc)

    def __str__(self) -> str:
        return (
            f"videoEvent: TimeStamp: [{self.occurred_at.strftime('%Y-%m-%dT%H:%M:%SZ')}], "
            f"AccountId: [{self.account_id}], Event: [{self.event}], "
            f"Video: [{self.video}], Version: [{self.version}]"
        )
