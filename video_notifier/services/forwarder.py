"""CMS notifier client: delivers enriched video records downstream."""

import json
import logging

import httpx

from video_notifier.config import Settings
from video_notifier.models.events import VideoRecord

logger = logging.getLogger(__name__)

ORIGIN_SYSTEM_ID = "brightcove"


class ForwardError(Exception):
    """Error delivering a video record to the CMS notifier."""

    pass


class RejectedError(ForwardError):
    """CMS notifier answered 400; carries the response body."""

    def __init__(self, body: str):
        super().__init__(f"Status code 400. [{body}]")
        self.body = body


class UnexpectedStatusError(ForwardError):
    """Any status other than 200 or 400."""

    def __init__(self, status_code: int):
        super().__init__(f"Invalid statusCode received: [{status_code}]")
        self.status_code = status_code


class ForwardTransportError(ForwardError):
    """CMS notifier could not be reached."""

    pass


class CmsNotifierClient:
    """Client for the CMS notifier /notify endpoint."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient):
        self._settings = settings
        self._client = client

    @property
    def notify_url(self) -> str:
        return f"{self._settings.cms_notifier_url}/notify"

    def build_headers(self, transaction_id: str) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "X-Origin-System-Id": ORIGIN_SYSTEM_ID,
            "X-Request-Id": transaction_id,
        }
        if self._settings.cms_notifier_auth:
            headers["Authorization"] = self._settings.cms_notifier_auth
        if self._settings.cms_notifier_host_header:
            headers["Host"] = self._settings.cms_notifier_host_header
        return headers

    async def forward(self, video: VideoRecord, transaction_id: str) -> None:
        """
        POST the record to the CMS notifier.

        Args:
            video: Enriched video record
            transaction_id: Sent as X-Request-Id

        Raises:
            RejectedError: CMS notifier answered 400
            UnexpectedStatusError: Any other non-200 status
            ForwardTransportError: CMS notifier unreachable
        """
        try:
            response = await self._client.post(
                self.notify_url,
                content=json.dumps(video),
                headers=self.build_headers(transaction_id),
            )
        except httpx.RequestError as e:
            raise ForwardTransportError(f"Failed to connect to CMS notifier: {e}") from e

        if response.status_code == 200:
            return
        if response.status_code == 400:
            raise RejectedError(response.text)
        raise UnexpectedStatusError(response.status_code)

    async def good_to_go(self) -> bool:
        """Probe the CMS notifier's /__gtg endpoint."""
        headers = {}
        if self._settings.cms_notifier_host_header:
            headers["Host"] = self._settings.cms_notifier_host_header
        try:
            response = await self._client.get(f"{self._settings.cms_notifier_url}/__gtg", headers=headers)
        except httpx.RequestError as e:
            logger.warning(f"CMS notifier good-to-go probe failed: {e}")
            return False
        return response.status_code == 200
