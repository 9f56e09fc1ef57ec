"""Brightcove CMS API client.

Fetches the canonical video record for a video ID. Handles:
- 401: renew the access token and retry once
- 404: Brightcove answers with an error array instead of a record; the first
  entry is returned as a not-found marker carrying the requested ID
- 429: surfaced separately so callers can pass the rate limit through
"""

import logging
from dataclasses import dataclass

import httpx

from video_notifier.config import Settings
from video_notifier.models.events import VideoRecord
from video_notifier.services.credentials import AuthError, CredentialManager

logger = logging.getLogger(__name__)

NOT_FOUND_ERROR_CODE = "NOT_FOUND"


class FetchError(Exception):
    """Error fetching a video from the Brightcove CMS API."""

    pass


class UnauthorizedError(FetchError):
    """Still unauthorized after renewing the access token."""

    pass


class AuthFailedError(FetchError):
    """Access token renewal failed."""

    pass


class RateLimitedError(FetchError):
    """Brightcove answered 429."""

    pass


class MalformedNotFoundError(FetchError):
    """404 response carried an empty error array."""

    pass


class InvalidResponseError(FetchError):
    """Response body could not be decoded into the expected shape."""

    pass


class UnexpectedStatusError(FetchError):
    """Any status code the client does not handle."""

    def __init__(self, status_code: int):
        super().__init__(f"Invalid statusCode received: [{status_code}]")
        self.status_code = status_code


class FetchTransportError(FetchError):
    """Brightcove CMS API could not be reached."""

    pass


def _reject_non_finite(constant: str):
    # NaN and Infinity are not JSON and must not be forwarded
    raise ValueError(f"Non-finite number in JSON: {constant}")


@dataclass
class FetchedVideo:
    """A fetched video record.

    `not_found` is set when Brightcove answered 404 and `record` is the
    not-found marker built from its error array.
    """

    record: VideoRecord
    not_found: bool = False


class BrightcoveClient:
    """Client for the Brightcove CMS video endpoint."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient, credentials: CredentialManager):
        self._settings = settings
        self._client = client
        self._credentials = credentials

    def video_url(self, video_id: str) -> str:
        return f"{self._settings.brightcove_api_url}{self._settings.brightcove_account_id}/videos/{video_id}"

    async def fetch_video(self, video_id: str, transaction_id: str) -> FetchedVideo:
        """
        Fetch a video record, renewing the access token once on 401.

        Args:
            video_id: Brightcove video ID
            transaction_id: Correlation ID for logging

        Returns:
            The video record, or a not-found marker built from a 404

        Raises:
            FetchError: One of its subclasses, depending on the failure
        """
        token = self._credentials.token
        response = await self._get(video_id, token)

        if response.status_code == 401:
            logger.info(f"tid={transaction_id} video_id={video_id} Renewing access token.")
            try:
                await self._credentials.renew(stale_token=token)
            except AuthError as e:
                raise AuthFailedError(f"Renewing access token failure: [{e}].") from e

            response = await self._get(video_id, self._credentials.token)
            if response.status_code == 401:
                raise UnauthorizedError("Unauthorized after renewing access token. status=401")

        return self._parse(response, video_id)

    async def _get(self, video_id: str, token: str) -> httpx.Response:
        try:
            return await self._client.get(
                self.video_url(video_id),
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {token}",
                },
            )
        except httpx.RequestError as e:
            raise FetchTransportError(f"Failed to connect to Brightcove API: {e}") from e

    def _parse(self, response: httpx.Response, video_id: str) -> FetchedVideo:
        status_code = response.status_code

        if status_code == 200:
            video = self._decode(response)
            if not isinstance(video, dict):
                raise InvalidResponseError("Expected a JSON object for video record")
            return FetchedVideo(video)

        if status_code == 404:
            candidates = self._decode(response)
            if not isinstance(candidates, list) or not all(isinstance(c, dict) for c in candidates):
                raise InvalidResponseError("Expected a JSON array for 404 response")
            if len(candidates) == 0:
                raise MalformedNotFoundError("Unexpected 404 response. Zero-length array received.")
            marker = candidates[0]
            # The error body does not echo the ID back
            marker["id"] = video_id
            marker.setdefault("error_code", NOT_FOUND_ERROR_CODE)
            return FetchedVideo(marker, not_found=True)

        if status_code == 429:
            raise RateLimitedError("Too many requests. status=429")

        raise UnexpectedStatusError(status_code)

    @staticmethod
    def _decode(response: httpx.Response):
        try:
            return response.json(parse_constant=_reject_non_finite)
        except ValueError as e:
            raise InvalidResponseError(f"Undecodable response body: {e}") from e
