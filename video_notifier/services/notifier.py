"""Fetch → enrich → forward pipeline shared by the notification endpoints."""

import logging

import httpx

from video_notifier.config import Settings
from video_notifier.services.brightcove import BrightcoveClient, FetchedVideo
from video_notifier.services.credentials import CredentialManager, TokenStore
from video_notifier.services.enrichment import DERIVED_ID_FIELD, enrich
from video_notifier.services.forwarder import CmsNotifierClient

logger = logging.getLogger(__name__)


class VideoNotifier:
    """Relays a single Brightcove video to the CMS notifier."""

    def __init__(self, brightcove: BrightcoveClient, cms_notifier: CmsNotifierClient):
        self.brightcove = brightcove
        self.cms_notifier = cms_notifier

    async def relay(self, video_id: str, transaction_id: str) -> FetchedVideo:
        """
        Fetch the video, add the CMS fields and forward it.

        Not-found markers are forwarded like live records so the CMS notifier
        learns about the missing video.

        Returns:
            The fetched video; its record is what was forwarded

        Raises:
            FetchError: Fetching from Brightcove failed
            EnrichError: The fetched record has no usable ID
            ForwardError: Delivering to the CMS notifier failed
        """
        fetched = await self.brightcove.fetch_video(video_id, transaction_id)
        video = fetched.record
        if fetched.not_found:
            logger.info(f"tid={transaction_id} video_id={video['id']} Video was not found in Brightcove API.")
        else:
            logger.info(f"tid={transaction_id} video_id={video.get('id')} Fetching video successful.")

        enrich(video)
        logger.info(
            f"tid={transaction_id} video_id={video['id']} uuid={video[DERIVED_ID_FIELD]} Generated uuid for video."
        )

        await self.cms_notifier.forward(video, transaction_id)
        logger.info(f"tid={transaction_id} video_id={video['id']} Forwarding video successful.")
        return fetched


def create_notifier(
    settings: Settings,
    client: httpx.AsyncClient,
    token_store: TokenStore | None = None,
) -> VideoNotifier:
    """Wire the Brightcove and CMS notifier clients over one HTTP client."""
    credentials = CredentialManager(settings, client, token_store or TokenStore())
    return VideoNotifier(
        brightcove=BrightcoveClient(settings, client, credentials),
        cms_notifier=CmsNotifierClient(settings, client),
    )
