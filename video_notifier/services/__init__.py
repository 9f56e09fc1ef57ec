"""Service layer: Brightcove, enrichment and CMS notifier clients."""

from video_notifier.services.brightcove import BrightcoveClient, FetchedVideo, FetchError
from video_notifier.services.credentials import AuthError, CredentialManager, TokenStore
from video_notifier.services.enrichment import EnrichError, enrich
from video_notifier.services.forwarder import CmsNotifierClient, ForwardError
from video_notifier.services.notifier import VideoNotifier, create_notifier

__all__ = [
    "AuthError",
    "BrightcoveClient",
    "CmsNotifierClient",
    "CredentialManager",
    "EnrichError",
    "FetchError",
    "FetchedVideo",
    "ForwardError",
    "TokenStore",
    "VideoNotifier",
    "create_notifier",
    "enrich",
]
