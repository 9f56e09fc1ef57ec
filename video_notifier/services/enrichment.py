"""Adds the fields the CMS notifier requires to a Brightcove video record."""

import hashlib
import uuid

from video_notifier.models.events import VideoRecord

DERIVED_ID_FIELD = "derivedID"
KIND_FIELD = "kind"
VIDEO_KIND = "video"


class EnrichError(Exception):
    """Video record cannot be enriched."""

    pass


class MissingIDError(EnrichError):
    """Video record has no string `id` field."""

    pass


def derive_uuid(source_id: str) -> str:
    """
    Derive a stable name-based (version 3) UUID from a Brightcove ID.

    The namespace is nil and zero-length: the MD5 digest covers the ID bytes
    only. The same ID always maps to the same UUID.

    Example:
        >>> derive_uuid("4492075574001") == derive_uuid("4492075574001")
        True
    """
    digest = hashlib.md5(source_id.encode("utf-8")).digest()
    return str(uuid.UUID(bytes=digest, version=3))


def enrich(video: VideoRecord) -> None:
    """Set `derivedID` and `kind` on the record in place.

    Raises:
        MissingIDError: If `id` is absent or not a string
    """
    source_id = video.get("id")
    if not isinstance(source_id, str):
        raise MissingIDError("Invalid content, missing video ID.")

    video[DERIVED_ID_FIELD] = derive_uuid(source_id)
    video[KIND_FIELD] = VIDEO_KIND
