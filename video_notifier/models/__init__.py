"""API models for requests and payloads."""

from video_notifier.models.events import VideoChangeEvent, VideoRecord

__all__ = [
    "VideoChangeEvent",
    "VideoRecord",
]
