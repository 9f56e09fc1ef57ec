"""API routers."""

from video_notifier.routers import health, notifications

__all__ = [
    "health",
    "notifications",
]
