"""Run the notifier with uvicorn: python -m video_notifier"""

import uvicorn

from video_notifier.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "video_notifier.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level="debug" if settings.debug else "info",
        access_log=False,  # Request logging happens in the routers, keyed by tid
    )


if __name__ == "__main__":
    main()
