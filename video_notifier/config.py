"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = "development"
    debug: bool = False

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Brightcove CMS API: {brightcove_api_url}{account_id}/videos/{video_id}
    brightcove_api_url: str = "https://cms.api.brightcove.com/v1/accounts/"
    brightcove_oauth_url: str = "https://oauth.brightcove.com/v3/access_token"
    brightcove_auth: str = ""  # "Basic <base64 of clientId:clientSecret>"
    brightcove_account_id: str = ""

    # CMS notifier (downstream ingestion endpoint)
    cms_notifier_url: str = "http://localhost:13080"
    cms_notifier_auth: str = ""
    cms_notifier_host_header: str = ""

    # Connect/read timeout for every outbound call
    request_timeout_seconds: float = 30.0

    @property
    def brightcove_configured(self) -> bool:
        """Whether the Brightcove account and OAuth credentials are set."""
        return bool(self.brightcove_account_id and self.brightcove_auth)

    def display(self) -> dict:
        """Return configuration for display (hide secrets)."""
        return {
            "environment": self.environment,
            "api": f"{self.api_host}:{self.api_port}",
            "brightcove": {
                "api_url": self.brightcove_api_url,
                "oauth_url": self.brightcove_oauth_url,
                "account_id": self.brightcove_account_id,
                "auth": "set, not empty" if self.brightcove_auth else "empty",
            },
            "cms_notifier": {
                "url": self.cms_notifier_url,
                "host_header": self.cms_notifier_host_header,
                "auth": "set, not empty" if self.cms_notifier_auth else "empty",
            },
            "request_timeout_seconds": self.request_timeout_seconds,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
