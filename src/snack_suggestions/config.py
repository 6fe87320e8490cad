"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

UNSUPPORTED_NOTIFICATION_PLATFORMS = frozenset({"web"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    expo_push_token: str
    expo_access_token: str | None = None
    expo_push_url: str = "https://exp.host/--/api/v2/push/send"
    platform: str = "ios"
    timezone: str = "UTC"
    language: str = "en"
    check_interval_seconds: float = 60
    test_notifications: bool = False
    marker_retention_days: int = 7
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def supports_local_notifications(platform: str) -> bool:
    """Return True when the platform can show local notifications."""
    return platform.strip().lower() not in UNSUPPORTED_NOTIFICATION_PLATFORMS
