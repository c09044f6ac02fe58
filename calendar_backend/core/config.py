"""
Configuration module - centralized settings for the calendar backend.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    To override in production, set environment variables:
        export ENVIRONMENT=production
        export FRONTEND_ORIGIN=https://calendar.example.com
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    APP_NAME: str = "Calendar Backend"

    # ENVIRONMENT: "development" or "production"
    # - production turns on the secure cookie flag and hides error details
    ENVIRONMENT: str = "development"

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    LOG_LEVEL: str = "INFO"

    # ---------------------------------------------------------------------------
    # GOOGLE OAUTH SETTINGS
    # ---------------------------------------------------------------------------
    # Google Cloud Console: https://console.cloud.google.com/apis/credentials
    # The frontend runs the OAuth consent flow itself and posts the resulting
    # access token to /api/auth/google. Both values are only checked at startup
    # to warn about an unconfigured deployment.
    GOOGLE_CLIENT_ID: str = ""
    GOOGLE_CLIENT_SECRET: str = ""

    # Timeout for every outbound call to Google (userinfo, calendar)
    GOOGLE_API_TIMEOUT_SECONDS: float = 30.0

    # Upper bound accepted by the Events.list API
    CALENDAR_MAX_RESULTS: int = 2500

    # IANA zone used for "local time" day windows; empty = server local zone
    TIMEZONE: str = ""

    # ---------------------------------------------------------------------------
    # CORS
    # ---------------------------------------------------------------------------
    # Single origin allowed to call the API with credentials (cookies)
    FRONTEND_ORIGIN: str = "https://calendar-app-google.netlify.app"

    # ---------------------------------------------------------------------------
    # SESSION SETTINGS
    # ---------------------------------------------------------------------------
    SESSION_COOKIE_NAME: str = "session"

    # Cookie max-age: 24 hours
    SESSION_MAX_AGE_SECONDS: int = 60 * 60 * 24

    # How long a stored session record stays valid server-side
    SESSION_TTL_SECONDS: int = 60 * 60 * 24

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from calendar_backend.core.config import settings
settings = Settings()
