"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./immo.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        default="change-me", description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60 * 24,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    password_hash_rounds: int = Field(
        default=310_000,
        description="pbkdf2_sha256 rounds used when hashing passwords",
        ge=1000,
    )
    app_timezone: str = Field(
        default="Africa/Abidjan",
        description="IANA timezone (or UTC+HH:MM offset) used for stored timestamps",
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser",
    )

    expo_push_url: str = Field(
        default="https://exp.host/--/api/v2/push/send",
        description="Endpoint of the Expo push notification service",
    )
    expo_access_token: str | None = Field(
        default=None,
        description="Optional Expo access token sent as a bearer credential",
    )
    push_timeout_seconds: float = Field(
        default=10.0, description="HTTP timeout for push provider calls", gt=0
    )
    cron_secret: str | None = Field(
        default=None,
        description="Shared secret expected in X-Cron-Secret on the alert sweep endpoint",
    )

    alert_lookback_days: int = Field(
        default=7,
        description="Look-back window for alerts that were never notified",
        gt=0,
    )
    alert_match_limit: int = Field(
        default=20, description="Maximum listings reported per alert check", gt=0
    )
    view_dedup_user_hours: int = Field(
        default=24,
        description="Window during which a repeated view by the same user is ignored",
        ge=0,
    )
    view_dedup_ip_hours: int = Field(
        default=2,
        description="Window during which a repeated anonymous view by the same IP is ignored",
        ge=0,
    )
    search_candidate_limit: int = Field(
        default=500,
        description="Maximum rows fetched from the store before in-memory ranking",
        gt=0,
    )
    home_feed_limit: int = Field(
        default=20, description="Default number of listings on the home feed", gt=0
    )

    @model_validator(mode="after")
    def _validate_dedup_windows(self) -> "Settings":
        if self.view_dedup_ip_hours > self.view_dedup_user_hours:
            raise ValueError(
                "VIEW_DEDUP_IP_HOURS must not exceed VIEW_DEDUP_USER_HOURS"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
