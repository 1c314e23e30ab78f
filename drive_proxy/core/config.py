"""
Application configuration models and helpers.

Centralizes settings management so the API handlers, the Drive upload saga
and the OAuth callback view share a consistent configuration surface.
"""

from functools import lru_cache
from typing import Annotated, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_REDIRECT_URI = "https://check-certificado.vercel.app/oauth2callback"
DEFAULT_SCOPES = ("https://www.googleapis.com/auth/drive.file",)


class GoogleSettings(BaseSettings):
    """Configuration required for the Google OAuth consent and token flow."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    client_id: Optional[str] = Field(None, alias="GOOGLE_CLIENT_ID")
    client_secret: Optional[str] = Field(None, alias="GOOGLE_CLIENT_SECRET")
    redirect_uri: str = Field(DEFAULT_REDIRECT_URI, alias="GOOGLE_REDIRECT_URI")
    scopes: Annotated[tuple[str, ...], NoDecode] = Field(
        DEFAULT_SCOPES, alias="GOOGLE_OAUTH_SCOPES"
    )

    @field_validator("scopes", mode="before")
    @classmethod
    def _split_scopes(
        cls, value: str | tuple[str, ...] | list[str]
    ) -> tuple[str, ...]:
        """Support providing scopes as a comma-separated string."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(value)
        return tuple(scope.strip() for scope in value.split(",") if scope.strip())


class DriveSettings(BaseSettings):
    """Settings for the Drive upload saga."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    delete_orphans: bool = Field(
        False,
        alias="DRIVE_DELETE_ORPHANS",
        description=(
            "Delete the created Drive file when a later upload step fails."
        ),
    )


class AppSettings(BaseSettings):
    """Root settings object for the FastAPI application."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    log_level: str = Field("INFO", alias="APP_LOG_LEVEL")
    http_timeout_seconds: float = Field(
        30.0,
        alias="HTTP_TIMEOUT_SECONDS",
        description="Timeout applied to every outbound Google API request.",
    )
    token_store_path: str = Field(
        "data/token_store.db",
        alias="TOKEN_STORE_PATH",
        description="SQLite file backing the callback view's token storage.",
    )
    google: GoogleSettings = Field(default_factory=GoogleSettings)
    drive: DriveSettings = Field(default_factory=DriveSettings)


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()


__all__ = [
    "AppSettings",
    "DEFAULT_REDIRECT_URI",
    "DEFAULT_SCOPES",
    "DriveSettings",
    "GoogleSettings",
    "get_settings",
]
