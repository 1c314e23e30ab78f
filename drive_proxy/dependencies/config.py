"""
FastAPI dependencies exposing settings and the frozen OAuth configuration.
"""

from functools import lru_cache

from drive_proxy.core.config import AppSettings, get_settings
from drive_proxy.models.oauth import OAuthConfig


def get_app_settings() -> AppSettings:
    """FastAPI dependency returning application settings."""
    return get_settings()


@lru_cache()
def get_oauth_config() -> OAuthConfig:
    """Freeze the Google settings into the config handed to OAuth clients."""
    return OAuthConfig.from_settings(get_app_settings().google)


__all__ = ["get_app_settings", "get_oauth_config"]
