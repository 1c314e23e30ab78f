"""
Factory functions to provide shared clients and services as FastAPI dependencies.
"""

from functools import lru_cache

from drive_proxy.clients import GoogleOAuthClient, TokenStore
from drive_proxy.dependencies.config import get_app_settings, get_oauth_config
from drive_proxy.services import DriveUploadService


@lru_cache()
def get_google_oauth_client() -> GoogleOAuthClient:
    """Create a singleton Google OAuth client."""
    settings = get_app_settings()
    return GoogleOAuthClient(
        get_oauth_config(), timeout=settings.http_timeout_seconds
    )


@lru_cache()
def get_drive_upload_service() -> DriveUploadService:
    """Provide the Drive upload saga."""
    settings = get_app_settings()
    return DriveUploadService(
        delete_orphans=settings.drive.delete_orphans,
        timeout=settings.http_timeout_seconds,
    )


@lru_cache()
def get_token_store() -> TokenStore:
    """Provide the persistent token storage used by the callback view."""
    return TokenStore(get_app_settings().token_store_path)


__all__ = [
    "get_drive_upload_service",
    "get_google_oauth_client",
    "get_token_store",
]
