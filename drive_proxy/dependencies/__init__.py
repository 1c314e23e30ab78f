"""Expose dependency helpers for FastAPI routers."""

from .clients import (
    get_drive_upload_service,
    get_google_oauth_client,
    get_token_store,
)
from .config import get_app_settings, get_oauth_config

__all__ = [
    "get_app_settings",
    "get_drive_upload_service",
    "get_google_oauth_client",
    "get_oauth_config",
    "get_token_store",
]
