"""Expose constructed client wrappers."""

from .google_auth import GoogleOAuthClient
from .google_drive import GoogleDriveClient
from .token_store import TokenStore

__all__ = [
    "GoogleDriveClient",
    "GoogleOAuthClient",
    "TokenStore",
]
