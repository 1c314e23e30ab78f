"""
Domain models for the OAuth flow.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from drive_proxy.core.config import GoogleSettings
from drive_proxy.core.errors import ConfigurationError


class OAuthConfig(BaseModel):
    """Immutable OAuth client configuration handed to each client."""

    model_config = ConfigDict(frozen=True)

    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    redirect_uri: str
    scopes: tuple[str, ...]
    auth_url: str = "https://accounts.google.com/o/oauth2/v2/auth"
    token_url: str = "https://oauth2.googleapis.com/token"

    @classmethod
    def from_settings(cls, settings: GoogleSettings) -> "OAuthConfig":
        return cls(
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            redirect_uri=settings.redirect_uri,
            scopes=settings.scopes,
        )

    def require_client_id(self) -> str:
        if not self.client_id:
            raise ConfigurationError("GOOGLE_CLIENT_ID is not configured.")
        return self.client_id

    def require_credentials(self) -> tuple[str, str]:
        """Return ``(client_id, client_secret)`` or fail when either is unset."""
        client_id = self.require_client_id()
        if not self.client_secret:
            raise ConfigurationError("GOOGLE_CLIENT_SECRET is not configured.")
        return client_id, self.client_secret


class TokenSet(BaseModel):
    """
    Token payload issued by Google.

    Only ``access_token`` is required; every other key the provider returns
    is kept so the set can be relayed and stored unmodified.
    """

    model_config = ConfigDict(extra="allow")

    access_token: str = Field(..., min_length=1)
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None
    token_type: Optional[str] = None
    scope: Optional[str] = None


__all__ = ["OAuthConfig", "TokenSet"]
