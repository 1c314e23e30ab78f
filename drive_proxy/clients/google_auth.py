"""
Google OAuth utilities.

These helpers build the consent-screen URL and exchange authorization codes
for token sets. Codes and tokens are forwarded without inspection.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import httpx

from drive_proxy.core.errors import UpstreamError
from drive_proxy.models.oauth import OAuthConfig
from drive_proxy.utils.http import parse_json, send_request

logger = logging.getLogger(__name__)


class GoogleOAuthClient:
    """Build Google authorization URLs and exchange authorization codes."""

    def __init__(
        self,
        config: OAuthConfig,
        *,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config
        self._timeout = timeout
        self._transport = transport

    def build_authorization_url(self) -> str:
        """Construct the Google OAuth consent URL."""
        params = {
            "client_id": self._config.require_client_id(),
            "redirect_uri": self._config.redirect_uri,
            "response_type": "code",
            "scope": " ".join(self._config.scopes),
            "access_type": "offline",
            "prompt": "consent",
        }
        return f"{self._config.auth_url}?{urlencode(params)}"

    async def exchange_authorization_code(self, code: str) -> Dict[str, Any]:
        """
        Exchange an authorization code for tokens.

        Returns the provider's JSON payload exactly as received.
        """
        client_id, client_secret = self._config.require_credentials()
        payload = {
            "code": code,
            "client_id": client_id,
            "client_secret": client_secret,
            "redirect_uri": self._config.redirect_uri,
            "grant_type": "authorization_code",
        }

        action = "Token exchange"
        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport
        ) as client:
            response = await send_request(
                client, "POST", self._config.token_url, action=action, data=payload
            )

        tokens = parse_json(response, action=action)
        if not isinstance(tokens, dict):
            raise UpstreamError(f"{action} returned an unexpected payload.")
        logger.info("Exchanged authorization code for %d token fields", len(tokens))
        return tokens


__all__ = ["GoogleOAuthClient"]
