"""Schemas related to OAuth flows."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class AuthUrlResponse(BaseModel):
    authUrl: str = Field(..., description="Google consent-screen URL.")


class TokenExchangeRequest(BaseModel):
    """Payload sent to exchange an authorization code."""

    code: Optional[str] = Field(
        None, description="Authorization code returned by Google OAuth."
    )


class TokenExchangeResponse(BaseModel):
    tokens: Dict[str, Any] = Field(
        ..., description="Token payload relayed verbatim from Google."
    )


__all__ = ["AuthUrlResponse", "TokenExchangeRequest", "TokenExchangeResponse"]
