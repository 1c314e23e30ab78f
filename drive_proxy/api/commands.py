"""Enumerated routing table for the proxy's HTTP surface."""

from __future__ import annotations

from enum import Enum


class Command(str, Enum):
    """Every request resolves to exactly one command by its path.

    ``UNKNOWN`` carries the catch-all pattern and must be registered last.
    """

    HEALTH = "/health"
    AUTH_URL = "/getAuthUrl"
    TOKENS = "/getTokens"
    UPLOAD = "/uploadToDrive"
    CALLBACK = "/oauth2callback"
    UNKNOWN = "/{path:path}"

    @property
    def path(self) -> str:
        return self.value


# Routes accept every verb so that method checks happen in the handler.
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]

__all__ = ["ALL_METHODS", "Command"]
