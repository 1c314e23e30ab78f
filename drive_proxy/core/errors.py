"""Error taxonomy shared by every request handler."""

from __future__ import annotations

from http import HTTPStatus


class ProxyError(Exception):
    """Base error carrying the HTTP status it is reported with."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MethodNotAllowedError(ProxyError):
    """Raised when a handler is invoked with the wrong HTTP verb."""

    status_code = HTTPStatus.METHOD_NOT_ALLOWED

    def __init__(self, message: str = "Method Not Allowed") -> None:
        super().__init__(message)


class BadRequestError(ProxyError):
    """Raised when a required request field is missing or malformed."""

    status_code = HTTPStatus.BAD_REQUEST


class UpstreamError(ProxyError):
    """Raised for any failure talking to Google, network or HTTP status alike."""


class ConfigurationError(ProxyError):
    """Raised when OAuth client credentials are not configured."""


__all__ = [
    "BadRequestError",
    "ConfigurationError",
    "MethodNotAllowedError",
    "ProxyError",
    "UpstreamError",
]
