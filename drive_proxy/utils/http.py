"""HTTP utilities mapping provider failures onto ``UpstreamError``."""

from __future__ import annotations

from typing import Any

import httpx

from drive_proxy.core.errors import UpstreamError


def raise_for_upstream(response: httpx.Response, *, action: str) -> None:
    """Raise ``UpstreamError`` for any non-2xx provider response."""
    if response.is_success:
        return
    raise UpstreamError(
        f"{action} failed with status {response.status_code}: {response.text}"
    )


async def send_request(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    action: str,
    **kwargs: Any,
) -> httpx.Response:
    """Issue one request without retries; network errors become ``UpstreamError``."""
    try:
        response = await client.request(method, url, **kwargs)
    except httpx.HTTPError as exc:
        raise UpstreamError(f"{action} failed: {exc}") from exc
    raise_for_upstream(response, action=action)
    return response


def parse_json(response: httpx.Response, *, action: str) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise UpstreamError(f"{action} returned an invalid JSON body.") from exc


__all__ = ["parse_json", "raise_for_upstream", "send_request"]
