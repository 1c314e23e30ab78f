"""CORS handling and last-resort error conversion applied to every response."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Awaitable, Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS, PUT, DELETE",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Requested-With",
    "Access-Control-Max-Age": "86400",
}


async def cors_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Answer preflights before routing and decorate every other response."""
    if request.method == "OPTIONS":
        return Response(status_code=HTTPStatus.NO_CONTENT, headers=CORS_HEADERS)

    try:
        response = await call_next(request)
    except Exception as exc:
        logger.exception("Unhandled error serving %s %s", request.method, request.url.path)
        response = JSONResponse(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR, content={"error": str(exc)}
        )
    response.headers.update(CORS_HEADERS)
    return response


__all__ = ["CORS_HEADERS", "cors_middleware"]
