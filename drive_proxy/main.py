"""
FastAPI application entrypoint for the OAuth and Drive upload proxy.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from drive_proxy.api.middleware import cors_middleware
from drive_proxy.api.routes import router as api_router
from drive_proxy.core.config import get_settings
from drive_proxy.core.errors import ProxyError
from drive_proxy.core.logging import configure_logging


async def _handle_proxy_error(request: Request, exc: ProxyError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Report framework-raised errors (bad multipart, unrouted verbs) as ``{error}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=exc.headers,
    )


def create_app() -> FastAPI:
    """Factory for the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Drive Upload Proxy",
        version="0.1.0",
        description="Google OAuth token exchange and Drive upload proxy.",
    )
    app.middleware("http")(cors_middleware)
    app.add_exception_handler(ProxyError, _handle_proxy_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
    app.include_router(api_router)
    return app


app = create_app()

__all__ = ["app", "create_app"]
