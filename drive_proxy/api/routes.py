"""
FastAPI routes for the OAuth and Drive upload proxy.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Annotated, Any, Callable

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import ValidationError
from starlette.datastructures import UploadFile

from drive_proxy.api.commands import ALL_METHODS, Command
from drive_proxy.api.pages import render_callback_page
from drive_proxy.core.errors import BadRequestError, MethodNotAllowedError
from drive_proxy.dependencies import (
    get_drive_upload_service,
    get_google_oauth_client,
    get_token_store,
)
from drive_proxy.models.oauth import TokenSet
from drive_proxy.schemas import (
    AuthUrlResponse,
    DriveUploadResult,
    TokenExchangeRequest,
    TokenExchangeResponse,
)
from drive_proxy.services.oauth_callback import OAuthCallbackView

router = APIRouter()
logger = logging.getLogger(__name__)


def _require_method(request: Request, method: str) -> None:
    if request.method != method:
        raise MethodNotAllowedError()


async def _read_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError as exc:
        raise BadRequestError("Request body must be valid JSON.") from exc


def _parse_token_set(raw: str) -> TokenSet:
    try:
        return TokenSet.model_validate_json(raw)
    except ValidationError as exc:
        raise BadRequestError(
            "tokens must be a JSON object containing an access_token."
        ) from exc



async def healthcheck() -> dict:
    """Simple health endpoint for monitoring."""
    return {"status": "ok"}


async def get_auth_url(
    oauth_client: Annotated[Any, Depends(get_google_oauth_client)],
) -> AuthUrlResponse:
    """Return the Google consent-screen URL for this client."""
    return AuthUrlResponse(authUrl=oauth_client.build_authorization_url())


async def get_tokens(
    request: Request,
    oauth_client: Annotated[Any, Depends(get_google_oauth_client)],
) -> TokenExchangeResponse:
    """Exchange an authorization code and relay Google's token payload."""
    _require_method(request, "POST")
    payload = await _read_json(request)
    try:
        body = TokenExchangeRequest.model_validate(payload)
    except ValidationError as exc:
        raise BadRequestError("Request body must be a JSON object.") from exc

    if not body.code:
        raise BadRequestError("No authorization code provided.")

    tokens = await oauth_client.exchange_authorization_code(body.code)
    return TokenExchangeResponse(tokens=tokens)


async def upload_to_drive(
    request: Request,
    upload_service: Annotated[Any, Depends(get_drive_upload_service)],
) -> DriveUploadResult:
    """Create a public Drive file from the uploaded file and return its link."""
    _require_method(request, "POST")
    form = await request.form()
    upload = form.get("file")
    tokens_raw = form.get("tokens")

    if not isinstance(upload, UploadFile) or not isinstance(tokens_raw, str) or not tokens_raw:
        raise BadRequestError("Missing required data: file and tokens.")

    tokens = _parse_token_set(tokens_raw)
    content = await upload.read()
    return await upload_service.upload(
        tokens=tokens,
        file_name=upload.filename or "upload",
        content=content,
        content_type=upload.content_type,
    )


async def oauth2_callback(
    request: Request,
    oauth_client: Annotated[Any, Depends(get_google_oauth_client)],
    token_store: Annotated[Any, Depends(get_token_store)],
) -> HTMLResponse:
    """Render the OAuth redirect target and persist the resulting tokens."""
    _require_method(request, "GET")
    view = OAuthCallbackView(
        fetch_tokens=oauth_client.exchange_authorization_code,
        store=token_store,
    )
    task = view.start(str(request.url))
    if task is not None:
        await task
    logger.info("OAuth callback finished in state %s", view.state.value)
    return HTMLResponse(render_callback_page(view))


async def not_found(request: Request) -> JSONResponse:
    logger.info("No handler for %s %s", request.method, request.url.path)
    return JSONResponse(status_code=HTTPStatus.NOT_FOUND, content={"error": "Not Found"})


COMMAND_HANDLERS: dict[Command, tuple[Callable[..., Any], dict[str, Any]]] = {
    Command.HEALTH: (healthcheck, {"methods": ["GET"]}),
    Command.AUTH_URL: (get_auth_url, {"response_model": AuthUrlResponse}),
    Command.TOKENS: (get_tokens, {"response_model": TokenExchangeResponse}),
    Command.UPLOAD: (upload_to_drive, {"response_model": DriveUploadResult}),
    Command.CALLBACK: (oauth2_callback, {"response_class": HTMLResponse}),
    Command.UNKNOWN: (not_found, {"include_in_schema": False}),
}

for _command, (_endpoint, _options) in COMMAND_HANDLERS.items():
    router.add_api_route(
        _command.path,
        _endpoint,
        name=_command.name.lower(),
        **{"methods": ALL_METHODS, **_options},
    )
