try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

import httpx
import pytest

from drive_proxy.api.commands import Command
from drive_proxy.api.routes import COMMAND_HANDLERS, get_tokens, not_found
from drive_proxy.api.middleware import CORS_HEADERS
from drive_proxy.main import app

EXPECTED_CORS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, POST, OPTIONS, PUT, DELETE",
    "access-control-allow-headers": "Content-Type, Authorization, X-Requested-With",
    "access-control-max-age": "86400",
}


class ExplodingOAuthClient:
    def build_authorization_url(self) -> str:
        raise AssertionError("route logic must not run for preflight requests")

    async def exchange_authorization_code(self, code: str) -> dict:
        raise AssertionError("route logic must not run for preflight requests")


class BrokenOAuthClient:
    def build_authorization_url(self) -> str:
        raise RuntimeError("unexpected failure")


@pytest.fixture()
def override_oauth():
    from drive_proxy import dependencies

    def _install(oauth_client) -> None:
        app.dependency_overrides[dependencies.get_google_oauth_client] = (
            lambda: oauth_client
        )

    yield _install
    app.dependency_overrides.clear()


@pytest.fixture()
async def client():
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://testserver"
    ) as test_client:
        yield test_client


def _cors_subset(response: httpx.Response) -> dict:
    return {key: response.headers.get(key) for key in EXPECTED_CORS}


@pytest.mark.anyio
@pytest.mark.parametrize(
    "path", ["/getAuthUrl", "/getTokens", "/uploadToDrive", "/not/a/route"]
)
async def test_preflight_short_circuits_routing(client, override_oauth, path):
    override_oauth(ExplodingOAuthClient())

    response = await client.options(
        path,
        headers={
            "origin": "http://localhost:5173",
            "access-control-request-method": "POST",
        },
    )

    assert response.status_code == 204
    assert response.content == b""
    assert _cors_subset(response) == EXPECTED_CORS


@pytest.mark.anyio
async def test_unknown_path_returns_not_found_with_cors(client):
    response = await client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
    assert _cors_subset(response) == EXPECTED_CORS


@pytest.mark.anyio
async def test_health_response_carries_cors_headers(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert _cors_subset(response) == EXPECTED_CORS


@pytest.mark.anyio
async def test_unexpected_errors_become_json_server_errors(client, override_oauth):
    override_oauth(BrokenOAuthClient())

    response = await client.get("/getAuthUrl")

    assert response.status_code == 500
    assert response.json() == {"error": "unexpected failure"}
    assert _cors_subset(response) == EXPECTED_CORS


def test_cors_header_table_matches_contract() -> None:
    assert {key.lower(): value for key, value in CORS_HEADERS.items()} == EXPECTED_CORS


def test_every_command_is_registered_with_catch_all_last() -> None:
    assert list(COMMAND_HANDLERS) == list(Command)
    assert COMMAND_HANDLERS[Command.TOKENS][0] is get_tokens
    assert COMMAND_HANDLERS[Command.UNKNOWN][0] is not_found

    paths = [route.path for route in app.routes if route.path in {c.path for c in Command}]
    assert paths == [command.path for command in Command]


@pytest.mark.anyio
async def test_known_path_dispatches_to_its_command(client):
    response = await client.get("/getTokens")

    # The tokens handler answers, not the 404 fallback.
    assert response.status_code == 405
    assert response.json() == {"error": "Method Not Allowed"}


@pytest.mark.anyio
async def test_unsupported_verb_reports_error_envelope(client):
    response = await client.request("TRACE", "/getTokens")

    assert response.status_code == 405
    assert response.json() == {"error": "Method Not Allowed"}
    assert _cors_subset(response) == EXPECTED_CORS
