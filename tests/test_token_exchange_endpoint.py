try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

from urllib.parse import parse_qs

import httpx
import pytest

from drive_proxy.clients import GoogleOAuthClient
from drive_proxy.main import app
from drive_proxy.models.oauth import OAuthConfig

pytestmark = pytest.mark.anyio

TOKEN_PATH = "/token"
GOOGLE_TOKENS = {
    "access_token": "ya29.access",
    "refresh_token": "1//refresh",
    "expires_in": 3599,
    "scope": "https://www.googleapis.com/auth/drive.file",
    "token_type": "Bearer",
}


def _config(**overrides) -> OAuthConfig:
    values = {
        "client_id": "client-123",
        "client_secret": "secret-456",
        "redirect_uri": "https://example.com/oauth2callback",
        "scopes": ("https://www.googleapis.com/auth/drive.file",),
    }
    values.update(overrides)
    return OAuthConfig(**values)


@pytest.fixture()
def install_client(fake_google):
    from drive_proxy import dependencies

    def _install(config: OAuthConfig | None = None) -> None:
        oauth_client = GoogleOAuthClient(
            config or _config(), transport=fake_google.transport
        )
        app.dependency_overrides[dependencies.get_google_oauth_client] = (
            lambda: oauth_client
        )

    _install()
    yield _install
    app.dependency_overrides.clear()


@pytest.fixture()
async def client(install_client):
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://testserver"
    ) as test_client:
        yield test_client


async def test_tokens_are_relayed_verbatim(client, fake_google):
    fake_google.on("POST", TOKEN_PATH, httpx.Response(200, json=GOOGLE_TOKENS))

    response = await client.post("/getTokens", json={"code": "4/auth-code"})

    assert response.status_code == 200
    assert response.json() == {"tokens": GOOGLE_TOKENS}

    [outbound] = fake_google.requests
    assert str(outbound.url) == "https://oauth2.googleapis.com/token"
    assert outbound.headers["content-type"] == "application/x-www-form-urlencoded"
    form = parse_qs(outbound.content.decode())
    assert form == {
        "code": ["4/auth-code"],
        "client_id": ["client-123"],
        "client_secret": ["secret-456"],
        "redirect_uri": ["https://example.com/oauth2callback"],
        "grant_type": ["authorization_code"],
    }


async def test_missing_code_is_rejected(client, fake_google):
    response = await client.post("/getTokens", json={})

    assert response.status_code == 400
    assert "error" in response.json()
    assert fake_google.requests == []


async def test_invalid_json_is_rejected(client, fake_google):
    response = await client.post(
        "/getTokens",
        content=b"code=abc",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert fake_google.requests == []


async def test_get_is_not_allowed(client):
    response = await client.get("/getTokens")

    assert response.status_code == 405


async def test_provider_rejection_surfaces_as_server_error(client, fake_google):
    fake_google.on(
        "POST",
        TOKEN_PATH,
        httpx.Response(400, json={"error": "invalid_grant"}),
    )

    response = await client.post("/getTokens", json={"code": "used-code"})

    assert response.status_code == 500
    assert "invalid_grant" in response.json()["error"]


async def test_network_failure_surfaces_as_server_error(client, fake_google):
    fake_google.on("POST", TOKEN_PATH, httpx.ConnectError("connection refused"))

    response = await client.post("/getTokens", json={"code": "4/auth-code"})

    assert response.status_code == 500
    assert "connection refused" in response.json()["error"]


async def test_unparsable_provider_body_surfaces_as_server_error(client, fake_google):
    fake_google.on("POST", TOKEN_PATH, httpx.Response(200, text="<html>"))

    response = await client.post("/getTokens", json={"code": "4/auth-code"})

    assert response.status_code == 500
    assert "error" in response.json()


async def test_missing_client_secret_reports_configuration_error(
    client, fake_google, install_client
):
    install_client(_config(client_secret=None))

    response = await client.post("/getTokens", json={"code": "4/auth-code"})

    assert response.status_code == 500
    assert "GOOGLE_CLIENT_SECRET" in response.json()["error"]
    assert fake_google.requests == []
