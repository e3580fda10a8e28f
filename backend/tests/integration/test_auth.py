"""Integration tests for the Azure AD login flow endpoints."""

from urllib.parse import parse_qs, urlparse

import httpx
import pytest
from httpx import AsyncClient

from airisk.api.deps import get_auth_service
from airisk.main import app
from airisk.services.auth_service import AuthService
from tests.conftest import TEST_USER_ID, make_azure_settings, make_token


def _use_auth_service(handler=None, **overrides) -> None:
    transport = httpx.MockTransport(handler) if handler else None
    service = AuthService(make_azure_settings(**overrides), transport=transport)
    app.dependency_overrides[get_auth_service] = lambda: service


@pytest.mark.asyncio
async def test_login_redirects_to_azure(client: AsyncClient):
    _use_auth_service()

    response = await client.get("/auth/login", follow_redirects=False)

    assert response.status_code == 307
    location = urlparse(response.headers["location"])
    assert location.netloc == "login.microsoftonline.com"
    assert location.path == "/test-tenant/oauth2/v2.0/authorize"
    params = parse_qs(location.query)
    assert params["response_type"] == ["code"]
    assert params["state"][0]


@pytest.mark.asyncio
async def test_login_passes_state_through(client: AsyncClient):
    _use_auth_service()

    response = await client.get("/auth/login?state=return-to-history", follow_redirects=False)

    params = parse_qs(urlparse(response.headers["location"]).query)
    assert params["state"] == ["return-to-history"]


@pytest.mark.asyncio
async def test_login_not_configured(client: AsyncClient):
    _use_auth_service(azure_ad_client_id=None)

    response = await client.get("/auth/login", follow_redirects=False)

    assert response.status_code == 500
    assert response.json()["detail"] == "Authentication is not configured"


@pytest.mark.asyncio
async def test_callback_without_code(client: AsyncClient):
    _use_auth_service()

    response = await client.get("/auth/callback")

    assert response.status_code == 400
    assert response.json()["detail"] == "Authorization code not provided"


@pytest.mark.asyncio
async def test_callback_exchanges_code(client: AsyncClient):
    id_token = make_token(oid=TEST_USER_ID, preferred_username="alex@example.com", name="Alex")

    def handler(request: httpx.Request) -> httpx.Response:
        assert parse_qs(request.content.decode())["code"] == ["abc"]
        return httpx.Response(
            200,
            json={"access_token": "access-xyz", "id_token": id_token, "expires_in": 3599},
        )

    _use_auth_service(handler)

    response = await client.get("/auth/callback?code=abc")

    assert response.status_code == 200
    data = response.json()
    assert data["access_token"] == "access-xyz"
    assert data["token_type"] == "Bearer"
    assert data["account"] == {
        "user_id": TEST_USER_ID,
        "email": "alex@example.com",
        "name": "Alex",
    }


@pytest.mark.asyncio
async def test_callback_upstream_failure(client: AsyncClient):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": "invalid_client"})

    _use_auth_service(handler)

    response = await client.get("/auth/callback?code=abc")

    assert response.status_code == 502
    assert response.json()["detail"] == "Authentication failed"


@pytest.mark.asyncio
async def test_logout(client: AsyncClient):
    _use_auth_service()

    response = await client.get("/auth/logout")

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Logged out successfully"
    assert data["logout_url"].endswith("/test-tenant/oauth2/v2.0/logout")


@pytest.mark.asyncio
async def test_me(client: AsyncClient, auth_headers: dict):
    response = await client.get("/auth/me", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {
        "user": {
            "user_id": TEST_USER_ID,
            "email": "alex@example.com",
            "name": "Alex Example",
        }
    }


@pytest.mark.asyncio
async def test_me_without_user_identifier(client: AsyncClient):
    token = make_token(oid=None)

    response = await client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Token missing user identifier"


@pytest.mark.asyncio
async def test_me_skips_non_string_claims(client: AsyncClient):
    token = make_token(email=12345, preferred_username="alex@example.com", name={"first": "A"})

    response = await client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["user"] == {
        "user_id": TEST_USER_ID,
        "email": "alex@example.com",
        "name": None,
    }


@pytest.mark.asyncio
async def test_me_with_non_string_user_identifier(client: AsyncClient):
    token = make_token(oid=12345)

    response = await client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Token missing user identifier"
