"""Contract tests for authentication endpoints."""
import pytest
from httpx import AsyncClient

from airisk.api.deps import get_auth_service
from airisk.main import app
from airisk.services.auth_service import AuthService
from tests.conftest import make_azure_settings


@pytest.mark.asyncio
async def test_logout_returns_message_and_url(client: AsyncClient):
    """GET /auth/logout returns 200 with message and logout_url."""
    app.dependency_overrides[get_auth_service] = lambda: AuthService(make_azure_settings())

    response = await client.get("/auth/logout")

    assert response.status_code == 200
    assert set(response.json()) == {"message", "logout_url"}


@pytest.mark.asyncio
async def test_me_returns_user(client: AsyncClient, auth_headers: dict):
    """GET /auth/me returns 200 with the user claims."""
    response = await client.get("/auth/me", headers=auth_headers)

    assert response.status_code == 200
    assert set(response.json()["user"]) == {"user_id", "email", "name"}


@pytest.mark.asyncio
async def test_me_without_token_returns_401(client: AsyncClient):
    """GET /auth/me returns 401 without a bearer token."""
    response = await client.get("/auth/me")

    assert response.status_code == 401
    assert response.json() == {"detail": "No access token provided"}
