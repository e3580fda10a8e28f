"""Unit tests for the Azure AD auth service.

Azure AD is stubbed with httpx.MockTransport.
"""

from urllib.parse import parse_qs, urlparse

import httpx
import pytest
from fastapi import HTTPException

from airisk.services.auth_service import AuthService
from tests.conftest import make_azure_settings, make_token


def _service(handler=None, **overrides) -> AuthService:
    transport = httpx.MockTransport(handler) if handler else None
    return AuthService(make_azure_settings(**overrides), transport=transport)


class TestAuthorizationUrl:
    """Unit tests for login and logout URLs."""

    def test_authorization_url(self):
        url = _service().get_authorization_url(state="xyz")

        parsed = urlparse(url)
        params = parse_qs(parsed.query)
        assert f"{parsed.scheme}://{parsed.netloc}{parsed.path}" == (
            "https://login.microsoftonline.com/test-tenant/oauth2/v2.0/authorize"
        )
        assert params["client_id"] == ["test-client"]
        assert params["response_type"] == ["code"]
        assert params["redirect_uri"] == ["http://localhost:8080/auth/callback"]
        assert params["response_mode"] == ["query"]
        assert params["scope"] == ["user.read openid profile email"]
        assert params["state"] == ["xyz"]

    def test_state_is_optional(self):
        url = _service().get_authorization_url()

        assert "state" not in parse_qs(urlparse(url).query)

    def test_not_configured(self):
        service = _service(azure_ad_tenant_id=None)

        with pytest.raises(HTTPException) as exc_info:
            service.get_authorization_url()

        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == "Authentication is not configured"

    def test_logout_url(self):
        assert _service().get_logout_url() == (
            "https://login.microsoftonline.com/test-tenant/oauth2/v2.0/logout"
        )
        assert _service(azure_ad_tenant_id=None).get_logout_url() == (
            "https://login.microsoftonline.com/common/oauth2/v2.0/logout"
        )


class TestExchangeCode:
    """Unit tests for the authorization code exchange."""

    @pytest.mark.asyncio
    async def test_exchange_success(self):
        seen = {}
        id_token = make_token(oid="object-1", preferred_username="alex@example.com", name="Alex")

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["form"] = parse_qs(request.content.decode())
            return httpx.Response(
                200,
                json={
                    "access_token": "access-123",
                    "id_token": id_token,
                    "token_type": "Bearer",
                    "expires_in": 3600,
                },
            )

        result = await _service(handler).exchange_code("the-code")

        assert seen["url"] == "https://login.microsoftonline.com/test-tenant/oauth2/v2.0/token"
        assert seen["form"]["grant_type"] == ["authorization_code"]
        assert seen["form"]["code"] == ["the-code"]
        assert seen["form"]["client_secret"] == ["test-secret"]
        assert result.access_token == "access-123"
        assert result.expires_on is not None
        assert result.account is not None
        assert result.account.user_id == "object-1"
        assert result.account.email == "alex@example.com"

    @pytest.mark.asyncio
    async def test_exchange_rejected_by_azure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"error": "invalid_grant"})

        with pytest.raises(HTTPException) as exc_info:
            await _service(handler).exchange_code("bad-code")

        assert exc_info.value.status_code == 502
        assert exc_info.value.detail == "Authentication failed"

    @pytest.mark.asyncio
    async def test_exchange_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(HTTPException) as exc_info:
            await _service(handler).exchange_code("code")

        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_exchange_without_access_token(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"token_type": "Bearer"})

        with pytest.raises(HTTPException) as exc_info:
            await _service(handler).exchange_code("code")

        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_exchange_with_unreadable_id_token(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"access_token": "a", "id_token": "garbage"})

        result = await _service(handler).exchange_code("code")

        assert result.access_token == "a"
        assert result.account is None
        assert result.expires_on is None

    @pytest.mark.asyncio
    async def test_exchange_with_unusable_id_token_subject(self):
        id_token = make_token(oid=12345, email="alex@example.com")

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"access_token": "a", "id_token": id_token})

        result = await _service(handler).exchange_code("code")

        assert result.access_token == "a"
        assert result.account is None
