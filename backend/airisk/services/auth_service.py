"""Authentication service for the Azure AD authorization-code flow."""

import logging
from datetime import UTC, datetime, timedelta
from urllib.parse import urlencode

import httpx
from fastapi import HTTPException, status

from airisk.core.config import Settings
from airisk.core.security import TokenValidationError, decode_token, get_user_from_claims
from airisk.core.structured_logging import log_json
from airisk.schemas.auth import TokenExchangeResponse, UserInfo

logger = logging.getLogger(__name__)


class AuthService:
    """Service wrapping the Microsoft identity platform endpoints.

    Sign-in happens at Azure AD; this service only builds the redirect URLs
    and exchanges the authorization code for tokens.
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        """Initialize auth service.

        Args:
            settings: Application settings with Azure AD configuration
            transport: Optional httpx transport (used to stub Azure AD in tests)
        """
        self.settings = settings
        self.transport = transport

    @property
    def _authority(self) -> str:
        host = self.settings.azure_ad_authority_host.rstrip("/")
        return f"{host}/{self.settings.azure_ad_tenant_id}/oauth2/v2.0"

    def _require_configured(self) -> None:
        if not self.settings.azure_ad_configured:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Authentication is not configured",
            )

    def get_authorization_url(self, state: str = "") -> str:
        """Build the Azure AD login URL the browser is redirected to.

        Args:
            state: Opaque value echoed back to the callback

        Returns:
            Authorization endpoint URL with query parameters

        Raises:
            HTTPException: 500 if Azure AD is not configured
        """
        self._require_configured()
        params = {
            "client_id": self.settings.azure_ad_client_id,
            "response_type": "code",
            "redirect_uri": self.settings.azure_ad_redirect_uri,
            "response_mode": "query",
            "scope": " ".join(self.settings.azure_ad_scopes),
        }
        if state:
            params["state"] = state
        return f"{self._authority}/authorize?{urlencode(params)}"

    def get_logout_url(self) -> str:
        """Get the Azure AD sign-out URL."""
        host = self.settings.azure_ad_authority_host.rstrip("/")
        tenant = self.settings.azure_ad_tenant_id or "common"
        return f"{host}/{tenant}/oauth2/v2.0/logout"

    async def exchange_code(self, code: str) -> TokenExchangeResponse:
        """Exchange an authorization code for tokens.

        Args:
            code: Authorization code from the callback query string

        Returns:
            TokenExchangeResponse with access token, ID token and account claims

        Raises:
            HTTPException: 500 if Azure AD is not configured
            HTTPException: 502 if Azure AD rejects the code or is unreachable
        """
        self._require_configured()

        data = {
            "client_id": self.settings.azure_ad_client_id,
            "client_secret": self.settings.azure_ad_client_secret,
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": self.settings.azure_ad_redirect_uri,
            "scope": " ".join(self.settings.azure_ad_scopes),
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.azure_ad_timeout_seconds,
                transport=self.transport,
            ) as client:
                response = await client.post(f"{self._authority}/token", data=data)
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            log_json(
                logger,
                logging.WARNING,
                "azure_token_exchange_failed",
                error=str(e),
                exception=e.__class__.__name__,
            )
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Authentication failed",
            ) from e

        access_token = payload.get("access_token")
        if not access_token:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Authentication failed",
            )

        expires_on = None
        if isinstance(payload.get("expires_in"), int | float):
            expires_on = datetime.now(UTC) + timedelta(seconds=payload["expires_in"])

        return TokenExchangeResponse(
            access_token=access_token,
            id_token=payload.get("id_token"),
            token_type=payload.get("token_type", "Bearer"),
            expires_on=expires_on,
            account=self._account_from_id_token(payload.get("id_token")),
        )

    @staticmethod
    def _account_from_id_token(id_token: str | None) -> UserInfo | None:
        if not id_token:
            return None
        try:
            user = get_user_from_claims(decode_token(id_token))
        except TokenValidationError:
            return None
        return UserInfo(user_id=user.user_id, email=user.email, name=user.name)
