"""Authentication endpoints for the Azure AD login flow and current user."""

import secrets

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import RedirectResponse

from airisk.api.deps import get_auth_service, get_current_user
from airisk.core.security import TokenUser
from airisk.schemas.auth import LogoutResponse, MeResponse, TokenExchangeResponse, UserInfo
from airisk.services.auth_service import AuthService

router = APIRouter()


@router.get("/login", status_code=status.HTTP_307_TEMPORARY_REDIRECT)
async def login(
    state: str | None = Query(None, description="Opaque value echoed to the callback"),
    auth_service: AuthService = Depends(get_auth_service),
) -> RedirectResponse:
    """Redirect the browser to the Azure AD sign-in page.

    Raises:
        HTTPException: 500 if Azure AD is not configured
    """
    url = auth_service.get_authorization_url(state=state or secrets.token_urlsafe(16))
    return RedirectResponse(url=url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)


@router.get("/callback", response_model=TokenExchangeResponse)
async def callback(
    code: str | None = Query(None, description="Authorization code from Azure AD"),
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenExchangeResponse:
    """Exchange the authorization code returned by Azure AD for tokens.

    Raises:
        HTTPException: 400 if no code was provided
        HTTPException: 502 if the exchange fails
    """
    if not code:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Authorization code not provided",
        )
    return await auth_service.exchange_code(code)


@router.get("/logout", response_model=LogoutResponse)
async def logout(auth_service: AuthService = Depends(get_auth_service)) -> LogoutResponse:
    """Logout endpoint.

    Tokens are held by the client, so there is nothing to revoke here.
    """
    return LogoutResponse(logout_url=auth_service.get_logout_url())


@router.get("/me", response_model=MeResponse)
async def me(current_user: TokenUser = Depends(get_current_user)) -> MeResponse:
    """Get the user identified by the bearer token."""
    return MeResponse(
        user=UserInfo(
            user_id=current_user.user_id,
            email=current_user.email,
            name=current_user.name,
        )
    )
