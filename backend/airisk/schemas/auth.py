"""Pydantic schemas for authentication endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field


class UserInfo(BaseModel):
    """Response schema for the current user."""

    user_id: str = Field(..., description="Azure AD object ID or subject")
    email: str | None = Field(None, description="User email or UPN")
    name: str | None = Field(None, description="Display name")


class TokenExchangeResponse(BaseModel):
    """Response schema for the Azure AD callback.

    Returned to the frontend, which stores the access token and sends it as
    a bearer token on API calls.
    """

    access_token: str = Field(..., description="Azure AD access token")
    id_token: str | None = Field(None, description="OpenID Connect ID token")
    token_type: str = Field(default="Bearer", description="Token type")
    expires_on: datetime | None = Field(None, description="Access token expiry")
    account: UserInfo | None = Field(None, description="User claims from the ID token")


class MeResponse(BaseModel):
    """Response schema for GET /auth/me."""

    user: UserInfo


class LogoutResponse(BaseModel):
    """Response schema for the logout endpoint.

    Sign-out is client-side: the frontend discards its token and may redirect
    to ``logout_url`` to end the Azure AD session.
    """

    message: str = Field(default="Logged out successfully")
    logout_url: str
