"""FastAPI dependencies for authentication and request options."""

import logging

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from airisk.core.config import get_settings
from airisk.core.security import (
    TokenUser,
    TokenValidationError,
    get_user_from_claims,
    validate_access_token,
)
from airisk.core.structured_logging import log_json
from airisk.models.enums import Language
from airisk.services.auth_service import AuthService

logger = logging.getLogger(__name__)

# Missing credentials are reported by get_current_user with a 401
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> TokenUser:
    """Get current user from the Azure AD bearer token.

    Args:
        credentials: HTTP Bearer credentials from request

    Returns:
        TokenUser built from the token claims

    Raises:
        HTTPException: 401 if the token is missing, malformed, expired or
            lacks a user identifier
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No access token provided",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = validate_access_token(credentials.credentials)
    except TokenValidationError as e:
        log_json(logger, logging.INFO, "auth_token_rejected", reason=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    return get_user_from_claims(payload)


def get_language(
    lang: str | None = Query(None, description="Presentation language (en, de)"),
) -> Language:
    """Resolve the ``lang`` query parameter, defaulting to English."""
    return Language.resolve(lang)


def get_auth_service() -> AuthService:
    """Get the Azure AD auth service for the current settings."""
    return AuthService(get_settings())
