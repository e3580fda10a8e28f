"""Bearer token checks and claim extraction for Azure AD access tokens.

Tokens are issued by Azure AD. This module checks their shape and expiry and
reads the user claims; it does not verify signatures.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

import jwt
from jwt import exceptions as jwt_exceptions

# Identity claims are stored in String(255) columns
MAX_CLAIM_LENGTH = 255


class TokenValidationError(ValueError):
    """Raised when a bearer token is malformed, expired or lacks a subject."""

    pass


@dataclass(frozen=True)
class TokenUser:
    """Identity of the caller as carried in the access token."""

    user_id: str
    email: str | None = None
    name: str | None = None


def decode_token(token: str) -> dict:
    """Decode a JWT payload without signature verification.

    Args:
        token: Encoded JWT string

    Returns:
        Decoded payload

    Raises:
        TokenValidationError: If the token is not a decodable three-part JWT
    """
    if token.count(".") != 2:
        raise TokenValidationError("Invalid token format")

    try:
        payload = jwt.decode(token, options={"verify_signature": False})
    except jwt_exceptions.PyJWTError as e:
        raise TokenValidationError("Invalid token format") from e

    if not isinstance(payload, dict):
        raise TokenValidationError("Invalid token payload")
    return payload


def validate_access_token(token: str, now: datetime | None = None) -> dict:
    """Check a bearer token's shape, expiry and subject.

    Requirements:
    - Three dot-separated segments with a JSON payload
    - ``exp`` claim present and in the future
    - ``oid`` or ``sub`` claim present

    Args:
        token: Encoded JWT string
        now: Reference time (defaults to current UTC time)

    Returns:
        Decoded payload

    Raises:
        TokenValidationError: If any requirement is not met
    """
    payload = decode_token(token)

    exp = payload.get("exp")
    if isinstance(exp, bool) or not isinstance(exp, int | float):
        raise TokenValidationError("Invalid or expired access token")
    now = now or datetime.now(UTC)
    if exp <= now.timestamp():
        raise TokenValidationError("Invalid or expired access token")

    if _string_claim(payload, "oid", "sub") is None:
        raise TokenValidationError("Token missing user identifier")

    return payload


def _string_claim(payload: dict, *names: str) -> str | None:
    """First claim among ``names`` that is a non-empty string of storable length."""
    for name in names:
        value = payload.get(name)
        if isinstance(value, str) and value.strip() and len(value) <= MAX_CLAIM_LENGTH:
            return value
    return None


def get_user_from_claims(payload: dict) -> TokenUser:
    """Build the caller identity from token claims.

    The Azure AD object ID (``oid``) is preferred over ``sub`` because it is
    stable across applications in the tenant. Claims that are not strings or
    are longer than ``MAX_CLAIM_LENGTH`` are skipped.

    Raises:
        TokenValidationError: If neither ``oid`` nor ``sub`` is usable
    """
    user_id = _string_claim(payload, "oid", "sub")
    if user_id is None:
        raise TokenValidationError("Token missing user identifier")

    return TokenUser(
        user_id=user_id,
        email=_string_claim(payload, "email", "preferred_username", "upn"),
        name=_string_claim(payload, "name"),
    )
