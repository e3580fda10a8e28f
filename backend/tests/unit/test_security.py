"""Unit tests for security utilities.

Tests bearer token shape checks and claim extraction.
"""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from airisk.core.security import (
    MAX_CLAIM_LENGTH,
    TokenUser,
    TokenValidationError,
    decode_token,
    get_user_from_claims,
    validate_access_token,
)
from tests.conftest import TEST_SIGNING_KEY, make_token


class TestDecodeToken:
    """Unit tests for decode_token."""

    def test_decode_returns_payload(self):
        token = make_token(oid="abc")

        payload = decode_token(token)

        assert payload["oid"] == "abc"

    def test_signature_is_not_checked(self):
        token = jwt.encode(
            {"sub": "user", "exp": 4102444800},
            "some-other-key-that-is-long-enough-for-hs256",
            algorithm="HS256",
        )

        assert decode_token(token)["sub"] == "user"

    @pytest.mark.parametrize("token", ["", "abc", "a.b", "a.b.c.d"])
    def test_wrong_segment_count(self, token):
        with pytest.raises(TokenValidationError, match="Invalid token format"):
            decode_token(token)

    def test_undecodable_payload(self):
        with pytest.raises(TokenValidationError, match="Invalid token format"):
            decode_token("not.a.jwt")


class TestValidateAccessToken:
    """Unit tests for validate_access_token."""

    def test_valid_token(self):
        payload = validate_access_token(make_token(oid="abc"))

        assert payload["oid"] == "abc"

    def test_sub_is_enough(self):
        payload = validate_access_token(make_token(oid=None, sub="subject-1"))

        assert payload["sub"] == "subject-1"

    def test_expired_token(self):
        with pytest.raises(TokenValidationError, match="Invalid or expired access token"):
            validate_access_token(make_token(expires_in=-60))

    def test_expiry_is_checked_against_reference_time(self):
        token = make_token(expires_in=60)
        later = datetime.now(UTC) + timedelta(minutes=5)

        with pytest.raises(TokenValidationError):
            validate_access_token(token, now=later)

    def test_missing_exp(self):
        token = jwt.encode({"oid": "abc"}, TEST_SIGNING_KEY, algorithm="HS256")

        with pytest.raises(TokenValidationError, match="Invalid or expired access token"):
            validate_access_token(token)

    def test_missing_user_identifier(self):
        with pytest.raises(TokenValidationError, match="Token missing user identifier"):
            validate_access_token(make_token(oid=None))

    def test_non_string_user_identifier(self):
        with pytest.raises(TokenValidationError, match="Token missing user identifier"):
            validate_access_token(make_token(oid=None, sub=12345))


class TestUserFromClaims:
    """Unit tests for get_user_from_claims."""

    def test_prefers_oid_over_sub(self):
        user = get_user_from_claims({"oid": "object-id", "sub": "subject"})

        assert user.user_id == "object-id"

    def test_email_fallbacks(self):
        assert get_user_from_claims({"sub": "s", "email": "a@x.com"}).email == "a@x.com"
        assert (
            get_user_from_claims({"sub": "s", "preferred_username": "b@x.com"}).email
            == "b@x.com"
        )
        assert get_user_from_claims({"sub": "s", "upn": "c@x.com"}).email == "c@x.com"
        assert get_user_from_claims({"sub": "s"}).email is None

    def test_full_claims(self):
        user = get_user_from_claims(
            {"oid": "o", "preferred_username": "alex@example.com", "name": "Alex"}
        )

        assert user == TokenUser(user_id="o", email="alex@example.com", name="Alex")

    def test_non_string_claims_fall_back(self):
        user = get_user_from_claims(
            {"oid": "o", "email": 12345, "preferred_username": "b@x.com", "name": ["Alex"]}
        )

        assert user == TokenUser(user_id="o", email="b@x.com", name=None)

    def test_oversized_claims_are_dropped(self):
        user = get_user_from_claims(
            {"oid": "o", "email": "a" * (MAX_CLAIM_LENGTH + 1) + "@x.com", "name": "n" * 300}
        )

        assert user.email is None
        assert user.name is None

    def test_claim_at_length_limit_is_kept(self):
        name = "n" * MAX_CLAIM_LENGTH

        assert get_user_from_claims({"oid": "o", "name": name}).name == name

    def test_unusable_oid_falls_back_to_sub(self):
        assert get_user_from_claims({"oid": 42, "sub": "subject"}).user_id == "subject"

    def test_no_usable_identifier(self):
        with pytest.raises(TokenValidationError, match="Token missing user identifier"):
            get_user_from_claims({"oid": 42, "sub": "s" * (MAX_CLAIM_LENGTH + 1)})
