"""Unit tests for settings parsing and production validation."""

import pytest
from pydantic import ValidationError

from airisk.core.config import Settings
from airisk.core.database import async_database_url
from tests.conftest import make_azure_settings


def test_defaults():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")

    assert settings.environment == "development"
    assert settings.rate_limit_api_per_window == 100
    assert settings.rate_limit_window_minutes == 15
    assert settings.azure_ad_scopes == ["user.read", "openid", "profile", "email"]
    assert "http://localhost:8080" in settings.cors_allow_origins


def test_comma_separated_lists_are_parsed():
    settings = Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        cors_allow_origins="https://a.example.com, https://b.example.com",
        azure_ad_scopes="user.read openid",
    )

    assert settings.cors_allow_origins == ["https://a.example.com", "https://b.example.com"]
    assert settings.azure_ad_scopes == ["user.read", "openid"]


def test_azure_ad_configured():
    assert make_azure_settings().azure_ad_configured is True
    assert make_azure_settings(azure_ad_client_secret=None).azure_ad_configured is False


def test_production_requires_azure_ad():
    with pytest.raises(ValidationError, match="AZURE_AD_TENANT_ID"):
        Settings(database_url="postgresql://db/airisk", environment="production")


def test_production_rejects_wildcard_cors():
    with pytest.raises(ValidationError, match="CORS_ALLOW_ORIGINS"):
        make_azure_settings(environment="production", cors_allow_origins=["*"])


def test_production_with_complete_settings():
    settings = make_azure_settings(environment="production")

    assert settings.environment == "production"


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("postgres://u:p@db/airisk", "postgresql+asyncpg://u:p@db/airisk"),
        ("postgresql://u:p@db/airisk", "postgresql+asyncpg://u:p@db/airisk"),
        ("postgresql+asyncpg://u:p@db/airisk", "postgresql+asyncpg://u:p@db/airisk"),
        ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
    ],
)
def test_async_database_url(url, expected):
    assert async_database_url(url) == expected
