"""Configuration settings using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str

    environment: Literal["development", "production"] = "development"
    api_docs_enabled: bool | None = None
    service_name: str = "AI Risk Assessment API"

    # CORS
    cors_allow_origins: list[str] = ["http://localhost:8080", "http://127.0.0.1:8080"]
    cors_allow_methods: list[str] = ["GET", "POST", "DELETE", "OPTIONS"]
    cors_allow_headers: list[str] = [
        "Accept",
        "Authorization",
        "Content-Type",
        "X-Request-ID",
        "X-Metrics-Token",
    ]
    cors_allow_credentials: bool = True

    # Rate limiting on /api/ (production-only safeguard)
    rate_limit_api_per_window: int = 100
    rate_limit_window_minutes: int = 15

    # Prometheus scrape token (required to expose /api/metrics in production)
    metrics_token: str | None = None

    @field_validator(
        "cors_allow_origins",
        "cors_allow_methods",
        "cors_allow_headers",
        mode="before",
    )
    @classmethod
    def _parse_csv_lists(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    # Azure AD (Microsoft identity platform)
    azure_ad_tenant_id: str | None = None
    azure_ad_client_id: str | None = None
    azure_ad_client_secret: str | None = None
    azure_ad_redirect_uri: str | None = None
    azure_ad_authority_host: str = "https://login.microsoftonline.com"
    azure_ad_scopes: list[str] = ["user.read", "openid", "profile", "email"]
    azure_ad_timeout_seconds: float = 10.0

    @field_validator("azure_ad_scopes", mode="before")
    @classmethod
    def _parse_scopes(cls, v):
        if isinstance(v, str):
            return [item for item in v.replace(",", " ").split() if item]
        return v

    @property
    def azure_ad_configured(self) -> bool:
        return all(
            (
                self.azure_ad_tenant_id,
                self.azure_ad_client_id,
                self.azure_ad_client_secret,
                self.azure_ad_redirect_uri,
            )
        )

    @model_validator(mode="after")
    def _validate_production_settings(self) -> Settings:
        if self.environment != "production":
            return self

        if not self.azure_ad_configured:
            raise ValueError(
                "AZURE_AD_TENANT_ID/AZURE_AD_CLIENT_ID/AZURE_AD_CLIENT_SECRET/"
                "AZURE_AD_REDIRECT_URI must be set in production"
            )

        if any(x == "*" for x in self.cors_allow_origins):
            raise ValueError("CORS_ALLOW_ORIGINS cannot contain '*' in production")
        if any(x == "*" for x in self.cors_allow_methods):
            raise ValueError("CORS_ALLOW_METHODS cannot contain '*' in production")
        if any(x == "*" for x in self.cors_allow_headers):
            raise ValueError("CORS_ALLOW_HEADERS cannot contain '*' in production")

        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
