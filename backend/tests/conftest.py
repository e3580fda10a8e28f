"""Pytest fixtures for testing."""

import os
from collections.abc import AsyncGenerator
from datetime import UTC, datetime, timedelta

import jwt
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from airisk.core.config import Settings
from airisk.core.database import build_engine, get_db
from airisk.main import app
from airisk.models.assessment import Assessment
from airisk.models.base import Base
from airisk.models.enums import RiskTier

# In-memory SQLite by default; point at PostgreSQL with TEST_DATABASE_URL
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

# Tokens are never signature-checked by the API; any key works
TEST_SIGNING_KEY = "a-long-test-secret-key-for-hs256-signing!!"

TEST_USER_ID = "00000000-0000-0000-0000-0000000000a1"
OTHER_USER_ID = "00000000-0000-0000-0000-0000000000b2"


def make_token(
    oid: str | None = TEST_USER_ID,
    expires_in: int = 3600,
    **claims,
) -> str:
    """Mint an Azure AD shaped access token for tests."""
    payload = {
        "exp": int((datetime.now(UTC) + timedelta(seconds=expires_in)).timestamp()),
        "iss": "https://login.microsoftonline.com/test-tenant/v2.0",
        **claims,
    }
    if oid is not None:
        payload["oid"] = oid
    return jwt.encode(payload, TEST_SIGNING_KEY, algorithm="HS256")


def make_azure_settings(**overrides) -> Settings:
    """Settings with a complete Azure AD configuration."""
    values = {
        "database_url": TEST_DATABASE_URL,
        "azure_ad_tenant_id": "test-tenant",
        "azure_ad_client_id": "test-client",
        "azure_ad_client_secret": "test-secret",
        "azure_ad_redirect_uri": "http://localhost:8080/auth/callback",
    }
    values.update(overrides)
    return Settings(**values)


def valid_answers(**overrides) -> dict:
    """A complete questionnaire submission for an approved, low-impact use."""
    answers = {
        "project_type": "strategy",
        "ai_tool": "m365_copilot",
        "ai_use_cases": ["nlp_analysis"],
        "data_types": ["public_only"],
        "autonomy": "support_only",
        "impact": "internal_efficiency",
        "transparency": "high",
    }
    answers.update(overrides)
    return answers


def critical_answers(**overrides) -> dict:
    """A complete questionnaire submission for an unapproved, high-impact use."""
    return valid_answers(
        project_type="data_analytics",
        ai_tool="chatgpt",
        ai_use_cases=["decision_support"],
        data_types=["personal_data"],
        autonomy="automated",
        impact="critical_operations",
        transparency="low",
        **overrides,
    )


@pytest_asyncio.fixture(scope="function")
async def db() -> AsyncGenerator[AsyncSession, None]:
    """Create test database session.

    Creates all tables before each test and drops them after.
    """
    engine = build_engine(TEST_DATABASE_URL)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database dependency override.

    Args:
        db: Test database session

    Yields:
        AsyncClient configured for testing
    """

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture()
def auth_headers() -> dict[str, str]:
    token = make_token(
        oid=TEST_USER_ID,
        preferred_username="alex@example.com",
        name="Alex Example",
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def other_auth_headers() -> dict[str, str]:
    token = make_token(oid=OTHER_USER_ID, email="sam@example.com", name="Sam Other")
    return {"Authorization": f"Bearer {token}"}


async def create_assessment_record(
    db: AsyncSession,
    user_id: str = TEST_USER_ID,
    created_at: datetime | None = None,
    **overrides,
) -> Assessment:
    """Insert an assessment row directly, bypassing scoring."""
    values = {
        "user_id": user_id,
        "user_email": "alex@example.com",
        "user_name": "Alex Example",
        "project_type": "strategy",
        "ai_tool": "m365_copilot",
        "ai_use_cases": ["nlp_analysis"],
        "data_types": ["public_only"],
        "autonomy": "support_only",
        "impact": "internal_efficiency",
        "transparency": "high",
        "risk_score": 2,
        "risk_level": RiskTier.MINIMAL,
        "measures": [
            "tool_pre_approved",
            "documentation_governance",
            "stakeholder_communication",
        ],
    }
    values.update(overrides)
    if created_at is not None:
        values["created_at"] = created_at
        values["updated_at"] = created_at

    assessment = Assessment(**values)
    db.add(assessment)
    await db.commit()
    await db.refresh(assessment)
    return assessment
