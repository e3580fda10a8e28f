"""FastAPI application entry point."""

from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from airisk.api.middleware import (
    RateLimitMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from airisk.api.routes import assessments, auth, metrics, risk
from airisk.core.config import get_settings
from airisk.core.structured_logging import configure_logging

configure_logging()

settings = get_settings()
docs_enabled = settings.api_docs_enabled
if docs_enabled is None:
    docs_enabled = settings.environment != "production"

app = FastAPI(
    title=settings.service_name,
    description="Questionnaire-based risk scoring and assessment storage for AI usage",
    version="1.0.0",
    docs_url="/api/docs" if docs_enabled else None,
    redoc_url="/api/redoc" if docs_enabled else None,
    openapi_url="/api/openapi.json" if docs_enabled else None,
)

# Middleware configuration (order matters - applied in reverse order)
# 1. Request logging (outermost - logs all requests)
app.add_middleware(RequestLoggingMiddleware)

# 2. Security headers
app.add_middleware(SecurityHeadersMiddleware, settings=settings)

# 3. Rate limiting on /api/ (production only)
app.add_middleware(RateLimitMiddleware, settings=settings)

# 4. CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint."""
    return {
        "status": "OK",
        "timestamp": datetime.now(UTC).isoformat(),
        "service": settings.service_name,
    }


app.include_router(auth.router, prefix="/auth", tags=["auth"])
app.include_router(risk.router, prefix="/api/risk", tags=["risk"])
app.include_router(assessments.router, prefix="/api/assessments", tags=["assessments"])
app.include_router(metrics.router, prefix="/api", tags=["metrics"])
