"""Middleware for security headers, rate limiting and request logging."""

import logging
import time
from collections import defaultdict
from datetime import UTC, datetime, timedelta

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from airisk.core.config import Settings, get_settings
from airisk.core.metrics import observe_http_request
from airisk.core.request_context import new_request_id, request_id_context, sanitize_request_id
from airisk.core.structured_logging import log_json

logger = logging.getLogger(__name__)

RATE_LIMITED_PREFIX = "/api/"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add basic security headers to all responses."""

    def __init__(self, app: ASGIApp, settings: Settings | None = None):
        super().__init__(app)
        self.settings = settings or get_settings()

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("Referrer-Policy", "no-referrer")

        if self.settings.environment == "production":
            scheme = request.headers.get("x-forwarded-proto") or request.url.scheme
            if scheme == "https":
                response.headers.setdefault(
                    "Strict-Transport-Security",
                    "max-age=63072000; includeSubDomains",
                )

        return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """In-memory rate limiting for API endpoints.

    Applies in production only: each client IP may make
    ``rate_limit_api_per_window`` requests under ``/api/`` per
    ``rate_limit_window_minutes``. Excess requests get a 429.
    """

    def __init__(self, app: ASGIApp, settings: Settings | None = None):
        super().__init__(app)
        self.settings = settings or get_settings()
        # Storage: {client_ip: [timestamp, ...]}
        self._requests: dict[str, list[datetime]] = defaultdict(list)

    @property
    def window(self) -> timedelta:
        return timedelta(minutes=self.settings.rate_limit_window_minutes)

    def _clean_old_requests(self, identifier: str, now: datetime) -> None:
        """Remove requests outside the time window."""
        cutoff = now - self.window
        recent = [ts for ts in self._requests.get(identifier, []) if ts > cutoff]
        if recent:
            self._requests[identifier] = recent
        else:
            self._requests.pop(identifier, None)

    def is_allowed(self, identifier: str, now: datetime | None = None) -> bool:
        """Record a request for ``identifier`` unless its window is full."""
        now = now or datetime.now(UTC)
        self._clean_old_requests(identifier, now)
        if len(self._requests[identifier]) >= self.settings.rate_limit_api_per_window:
            return False
        self._requests[identifier].append(now)
        return True

    async def dispatch(self, request: Request, call_next):
        """Apply rate limiting to /api/ paths."""
        if self.settings.environment != "production":
            return await call_next(request)

        if request.url.path.startswith(RATE_LIMITED_PREFIX):
            client_ip = request.client.host if request.client else "unknown"
            if not self.is_allowed(client_ip):
                log_json(
                    logger,
                    logging.WARNING,
                    "rate_limited",
                    path=request.url.path,
                    client_ip=client_ip,
                )
                return JSONResponse(
                    status_code=429,
                    content={"detail": "Too many requests, please try again later."},
                )

        return await call_next(request)


def _status_log_level(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


def _route_template(request: Request) -> str:
    """Matched route path, e.g. /api/assessments/{assessment_id}."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Request logging middleware with structured logging.

    Assigns a request id (honoring a sane incoming X-Request-ID), records
    HTTP metrics and logs one JSON line per request.
    """

    async def dispatch(self, request: Request, call_next):
        """Log request details."""
        request_id = sanitize_request_id(
            request.headers.get("X-Request-ID") or request.headers.get("X-Correlation-ID")
        ) or new_request_id()
        request.state.request_id = request_id

        fields = {
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else "unknown",
        }
        start_time = time.perf_counter()

        with request_id_context(request_id):
            try:
                response = await call_next(request)
            except Exception as exc:
                log_json(
                    logger,
                    logging.ERROR,
                    "request_error",
                    status_code=500,
                    duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
                    error=str(exc),
                    exception=exc.__class__.__name__,
                    **fields,
                )
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000
            response.headers.setdefault("X-Request-ID", request_id)

            observe_http_request(
                method=request.method,
                route=_route_template(request),
                status_code=response.status_code,
                duration_ms=duration_ms,
            )
            log_json(
                logger,
                _status_log_level(response.status_code),
                "request",
                status_code=response.status_code,
                duration_ms=round(duration_ms, 2),
                **fields,
            )
            return response
