"""Database engine and session management."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from airisk.core.config import get_settings
from airisk.core.structured_logging import log_json

logger = logging.getLogger(__name__)

MAX_LOGGED_STATEMENT_LENGTH = 2000


def async_database_url(url: str) -> str:
    """Map a plain PostgreSQL URL onto the asyncpg driver.

    URLs that already name a driver (e.g. ``sqlite+aiosqlite://``) are
    returned unchanged.
    """
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix):]
    return url


def _pool_options(url: str) -> dict:
    if url.startswith("sqlite") and ":memory:" in url:
        # Every session must share the one connection holding the in-memory database
        return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    if "test" in url:
        # Pooled connections outlive the event loop of a single test
        return {"poolclass": NullPool}
    return {}


def _log_slow_queries(engine: AsyncEngine, threshold_ms: float) -> None:
    """Log statements slower than ``threshold_ms`` as ``slow_query`` events."""

    @event.listens_for(engine.sync_engine, "before_cursor_execute")
    def _start_timer(conn, cursor, statement, parameters, context, executemany) -> None:
        context._query_start_time = time.perf_counter()

    @event.listens_for(engine.sync_engine, "after_cursor_execute")
    def _check_duration(conn, cursor, statement, parameters, context, executemany) -> None:
        start = getattr(context, "_query_start_time", None)
        if start is None:
            return
        duration_ms = (time.perf_counter() - start) * 1000
        if duration_ms >= threshold_ms:
            log_json(
                logger,
                logging.WARNING,
                "slow_query",
                duration_ms=round(duration_ms, 2),
                statement=str(statement)[:MAX_LOGGED_STATEMENT_LENGTH],
            )


def build_engine(url: str) -> AsyncEngine:
    """Create an async engine for a database URL.

    Args:
        url: SQLAlchemy URL; plain PostgreSQL URLs use asyncpg

    Returns:
        AsyncEngine, with slow-query logging when SLOW_QUERY_MS is set
    """
    engine = create_async_engine(async_database_url(url), echo=False, **_pool_options(url))

    threshold_ms = float(os.getenv("SLOW_QUERY_MS", "0") or "0")
    if threshold_ms > 0:
        _log_slow_queries(engine, threshold_ms)
    return engine


engine = build_engine(get_settings().database_url)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency.

    Commits when the request handler returns and rolls back if it raises.

    Yields:
        AsyncSession: Database session
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
