"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

The schema belongs to the publishing platform; this service only reads it
and owns no migrations.

Engine and session factory are created lazily on first use (get_db_optional) so
import does not trigger Settings validation or a connection attempt.
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from bubbles_search.core.config import get_settings

logger = logging.getLogger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: Any = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


def _ensure_engine() -> None:
    """Create engine and AsyncSessionLocal on first use (when DATABASE_URL is set)."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    if not settings.database_url:
        return
    pool_size = settings.db_pool_size if settings.db_pool_size is not None else 10
    max_overflow = settings.db_max_overflow if settings.db_max_overflow is not None else 20
    command_timeout = (
        settings.db_command_timeout if settings.db_command_timeout is not None else 30
    )
    connect_args: dict[str, Any] = {}
    if "postgresql" in settings.database_url:
        connect_args["command_timeout"] = command_timeout
    engine = create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_recycle=3600,
        connect_args=connect_args,
    )
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


def get_engine() -> Any:
    """Return the engine, creating it if configured (None when DATABASE_URL is unset)."""
    _ensure_engine()
    return engine


async def dispose_engine() -> None:
    """Dispose the engine and forget the session factory (shutdown)."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


async def get_db_optional() -> AsyncIterator[AsyncSession | None]:
    """Database session dependency (read-only use; never commits).

    Yields a session and closes it on exit, or None when DATABASE_URL is not set.

    Search uses this so static sources keep answering without a database;
    repositories built on a None session raise SqlNotConfiguredException
    when queried and the orchestrator excludes their sources.
    """
    _ensure_engine()
    if AsyncSessionLocal is None:
        yield None
        return
    async with AsyncSessionLocal() as session:
        yield session
