"""Async database configuration.

Provides:
- Async SQLAlchemy engine and session factory
- Session context manager with commit/rollback handling
- Schema sync helpers for local setup and tests
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from catalog.config import settings
from catalog.infra.logging import get_logger
from catalog.models.base import Base

logger = get_logger(__name__)

# Global engine (initialized on first use)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for ``url``.

    SQLite drivers do not accept queue pool options, so pool sizing is only
    applied to server databases.

    Args:
        url: SQLAlchemy async URL
        echo: Log emitted SQL

    Returns:
        New AsyncEngine
    """
    options: dict[str, Any] = {"echo": echo}
    if not url.startswith("sqlite"):
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_pool_max_overflow,
            pool_pre_ping=True,  # Verify connections before use
            pool_recycle=1800,  # Recycle connections after 30 min
        )
    return create_async_engine(url, **options)


def get_engine() -> AsyncEngine:
    """Get or create the async database engine."""
    global _engine

    if _engine is None:
        logger.info(
            "Creating database engine",
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_pool_max_overflow,
        )
        _engine = build_engine(settings.database_url, echo=settings.debug)

    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get or create the session factory."""
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    return _session_factory


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get an async database session.

    The session is committed when the block exits normally and rolled back
    when it raises; the original exception is re-raised.

    Yields:
        AsyncSession

    Example:
        async with get_db_session() as session:
            repository = CategorySqlAlchemyRepository(session)
            await repository.insert(Category.create(name="Movie"))
    """
    factory = get_session_factory()
    session = factory()

    try:
        yield session
        await session.commit()

    except Exception as e:
        await session.rollback()
        logger.error("Database session error", error=str(e), error_type=type(e).__name__)
        raise

    finally:
        await session.close()


async def create_schema(engine: AsyncEngine | None = None, drop_first: bool = False) -> None:
    """Create all mapped tables.

    Args:
        engine: Engine to use (defaults to the application engine)
        drop_first: Drop existing tables before creating them
    """
    engine = engine or get_engine()
    async with engine.begin() as conn:
        if drop_first:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema synced", tables=sorted(Base.metadata.tables))


async def drop_schema(engine: AsyncEngine | None = None) -> None:
    """Drop all mapped tables."""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Database schema dropped")


async def close_db_engine() -> None:
    """Close the database engine and all connections.

    Call this during application shutdown.
    """
    global _engine, _session_factory

    if _engine is not None:
        logger.info("Closing database engine")
        await _engine.dispose()
        _engine = None
        _session_factory = None


async def verify_db_connection() -> bool:
    """Verify database connectivity.

    Returns:
        True if connection successful, False otherwise
    """
    try:
        async with get_db_session() as session:
            await session.execute(text("SELECT 1"))
            logger.info("Database connection verified")
            return True
    except Exception as e:
        logger.error("Database connection failed", error=str(e))
        return False
