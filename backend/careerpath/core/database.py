"""Database configuration."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from careerpath.core.config import get_settings
from careerpath.core.exceptions import StoreError
from careerpath.core.logging import get_logger

logger = get_logger(__name__)
settings = get_settings()


def utc_now() -> datetime:
    """Current time in UTC; used for every created/updated timestamp."""
    return datetime.now(UTC)


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine.

    In-memory SQLite needs a single shared connection, otherwise every
    pooled connection would see its own empty database.
    """
    if url.startswith("sqlite") and ":memory:" in url:
        return create_async_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(url, echo=echo)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
AsyncSessionLocal = build_session_factory(engine)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


async def init_db(bind: AsyncEngine | None = None) -> None:
    """Initialize database tables."""
    # Register every table on Base.metadata before create_all.
    import careerpath.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        logger.info("Creating database tables")
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Close database connections."""
    logger.info("Closing database connections")
    await engine.dispose()


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session as a context manager."""
    session = AsyncSessionLocal()
    try:
        yield session
        try:
            await session.commit()
        except SQLAlchemyError as exc:
            logger.error("Commit failed", error=str(exc))
            raise StoreError("session.commit", str(exc)) from exc
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session for FastAPI dependency injection."""
    async with get_db_session() as session:
        yield session
