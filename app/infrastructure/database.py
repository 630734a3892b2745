"""Database configuration and session management.

Provides async SQLAlchemy engine and session factory.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.infrastructure.config import settings

# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)

# Session factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# Base class for models
Base = declarative_base()


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    """Open a session that commits on success and rolls back on error.

    Yields:
        AsyncSession for database operations.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def create_tables() -> None:
    """Create database tables if they don't exist."""
    # Register ORM models on Base.metadata
    import app.infrastructure.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def check_connection() -> None:
    """Run a trivial query to verify the database is reachable.

    Raises:
        SQLAlchemyError: If the database cannot be reached.
    """
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
