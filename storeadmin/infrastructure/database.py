"""Database configuration and session management.

Provides async SQLAlchemy engine and session factory, and the
commit-or-rollback block the services write through.
"""

from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from storeadmin.infrastructure.config import settings

logger = structlog.get_logger()

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


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session.

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


@asynccontextmanager
async def transaction(
    session: AsyncSession,
    failure: type[Exception],
    **context: Any,
) -> AsyncIterator[None]:
    """Commit the block's writes, or roll all of them back.

    Storage failures are logged with their cause and re-raised as
    ``failure``; anything else (including cancellation) rolls back
    and propagates unchanged.

    Example usage:
        async with transaction(session, PersistenceError, store_id=store_id):
            await repository.delete(store_id)
    """
    try:
        yield
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception("Transaction failed", error=str(exc), **context)
        raise failure() from exc
    except BaseException:
        await session.rollback()
        raise


async def create_tables() -> None:
    """Create all tables registered on the declarative base."""
    # Import models so they are registered on Base.metadata
    import storeadmin.catalog.models  # noqa: F401
    import storeadmin.products.models  # noqa: F401
    import storeadmin.reporting.models  # noqa: F401
    import storeadmin.stores.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
