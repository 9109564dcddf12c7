"""Database Session Manager: async connection pool with automatic rollback and health checks.

Invariants:
    - The pool is created once by init_db() at startup and disposed by close_db() at shutdown
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - Pool is bounded (pool_size + max_overflow); excess requests wait up to pool_timeout

Design Decisions:
    - Module-level db_manager set only through init_db/close_db, injected per request via get_db
    - expire_on_commit=False: ORM rows stay readable after commit in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from inventory_service.core.errors import DatabaseError

logger = logging.getLogger(__name__)


def map_db_error(exc: SQLAlchemyError, operation: str) -> DatabaseError:
    """Translate a SQLAlchemy exception into the service error taxonomy."""
    if isinstance(exc, IntegrityError):
        logger.error(f"DB integrity error: {exc}", extra={"operation": operation})
        return DatabaseError("Integrity constraint violated", operation)
    if isinstance(exc, OperationalError):
        logger.error(f"DB operational error: {exc}", extra={"operation": operation})
        return DatabaseError("Connection or operational error", operation)
    if isinstance(exc, DBAPIError):
        logger.error(f"DB driver error: {exc}", extra={"operation": operation})
        return DatabaseError("Database driver error", operation)
    logger.error(f"SQLAlchemy error: {exc}", extra={"operation": operation})
    return DatabaseError("Database operation failed", operation)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 0,
        pool_timeout: int = 30,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_timeout=pool_timeout,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            raise map_db_error(e, "session") from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        """Close all pooled connections. Checked-out connections close on release."""
        await self.engine.dispose()


# Set by init_db() during startup
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.close()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
