"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to StorageError (core/errors.py)

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
      (no global import side effects)
    - expire_on_commit=False: prevents lazy-load issues in async context
    - SQLite URLs skip pool sizing: aiosqlite uses a static/null pool
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from activity_notes.core.errors import StorageError

logger = logging.getLogger(__name__)


def to_storage_error(exc: SQLAlchemyError, operation: str = "unknown") -> StorageError:
    """Map a SQLAlchemy exception to the domain StorageError."""
    if isinstance(exc, IntegrityError):
        logger.error(f"DB integrity error: {exc}")
        return StorageError("Integrity constraint violated", operation)
    if isinstance(exc, OperationalError):
        logger.error(f"DB operational error: {exc}")
        return StorageError("Connection or operational error", operation)
    if isinstance(exc, DBAPIError):
        logger.error(f"DB driver error: {exc}")
        return StorageError("Database driver error", operation)
    logger.error(f"SQLAlchemy error: {exc}")
    return StorageError("Database operation failed", operation)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
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
            raise to_storage_error(e, "session") from e
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

    async def schema_revision(self) -> str | None:
        """Alembic revision applied to the database, None when not migrated."""
        try:
            async with self.session() as db:
                result = await db.execute(
                    text("SELECT version_num FROM alembic_version"),
                )
                return result.scalar_one_or_none()
        except StorageError as e:
            logger.warning(f"Schema revision unavailable: {e.message}")
            return None

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
