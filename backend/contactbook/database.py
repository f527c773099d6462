"""
Contact Book Backend — Database Session Management
====================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
Why:   The connection pool is the only resource shared between requests;
       it lives here and nowhere else.
How:   Creates one async engine per process, provides a session dependency
       that commits on success and rolls back on error.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created at module import; sessions are created per-request.

Connection Pooling Strategy:
    pool_size=10:      Persistent connections for normal load
    max_overflow=5:    Temporary connections for spikes
    pool_pre_ping:     Validates connections before use (catches stale connections)
    pool_recycle=3600: Recycles connections every hour

    SQLite (used by the test suite) manages its own pool, so sizing options
    are only passed for server databases.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from contactbook.config import settings


def _engine_options() -> Dict[str, Any]:
    """Builds create_async_engine() keyword arguments for the configured URL."""
    options: Dict[str, Any] = {
        # Echo SQL only when debugging; it is noisy otherwise
        "echo": settings.log_level == "DEBUG",
    }
    if settings.is_sqlite:
        return options

    options.update(
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
    )
    if settings.db_ssl:
        # asyncpg: encrypt without verifying the server certificate chain
        options["connect_args"] = {"ssl": "require"}
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: rows stay readable after the dependency commits
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object so create_tables() sees every table.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler (the handler performs its statement)
        3. On success: commits the transaction
        4. On error: rolls back the transaction
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/contacts")
        async def list_contacts(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables() -> None:
    """
    What:  Creates any missing tables (accounts and contacts).
    When:  Called during application startup when DB_CREATE_TABLES is set.
    How:   CREATE TABLE IF NOT EXISTS via metadata.create_all; existing
           tables and their data are left untouched.
    """
    # Model modules register their tables on Base.metadata at import
    from contactbook.models import account, contact  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
