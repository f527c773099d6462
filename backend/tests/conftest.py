"""
Contact Book Backend — Test Configuration (conftest.py)
=========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session for service unit tests
    ├── session_factory: Session factory bound to a fresh SQLite file
    ├── test_client: HTTPX AsyncClient wired to the app and that SQLite file
    └── sample_contact: Contact payload in wire (camelCase) format
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

# Settings are read once at import; override them BEFORE any app import
os.environ["DATABASE_URL"] = (
    "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(prefix="contactbook_test_"), "app.db")
)
os.environ["BCRYPT_ROUNDS"] = "4"  # Minimum work factor keeps hashing fast
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from contactbook.database import Base, get_db_session
from contactbook.models import account, contact  # noqa: F401  (register tables)


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_contact(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = row
            result = await contact_service.get_contact(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """Session factory over a throwaway SQLite database with both tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'contacts.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    Provides an async HTTP test client for endpoint testing.

    get_db_session is overridden so every request gets a session on the
    per-test SQLite database, with the same commit/rollback behaviour.
    """
    from contactbook.main import app

    async def _override_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_contact():
    return {
        "companyName": "Acme",
        "companyEmail": "a@acme.com",
        "companyPhone": "123",
        "companyAddress": "1 Main St",
    }


@pytest.fixture
def valid_signup():
    return {"name": "Ada", "email": "ada@example.com", "password": "Str0ng!Pass"}
