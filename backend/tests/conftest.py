"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Environment pinned before the app (and its cached settings) is imported
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test database
    - db_manager patched for code paths that use it directly (readiness probe)

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency
    - Low bcrypt cost: hashing speed is not under test
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from devconnector.db.base import Base  # noqa: E402
from devconnector.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, get_db,
)
import devconnector.infrastructure.database as db_module  # noqa: E402
import devconnector.models  # noqa: E402,F401
from devconnector.main import app  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def api_app(test_engine, test_session_factory):
    """The FastAPI app wired to the test database."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    yield app

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
