"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - Note generator runs with zero latency; dashboard cache is fresh per test

Design Decisions:
    - SQLite in-memory: fast, no external dependency, ON CONFLICT supported
    - Seeded ORM objects are expired by a rollback: tests read ids up front
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from activity_notes.db.base import Base
from activity_notes.infrastructure.dashboard_cache import (
    DashboardCache, get_dashboard_cache,
)
from activity_notes.infrastructure.database import get_db, DatabaseSessionManager
from activity_notes.models.auth_session import AuthSession
from activity_notes.models.user import User
from activity_notes.services.note_generator import (
    HeuristicNoteGenerator, get_note_generator,
)
import activity_notes.infrastructure.database as db_module
from activity_notes.main import app

SESSION_TOKEN = "test-session-token"


class RecordingInvalidator:
    """Collects mark_stale calls."""

    def __init__(self):
        self.stale: list = []

    def mark_stale(self, user_id) -> None:
        self.stale.append(user_id)


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
def invalidator():
    return RecordingInvalidator()


@pytest.fixture
def dashboard_cache():
    return DashboardCache()


@pytest.fixture
async def seed_user(test_db):
    """Insert a user whose stored default category is Health."""
    user = User(email="ada@example.com", default_category="Health")
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def auth_headers(test_db, seed_user):
    """Bearer header for a live sign-in session of seed_user."""
    test_db.add(AuthSession(
        session_token=SESSION_TOKEN,
        user_id=seed_user.id,
        expires=datetime.now(timezone.utc) + timedelta(days=1),
    ))
    await test_db.commit()
    return {"Authorization": f"Bearer {SESSION_TOKEN}"}


@pytest.fixture
async def client(test_engine, test_session_factory, dashboard_cache):
    """FastAPI test client with DB, generator and cache dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_note_generator] = (
        lambda: HeuristicNoteGenerator(delay_seconds=0)
    )
    app.dependency_overrides[get_dashboard_cache] = lambda: dashboard_cache

    # Patch db_manager for the readiness probe
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
