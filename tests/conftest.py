from pathlib import Path

from dotenv import load_dotenv

env_file = Path(__file__).parent.parent / ".env.test"
load_dotenv(env_file)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.core.security import create_access_token  # noqa: E402
from app.db import base  # noqa: E402, F401
from app.db.session import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.stats.services.stats_cache import StatsCache, get_stats_cache  # noqa: E402
from tests.utils.helpers import FakeAggregator  # noqa: E402


@pytest.fixture
def memory_engine():
    """In-memory SQLite engine shared by every connection of a test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def test_session_local(memory_engine):
    return sessionmaker(bind=memory_engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session(test_session_local):
    session = test_session_local()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def fake_aggregator():
    return FakeAggregator()


@pytest.fixture
def stats_cache(fake_aggregator):
    return StatsCache(aggregator=fake_aggregator)


@pytest.fixture
async def test_app(db_session, stats_cache):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_stats_cache] = lambda: stats_cache

    yield app

    await stats_cache.wait_for_refreshes()
    app.dependency_overrides.clear()


@pytest.fixture
async def test_client(test_app):
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        yield client


@pytest.fixture
def test_user_token():
    return create_access_token({"sub": "user-1", "email": "user@example.com", "role": "user"})


@pytest.fixture
def test_admin_token():
    return create_access_token({"sub": "admin-1", "email": "admin@example.com", "role": "admin"})
