"""Root conftest — shared test configuration and fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The app under test never reads a real OAuth credentials file
    - app.state.db_manager points at the test engine (routes resolve get_db through it)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - db_manager built with __new__: skips engine creation, reuses the test engine
"""

import os

# Ensure tests never pick up a developer's database or credentials
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CREDENTIALS_FILE", "tests/missing-clientid.json")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from people_api.config import Settings  # noqa: E402
from people_api.db.base import Base  # noqa: E402
from people_api.db.session import create_session_factory  # noqa: E402
from people_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from people_api.infrastructure.oauth_gate import OAuthConfig  # noqa: E402
from people_api.main import create_app  # noqa: E402
import people_api.models  # noqa: E402,F401


@pytest.fixture
def test_settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        database_timeout_seconds=5.0,
        log_format="text",
    )


@pytest.fixture
def oauth_config():
    """Unconfigured gate: no provider credentials."""
    return OAuthConfig(
        redirect_url="http://test/auth/",
        scopes=("read:user",),
        session_secret="test-secret",
        session_cookie="people_session",
        unavailable_reason="credentials file missing-clientid.json not found",
    )


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
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def test_db_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
def app(test_settings, oauth_config, test_db_manager):
    application = create_app(test_settings, oauth_config)
    application.state.db_manager = test_db_manager
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    """FastAPI test client bound to the test database."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
