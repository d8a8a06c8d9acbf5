"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown (in-memory SQLite through aiosqlite)
- Repository and service instances
- An async HTTP client bound to the FastAPI app
"""

import os

# Point the application at SQLite before any gigapi module reads its settings
os.environ.setdefault("SQL_CONNECTION", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JSON_LOGS", "false")

from datetime import datetime

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from gigapi.core.database import Base, build_session_factory, get_db
from gigapi.core.retry import RetryPolicy
from gigapi.crud.gig import GigRepository
from gigapi.models.gig import Gig  # noqa: F401  registers the Gigs table
from gigapi.schemas.gig import GigCreate
from gigapi.services.gig_service import GigService
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Retries without sleeping so transient-error tests stay fast
FAST_RETRY_POLICY = RetryPolicy(max_retries=2, base_delay=0, max_delay=0)


@pytest_asyncio.fixture
async def engine():
    """
    Create a fresh in-memory database for each test.
    """
    test_engine = create_async_engine(SQLALCHEMY_TEST_DATABASE_URL, poolclass=StaticPool)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def gig_repository(db_session):
    return GigRepository(db_session, retry_policy=FAST_RETRY_POLICY)


@pytest.fixture
def gig_service(gig_repository):
    return GigService(gig_repository)


@pytest_asyncio.fixture
async def client(session_factory):
    """
    Async HTTP client with the database dependency pointed at the test engine.
    """
    async def override_get_db():
        async with session_factory() as db:
            yield db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_gig_data():
    """Sample gig payload for API tests"""
    return {
        "name": "Jazz Night",
        "gig_date": "2024-05-01T20:00:00",
        "music_genre": "Jazz"
    }


@pytest.fixture
def sample_gig():
    """Sample gig schema for service tests"""
    return GigCreate(
        name="Jazz Night",
        gig_date=datetime(2024, 5, 1, 20, 0),
        music_genre="Jazz"
    )
