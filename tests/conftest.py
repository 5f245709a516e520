"""
Global test fixtures for the holdings tracker.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Mock Redis (fakeredis)
- Test user data and documents
- FastAPI test clients wired to the in-memory stores
"""

import sys
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend and frontend to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "backend"))
sys.path.insert(0, str(ROOT / "frontend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_auth_db(mock_async_mongo_client):
    """Provide mock auth_db database."""
    db = mock_async_mongo_client["auth_db"]
    # Create indexes like the real app
    await db.users.create_index("email", unique=True)
    yield db


@pytest_asyncio.fixture
async def mock_holdings_db(mock_async_mongo_client):
    """Provide mock holdings_db database."""
    db = mock_async_mongo_client["holdings_db"]
    await db.accounts.create_index("user_id")
    await db.holdings.create_index("account_id")
    await db.holdings.create_index([("user_id", 1), ("symbol", 1)])
    yield db


# =============================================================================
# Redis Fixtures (fakeredis)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_redis():
    """
    Create an async mock Redis client using fakeredis.
    """
    import fakeredis
    import fakeredis.aioredis
    redis_client = fakeredis.aioredis.FakeRedis(
        server=fakeredis.FakeServer(), decode_responses=True
    )
    yield redis_client
    await redis_client.flushall()
    await redis_client.aclose()


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for registration."""
    return {
        "email": "testuser@example.com",
        "password": "SecurePassword123!",
        "display_name": "Test User",
    }


@pytest.fixture
def other_user_data() -> dict:
    """A second user, for ownership checks."""
    return {
        "email": "otheruser@example.com",
        "password": "OtherPassword123!",
    }


@pytest.fixture
def user_id() -> str:
    """ObjectId string of a user that owns test accounts."""
    return "507f1f77bcf86cd799439011"


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app_mongo_client():
    """In-memory MongoDB handed to the app under test."""
    from mongomock_motor import AsyncMongoMockClient
    return AsyncMongoMockClient()


@pytest.fixture
def app_redis():
    """
    In-memory Redis handed to the app under test.

    Built outside any event loop and on its own server, so the TestClient's
    loop owns its connections and no state leaks between tests.
    """
    import fakeredis
    import fakeredis.aioredis
    return fakeredis.aioredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)


@pytest.fixture
def app(app_mongo_client, app_redis, monkeypatch):
    """
    The FastAPI app with its process-wide clients replaced by the
    in-memory MongoDB and Redis.

    ``get_mongo_client`` and ``get_redis_client`` hand out the module-level
    clients when set, so every router and dependency sees the mocks.
    """
    import app.database.connections as conn_module
    from app.config import get_settings

    monkeypatch.setattr(conn_module, "_mongo_client", app_mongo_client)
    monkeypatch.setattr(conn_module, "_redis_client", app_redis)
    # mongomock has no sessions, so marks run as a single update_many
    monkeypatch.setattr(get_settings(), "mongo_use_transactions", False)

    from app.main import app
    return app


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Entering the client runs the lifespan (registry sync and indexes).
    """
    with TestClient(app) as c:
        yield c

