"""
Frontend test fixtures and fakes.

Controllers are tested without a Streamlit runtime: views keep their state in
plain controller objects, so tests drive those directly against an in-memory
stand-in for the data access layer.
"""
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add frontend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "frontend"))

from fakes import InMemoryDataAccess  # noqa: E402
from utils.models import Identity  # noqa: E402


@pytest.fixture
def identity() -> Identity:
    return Identity(id="user-1", email="test@example.com", display_name="Test User")


@pytest.fixture
def store(identity) -> InMemoryDataAccess:
    """In-memory data access with a signed-in identity."""
    return InMemoryDataAccess(identity)


@pytest.fixture
def gateway(store):
    from utils.session import IdentityGateway
    return IdentityGateway(store)


@pytest.fixture
def session(gateway):
    """A session context already resolved to the signed-in identity."""
    from utils.session import SessionContext
    context = SessionContext()
    context.start(gateway)
    yield context
    context.close()


@pytest.fixture
def seeded_store(store, identity):
    """``Broker A`` holds AAPL and MSFT, ``Broker B`` holds AAPL."""
    broker_a = store.create_account("Broker A", identity.id)
    broker_b = store.create_account("Broker B", identity.id)
    store.add_holding(broker_a.id, identity.id, "AAPL", "Apple Inc.", 10)
    store.add_holding(broker_a.id, identity.id, "MSFT", "Microsoft", 5)
    store.add_holding(broker_b.id, identity.id, "AAPL", "Apple Inc.", 3)
    store.calls.clear()
    return store


@pytest.fixture
def mock_api():
    """APIClient double returning canned ``{"status", "data"}`` results."""
    from utils.api import APIClient
    api = MagicMock(spec=APIClient)
    api.token = None
    return api


@pytest.fixture
def mock_api_responses():
    """Common API response fixtures."""
    return {
        "login_success": {
            "status": 200,
            "data": {
                "access_token": "jwt-token-abc123",
                "token_type": "bearer",
                "expires_in": 3600,
                "user_id": "user-1",
            },
        },
        "login_invalid": {
            "status": 401,
            "data": {"detail": "Invalid email or password"},
        },
        "me": {
            "status": 200,
            "data": {"id": "user-1", "email": "test@example.com", "display_name": None},
        },
        "unauthorized": {
            "status": 401,
            "data": {"detail": "Could not validate credentials"},
        },
        "account": {
            "status": 201,
            "data": {"id": "acct-1", "name": "Broker A", "user_id": "user-1",
                     "created_at": 1_700_000_000_000},
        },
        "holding": {
            "status": 201,
            "data": {"id": "hold-1", "symbol": "AAPL", "name": "Apple Inc.", "quantity": 10,
                     "account_id": "acct-1", "user_id": "user-1", "is_marked": False,
                     "added_at": 1_700_000_000_001},
        },
        "store_down": {
            "status": 503,
            "data": {"detail": "Failed to list accounts"},
        },
        "connection_error": {"status": 0, "error": "Cannot connect to backend"},
    }
