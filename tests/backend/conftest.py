"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with backend-specific helpers
for testing FastAPI routes, services, and database operations.
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def auth_service(mock_auth_db, mock_async_redis):
    """AuthService over the in-memory auth_db and Redis."""
    from app.services.auth_service import AuthService
    return AuthService(mock_auth_db, mock_async_redis)


@pytest_asyncio.fixture
async def account_service(mock_holdings_db):
    """AccountService over the in-memory holdings_db."""
    from app.services.account_service import AccountService
    return AccountService(mock_holdings_db)


@pytest_asyncio.fixture
async def holding_service(mock_holdings_db):
    """HoldingService without a client: marks run as a plain update_many."""
    from app.services.holding_service import HoldingService
    return HoldingService(mock_holdings_db)


@pytest_asyncio.fixture
async def two_accounts(account_service, user_id):
    """Two accounts of the same user, ``Broker A`` and ``Broker B``."""
    from app.schemas.account import AccountCreate
    broker_a = await account_service.create_account(user_id, AccountCreate(name="Broker A"))
    broker_b = await account_service.create_account(user_id, AccountCreate(name="Broker B"))
    return broker_a, broker_b


# =============================================================================
# Route Helpers
# =============================================================================

@pytest.fixture
def register_and_login(client):
    """
    Register a user through the API and return its token.

    Usage in tests:
        def test_something(client, register_and_login):
            token = register_and_login("a@example.com", "Password123!")
            client.get("/accounts", params={"token": token})
    """
    def _register_and_login(email: str, password: str, display_name: str = None) -> str:
        body = {"email": email, "password": password}
        if display_name:
            body["display_name"] = display_name
        response = client.post("/auth/register", json=body)
        assert response.status_code == 201, response.text

        response = client.post("/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return response.json()["access_token"]
    return _register_and_login


@pytest.fixture
def token(register_and_login, test_user_data):
    """Token of the default test user."""
    return register_and_login(
        test_user_data["email"],
        test_user_data["password"],
        test_user_data["display_name"],
    )


@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        if detail_contains:
            assert detail_contains.lower() in str(data["detail"]).lower()
    return _assert
