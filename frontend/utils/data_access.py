"""
Typed data access over the backend API.

The only frontend component that talks to the backend. Every operation either
returns typed records or raises ``AuthError`` / ``StoreError``; nothing is
retried.
"""
import logging
from typing import Optional

from utils.api import APIClient
from utils.models import Account, Holding, Identity

logger = logging.getLogger(__name__)


class DataAccessError(Exception):
    """Base class for failed backend calls."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class AuthError(DataAccessError):
    """Bad credentials, duplicate registration or identity provider failure."""


class StoreError(DataAccessError):
    """Query or write failure."""


def _detail(result: dict, default: str) -> str:
    """Extract the backend's error detail from an API result."""
    data = result.get("data")
    if isinstance(data, dict) and data.get("detail"):
        detail = data["detail"]
        # FastAPI validation errors carry a list of issues
        if isinstance(detail, list):
            return "; ".join(str(item.get("msg", item)) for item in detail)
        return str(detail)
    return result.get("error") or default


def _ok(result: dict) -> bool:
    return result.get("status") in (200, 201)


class DataAccess:
    """Identity and store operations for one browser session."""

    def __init__(self, api: APIClient):
        self.api = api
        self._identity_id: Optional[str] = None

    # ==================== Identity ====================

    def register(self, email: str, password: str,
                 display_name: Optional[str] = None) -> Identity:
        """Create an identity and sign it in."""
        result = self.api.register(email, password, display_name)
        if not _ok(result):
            raise AuthError(_detail(result, "Registration failed"), result.get("status"))
        return self.login(email, password)

    def login(self, email: str, password: str) -> Identity:
        result = self.api.login(email, password)
        if not _ok(result):
            raise AuthError(_detail(result, "Login failed"), result.get("status"))

        self.api.token = result["data"]["access_token"]
        try:
            identity = self.current_identity()
        except AuthError:
            self.api.token = None
            raise
        if identity is None:
            raise AuthError("Login failed", result.get("status"))
        return identity

    def logout(self) -> None:
        """End the session. A session the backend already rejects counts as ended."""
        if not self.api.token:
            self._identity_id = None
            return

        result = self.api.logout()
        if not _ok(result) and result.get("status") != 401:
            raise AuthError(_detail(result, "Logout failed"), result.get("status"))

        self.api.token = None
        self._identity_id = None

    def current_identity(self) -> Optional[Identity]:
        """Resolve the identity behind the stored token, or None without a valid one."""
        if not self.api.token:
            return None

        result = self.api.get_me()
        if result.get("status") == 401:
            self.api.token = None
            self._identity_id = None
            return None
        if not _ok(result):
            raise AuthError(_detail(result, "Session lookup failed"), result.get("status"))

        identity = Identity(**result["data"])
        self._identity_id = identity.id
        return identity

    def _require_owner(self, owner_id: str) -> None:
        """The backend scopes by the session user; refuse calls for anyone else."""
        if owner_id != self._identity_id:
            raise AuthError("Not signed in as the requested owner")

    # ==================== Accounts ====================

    def create_account(self, name: str, owner_id: str) -> Account:
        self._require_owner(owner_id)
        result = self.api.create_account(name)
        if not _ok(result):
            raise StoreError(_detail(result, "Failed to create account"), result.get("status"))
        return Account(**result["data"])

    def list_accounts(self, owner_id: str) -> list[Account]:
        self._require_owner(owner_id)
        result = self.api.list_accounts()
        if not _ok(result):
            raise StoreError(_detail(result, "Failed to list accounts"), result.get("status"))
        return [Account(**a) for a in result["data"] or []]

    # ==================== Holdings ====================

    def add_holding(self, account_id: str, owner_id: str, symbol: str,
                    name: str, quantity: int) -> Holding:
        self._require_owner(owner_id)
        if quantity <= 0:
            raise ValueError("quantity must be positive")
        result = self.api.add_holding(account_id, symbol, name, quantity)
        if not _ok(result):
            raise StoreError(_detail(result, "Failed to add holding"), result.get("status"))
        return Holding(**result["data"])

    def list_holdings_by_account(self, account_id: str) -> list[Holding]:
        result = self.api.list_account_holdings(account_id)
        if not _ok(result):
            raise StoreError(_detail(result, "Failed to list holdings"), result.get("status"))
        return [Holding(**h) for h in result["data"] or []]

    def list_all_holdings(self, owner_id: str) -> list[Holding]:
        self._require_owner(owner_id)
        result = self.api.list_all_holdings()
        if not _ok(result):
            raise StoreError(_detail(result, "Failed to list holdings"), result.get("status"))
        return [Holding(**h) for h in result["data"] or []]

    def set_marked(self, symbol: str, owner_id: str, is_marked: bool) -> None:
        """Set the mark on every holding of ``symbol`` in all of the owner's accounts."""
        self._require_owner(owner_id)
        result = self.api.set_marked(symbol, is_marked)
        if not _ok(result):
            raise StoreError(_detail(result, "Failed to update marks"), result.get("status"))
        logger.debug(f"Marked {symbol}={is_marked}: {result['data']}")
