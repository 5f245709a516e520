from typing import Optional

import requests

from config import REQUEST_TIMEOUT_SECONDS


class APIClient:
    """Simple API client for backend requests.

    Every call returns ``{"status": int, "data": ...}``; transport failures
    come back as ``{"status": 0, "error": str}`` instead of raising.
    """

    def __init__(self, base_url: str, token: Optional[str] = None):
        self.base_url = base_url
        self.token = token

    def _headers(self) -> dict:
        return {"Content-Type": "application/json"}

    def _params(self, params: Optional[dict] = None) -> dict:
        """Add the session token as query param if available."""
        params = dict(params or {})
        if self.token:
            params["token"] = self.token
        return params

    def _parse_json(self, resp) -> Optional[dict]:
        """Safely parse JSON, return None or text on failure."""
        if resp is None or not resp.text:
            return None
        try:
            return resp.json()
        except ValueError:
            # Non-JSON response
            return {"raw": resp.text}

    def _request(self, method: str, endpoint: str, data: Optional[dict] = None,
                 params: Optional[dict] = None) -> dict:
        try:
            resp = requests.request(
                method,
                f"{self.base_url}{endpoint}",
                headers=self._headers(),
                json=data,
                params=self._params(params),
                timeout=REQUEST_TIMEOUT_SECONDS,
            )
            return {"status": resp.status_code, "data": self._parse_json(resp)}
        except requests.exceptions.ConnectionError:
            return {"status": 0, "error": "Cannot connect to backend"}
        except requests.exceptions.RequestException as e:
            return {"status": 0, "error": str(e)}

    def _get(self, endpoint: str, params: Optional[dict] = None) -> dict:
        return self._request("GET", endpoint, params=params)

    def _post(self, endpoint: str, data: Optional[dict] = None) -> dict:
        return self._request("POST", endpoint, data=data)

    def _put(self, endpoint: str, data: dict) -> dict:
        return self._request("PUT", endpoint, data=data)

    # Auth endpoints
    def login(self, email: str, password: str) -> dict:
        """Login and get token."""
        return self._post("/auth/login", {
            "email": email,
            "password": password,
        })

    def register(self, email: str, password: str, display_name: Optional[str] = None) -> dict:
        """Register new user."""
        data = {"email": email, "password": password}
        if display_name:
            data["display_name"] = display_name
        return self._post("/auth/register", data)

    def logout(self) -> dict:
        """Revoke the current session token."""
        return self._post("/auth/logout")

    def get_me(self) -> dict:
        """Get current identity."""
        return self._get("/auth/me")

    # Health endpoint
    def health(self) -> dict:
        """Check API health."""
        return self._get("/health")

    # Account endpoints
    def list_accounts(self) -> dict:
        """List the user's accounts."""
        return self._get("/accounts")

    def create_account(self, name: str) -> dict:
        """Create new account."""
        return self._post("/accounts", {"name": name})

    # Holding endpoints
    def list_account_holdings(self, account_id: str) -> dict:
        """List holdings of one account."""
        return self._get(f"/accounts/{account_id}/holdings")

    def add_holding(self, account_id: str, symbol: str, name: str, quantity: int) -> dict:
        """Record a holding under an account."""
        return self._post(f"/accounts/{account_id}/holdings", {
            "symbol": symbol,
            "name": name,
            "quantity": quantity,
        })

    def list_all_holdings(self) -> dict:
        """List every holding of the user."""
        return self._get("/holdings")

    def set_marked(self, symbol: str, is_marked: bool) -> dict:
        """Mark or unmark a symbol in all accounts."""
        return self._put("/holdings/marks", {
            "symbol": symbol,
            "is_marked": is_marked,
        })
