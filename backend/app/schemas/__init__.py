"""
Request and response schemas for API endpoints.
"""
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    LogoutResponse,
    IdentityResponse,
)
from app.schemas.account import AccountCreate, AccountResponse
from app.schemas.holding import (
    HoldingCreate,
    HoldingResponse,
    MarkUpdate,
    MarkUpdateResponse,
)

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "LogoutResponse",
    "IdentityResponse",
    # Account
    "AccountCreate",
    "AccountResponse",
    # Holding
    "HoldingCreate",
    "HoldingResponse",
    "MarkUpdate",
    "MarkUpdateResponse",
]
