"""
Service layer for business logic.
"""
from app.services.auth_service import AuthService
from app.services.account_service import AccountService
from app.services.holding_service import HoldingService

__all__ = [
    "AuthService",
    "AccountService",
    "HoldingService",
]
