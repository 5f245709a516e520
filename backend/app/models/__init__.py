"""
Pydantic models for database documents.
"""
from app.models.user import User
from app.models.account import Account
from app.models.holding import Holding

__all__ = [
    "User",
    "Account",
    "Holding",
]
