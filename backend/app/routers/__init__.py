"""
API Routers module.
"""
from app.routers import accounts, auth, health, holdings

__all__ = ["accounts", "auth", "health", "holdings"]
