"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.auth import CurrentUser, get_current_user, get_token

__all__ = [
    "CurrentUser",
    "get_current_user",
    "get_token",
]
