"""
Core module - Security, token revocation and error types.
"""
from app.core.exceptions import AuthError, StoreError
from app.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
)
from app.core.revocation import revoke_token, is_token_revoked

__all__ = [
    "AuthError",
    "StoreError",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
    "revoke_token",
    "is_token_revoked",
]
