"""
Authentication dependencies for route protection.
"""
from typing import Annotated

from fastapi import Depends, HTTPException, Query, status
from jose import JWTError
from redis.exceptions import RedisError

from app.core.revocation import is_token_revoked
from app.core.security import decode_token
from app.database.connections import get_mongo_client, get_redis_client
from app.database.databases import auth_db
from app.models.user import User
from app.services.auth_service import AuthService


async def get_token(
    token: Annotated[str, Query(description="JWT access token")]
) -> str:
    """Dependency exposing the raw token passed as ``?token=xxx``."""
    return token


async def get_current_user(
    token: Annotated[str, Depends(get_token)]
) -> User:
    """
    Dependency to get the current authenticated user from JWT token.
    
    Token is passed as query parameter: ?token=xxx
    
    Raises:
        HTTPException 401: If token is invalid, expired or revoked
        HTTPException 401: If user not found
        HTTPException 503: If the revocation store cannot be reached
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    
    try:
        payload = decode_token(token)
        user_id: str = payload.get("sub")
        jti: str = payload.get("jti")
        if user_id is None or jti is None:
            raise credentials_exception
    except JWTError:
        raise credentials_exception
    
    try:
        redis = await get_redis_client()
        if await is_token_revoked(redis, jti):
            raise credentials_exception
    except RedisError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Session store unavailable",
        )
    
    # Get user from database
    client = await get_mongo_client()
    auth_service = AuthService(client[auth_db.DB_NAME])
    
    user = await auth_service.get_user_by_id(user_id)
    
    if user is None:
        raise credentials_exception
    
    return user


# Type alias for cleaner route signatures
CurrentUser = Annotated[User, Depends(get_current_user)]
