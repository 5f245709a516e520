"""
Authentication router for registration, login, logout and identity lookup.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.exceptions import AuthError, DuplicateEmailError
from app.database.connections import get_mongo_client, get_redis_client
from app.database.databases import auth_db
from app.dependencies.auth import CurrentUser, get_token
from app.schemas.auth import (
    IdentityResponse,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    RegisterRequest,
    RegisterResponse,
)
from app.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Authentication"])


async def get_auth_service() -> AuthService:
    """Dependency to get AuthService instance."""
    client = await get_mongo_client()
    redis = await get_redis_client()
    return AuthService(client[auth_db.DB_NAME], redis)


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user account.
    
    - **email**: Valid email address (must be unique)
    - **password**: Password (minimum 8 characters)
    - **display_name**: Optional display name
    """
    try:
        return await auth_service.register_user(body)
    except DuplicateEmailError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except AuthError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
)
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with email and password to receive a JWT token.
    
    The token should be passed as a query parameter `token` to protected endpoints.
    """
    try:
        return await auth_service.login(body)
    except AuthError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


@router.post(
    "/logout",
    response_model=LogoutResponse,
    summary="Revoke the current session",
)
async def logout(
    current_user: CurrentUser,
    token: Annotated[str, Depends(get_token)],
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Revoke the token used for this request. Later calls with it answer 401.
    
    Requires valid token as query parameter: `?token=xxx`
    """
    try:
        await auth_service.logout(token)
    except AuthError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    return LogoutResponse()


@router.get(
    "/me",
    response_model=IdentityResponse,
    summary="Get current identity",
)
async def get_current_identity(current_user: CurrentUser):
    """
    Get the identity of the currently authenticated user.
    
    Requires valid token as query parameter: `?token=xxx`
    """
    return IdentityResponse(
        id=current_user.id,
        email=current_user.email,
        display_name=current_user.display_name,
    )
