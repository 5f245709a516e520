"""
Authentication request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    """Login request body."""
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


class LoginResponse(BaseModel):
    """Login response with JWT token."""
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Token expiration time in seconds")
    user_id: str = Field(..., description="Authenticated user ID")


class RegisterRequest(BaseModel):
    """Registration request body."""
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(
        ...,
        min_length=8,
        description="User password (min 8 characters)"
    )
    display_name: Optional[str] = Field(
        None,
        max_length=100,
        description="Optional display name"
    )

    class Config:
        str_strip_whitespace = True


class RegisterResponse(BaseModel):
    """Registration response."""
    user_id: str = Field(..., description="Created user ID")
    email: str = Field(..., description="Registered email")
    display_name: Optional[str] = Field(None, description="Display name")
    message: str = Field(
        default="Registration successful",
        description="Success message"
    )


class LogoutResponse(BaseModel):
    """Logout response."""
    message: str = Field(default="Logged out", description="Success message")


class IdentityResponse(BaseModel):
    """The authenticated identity as seen by the application."""
    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User email")
    display_name: Optional[str] = Field(None, description="Display name")
