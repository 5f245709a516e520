"""
Account request/response schemas.
"""
from pydantic import BaseModel, Field


class AccountCreate(BaseModel):
    """Create account request."""
    name: str = Field(..., min_length=1, max_length=100, description="Account name")

    class Config:
        str_strip_whitespace = True


class AccountResponse(BaseModel):
    """Account response."""
    id: str = Field(..., description="Account ID")
    user_id: str = Field(..., description="Owner user ID")
    name: str = Field(..., description="Account name")
    created_at: int = Field(..., description="Creation time (ms since epoch)")
