"""
Holding request/response schemas.
"""
from pydantic import BaseModel, Field


class HoldingCreate(BaseModel):
    """Add holding request."""
    symbol: str = Field(..., min_length=1, max_length=20, description="Ticker symbol")
    name: str = Field(..., min_length=1, max_length=200, description="Security name")
    quantity: int = Field(..., gt=0, description="Number of shares (positive integer)")

    class Config:
        str_strip_whitespace = True


class HoldingResponse(BaseModel):
    """Holding response."""
    id: str = Field(..., description="Holding ID")
    account_id: str = Field(..., description="Parent account ID")
    user_id: str = Field(..., description="Owner user ID")
    symbol: str = Field(..., description="Ticker symbol")
    name: str = Field(..., description="Security name")
    quantity: int = Field(..., description="Number of shares")
    is_marked: bool = Field(..., description="Favorite flag")
    added_at: int = Field(..., description="Creation time (ms since epoch)")


class MarkUpdate(BaseModel):
    """Set the mark flag on every holding of a symbol."""
    symbol: str = Field(..., min_length=1, max_length=20, description="Ticker symbol")
    is_marked: bool = Field(..., description="New mark state")

    class Config:
        str_strip_whitespace = True


class MarkUpdateResponse(BaseModel):
    """Outcome of a mark update."""
    symbol: str = Field(..., description="Ticker symbol")
    is_marked: bool = Field(..., description="Mark state now stored")
    matched_count: int = Field(..., description="Holdings carrying the symbol")
    modified_count: int = Field(..., description="Holdings whose flag changed")
