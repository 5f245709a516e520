"""
Holding model for holdings database.
"""
from typing import Optional

from pydantic import BaseModel, Field


class Holding(BaseModel):
    """
    Holding document model for MongoDB holdings_db.holdings collection.
    
    One stock position under exactly one account. Only ``is_marked`` changes
    after creation.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    account_id: str = Field(..., description="Parent account ID")
    user_id: str = Field(..., description="Owner user ID")
    symbol: str = Field(..., description="Ticker symbol")
    name: str = Field(..., description="Company or security name")
    quantity: int = Field(..., gt=0, description="Number of shares")
    is_marked: bool = Field(default=False, description="Favorite flag")
    added_at: int = Field(..., description="Creation time in milliseconds since epoch")

    class Config:
        populate_by_name = True
