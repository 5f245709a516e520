"""
Brokerage account model for holdings database.
"""
from typing import Optional

from pydantic import BaseModel, Field


class Account(BaseModel):
    """
    Account document model for MongoDB holdings_db.accounts collection.
    
    Accounts are never updated or deleted once created.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    user_id: str = Field(..., description="Owner user ID")
    name: str = Field(..., description="Account name")
    created_at: int = Field(..., description="Creation time in milliseconds since epoch")

    class Config:
        populate_by_name = True
