"""
Typed records exchanged with the backend.
"""
from typing import Optional

from pydantic import BaseModel


class Identity(BaseModel):
    """The authenticated user."""
    id: str
    email: str
    display_name: Optional[str] = None


class Account(BaseModel):
    """A named brokerage account."""
    id: str
    name: str
    user_id: str
    created_at: int


class Holding(BaseModel):
    """One stock position under one account."""
    id: str
    symbol: str
    name: str
    quantity: int
    account_id: str
    user_id: str
    is_marked: bool = False
    added_at: int
