"""
Account service for brokerage account management.
"""
import logging
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.core.clock import now_ms
from app.core.exceptions import StoreError
from app.database.databases import holdings_db
from app.models.account import Account
from app.schemas.account import AccountCreate, AccountResponse

logger = logging.getLogger(__name__)


class AccountService:
    """Service for account operations. Every query is scoped by owner."""
    
    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with holdings database."""
        self.db = db
        self.accounts = db[holdings_db.Collections.ACCOUNTS]
    
    async def create_account(
        self, user_id: str, request: AccountCreate
    ) -> AccountResponse:
        """Create a new account owned by a user."""
        account = Account(user_id=user_id, name=request.name, created_at=now_ms())
        account_doc = account.model_dump(exclude={"id"})
        
        try:
            result = await self.accounts.insert_one(account_doc)
        except PyMongoError as e:
            logger.error(f"Failed to create account for user {user_id}: {e}")
            raise StoreError("Failed to create account") from e
        
        account_doc["_id"] = result.inserted_id
        return self._account_to_response(account_doc)
    
    async def list_accounts(self, user_id: str) -> list[AccountResponse]:
        """List all accounts owned by a user, in no particular order."""
        try:
            cursor = self.accounts.find({"user_id": user_id})
            accounts = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Failed to list accounts for user {user_id}: {e}")
            raise StoreError("Failed to list accounts") from e
        
        return [self._account_to_response(a) for a in accounts]
    
    async def get_account(
        self, account_id: str, user_id: str
    ) -> Optional[AccountResponse]:
        """Get an account by ID (must belong to user)."""
        try:
            account_doc = await self.accounts.find_one({
                "_id": ObjectId(account_id),
                "user_id": user_id,
            })
        except InvalidId:
            return None
        except PyMongoError as e:
            logger.error(f"Failed to load account {account_id}: {e}")
            raise StoreError("Failed to load account") from e
        
        if not account_doc:
            return None
        
        return self._account_to_response(account_doc)
    
    def _account_to_response(self, doc: dict) -> AccountResponse:
        """Convert MongoDB document to AccountResponse."""
        return AccountResponse(
            id=str(doc["_id"]),
            user_id=doc["user_id"],
            name=doc["name"],
            created_at=doc["created_at"],
        )
