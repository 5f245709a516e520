"""
Holding service for stock positions and the cross-account mark flag.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.config import get_settings
from app.core.clock import now_ms
from app.core.exceptions import StoreError
from app.database.databases import holdings_db
from app.models.holding import Holding
from app.schemas.holding import (
    HoldingCreate,
    HoldingResponse,
    MarkUpdateResponse,
)
from app.services.account_service import AccountService

logger = logging.getLogger(__name__)


class HoldingService:
    """Service for holding operations."""
    
    def __init__(
        self,
        db: AsyncIOMotorDatabase,
        client: Optional[AsyncIOMotorClient] = None,
    ):
        """
        Initialize with holdings database.
        
        ``client`` is needed to open a transaction for ``set_marked``. Without
        it, or with ``mongo_use_transactions`` disabled, the update runs as a
        single ``update_many``.
        """
        self.db = db
        self.client = client
        self.holdings = db[holdings_db.Collections.HOLDINGS]
        self.accounts = AccountService(db)
        self.settings = get_settings()
    
    # ==================== Holding CRUD ====================
    
    async def add_holding(
        self, account_id: str, user_id: str, request: HoldingCreate
    ) -> Optional[HoldingResponse]:
        """
        Add a holding to an account.
        
        Returns None if the account does not exist or belongs to another user.
        """
        account = await self.accounts.get_account(account_id, user_id)
        if not account:
            return None
        
        holding = Holding(
            account_id=account_id,
            user_id=user_id,
            symbol=request.symbol,
            name=request.name,
            quantity=request.quantity,
            is_marked=False,
            added_at=now_ms(),
        )
        holding_doc = holding.model_dump(exclude={"id"})
        
        try:
            result = await self.holdings.insert_one(holding_doc)
        except PyMongoError as e:
            logger.error(f"Failed to add {request.symbol} to account {account_id}: {e}")
            raise StoreError("Failed to add holding") from e
        
        holding_doc["_id"] = result.inserted_id
        return self._holding_to_response(holding_doc)
    
    async def list_holdings_by_account(
        self, account_id: str, user_id: str
    ) -> Optional[list[HoldingResponse]]:
        """
        List the holdings recorded under one account.
        
        Returns None if the account does not exist or belongs to another user.
        """
        account = await self.accounts.get_account(account_id, user_id)
        if not account:
            return None
        
        return await self._find({"account_id": account_id})
    
    async def list_all_holdings(self, user_id: str) -> list[HoldingResponse]:
        """List every holding owned by a user, across all accounts."""
        return await self._find({"user_id": user_id})
    
    # ==================== Marks ====================
    
    async def set_marked(
        self, symbol: str, user_id: str, is_marked: bool
    ) -> MarkUpdateResponse:
        """
        Set ``is_marked`` on every holding of ``symbol`` owned by the user.
        
        This spans all of the user's accounts, not a single holding. The write
        is all-or-nothing: inside a transaction when one can be opened, so a
        failure leaves every flag untouched. Repeating a call with the same
        value matches the same holdings and modifies none.
        
        Raises:
            StoreError: If the update fails
        """
        query = {"user_id": user_id, "symbol": symbol}
        update = {"$set": {"is_marked": is_marked}}
        
        try:
            if self.client is not None and self.settings.mongo_use_transactions:
                async with await self.client.start_session() as session:
                    async with session.start_transaction():
                        result = await self.holdings.update_many(
                            query, update, session=session
                        )
            else:
                result = await self.holdings.update_many(query, update)
        except PyMongoError as e:
            logger.error(f"Failed to set mark on {symbol} for user {user_id}: {e}")
            raise StoreError("Failed to update marks") from e
        
        logger.info(
            f"Marked {symbol}={is_marked} for user {user_id} "
            f"({result.modified_count}/{result.matched_count} changed)"
        )
        return MarkUpdateResponse(
            symbol=symbol,
            is_marked=is_marked,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
        )
    
    # ==================== Helpers ====================
    
    async def _find(self, query: dict) -> list[HoldingResponse]:
        """Run an equality query and convert the matches."""
        try:
            cursor = self.holdings.find(query)
            holdings = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Failed to list holdings for {query}: {e}")
            raise StoreError("Failed to list holdings") from e
        
        return [self._holding_to_response(h) for h in holdings]
    
    def _holding_to_response(self, doc: dict) -> HoldingResponse:
        """Convert MongoDB document to HoldingResponse."""
        return HoldingResponse(
            id=str(doc["_id"]),
            account_id=doc["account_id"],
            user_id=doc["user_id"],
            symbol=doc["symbol"],
            name=doc["name"],
            quantity=doc["quantity"],
            is_marked=doc.get("is_marked", False),
            added_at=doc["added_at"],
        )
