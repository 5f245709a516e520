"""
Accounts router for brokerage accounts and the holdings under them.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from app.core.exceptions import StoreError
from app.database.connections import get_mongo_client
from app.database.databases import holdings_db
from app.dependencies.auth import CurrentUser
from app.schemas.account import AccountCreate, AccountResponse
from app.schemas.holding import HoldingCreate, HoldingResponse
from app.services.account_service import AccountService
from app.services.holding_service import HoldingService

router = APIRouter(prefix="/accounts", tags=["Accounts"])


async def get_account_service() -> AccountService:
    """Dependency to get AccountService instance."""
    client = await get_mongo_client()
    return AccountService(client[holdings_db.DB_NAME])


async def get_holding_service() -> HoldingService:
    """Dependency to get HoldingService instance."""
    client = await get_mongo_client()
    return HoldingService(client[holdings_db.DB_NAME], client)


def store_unavailable(e: StoreError) -> HTTPException:
    """Map a store failure to a 503 response."""
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=str(e),
    )


# ==================== Account CRUD ====================


@router.get(
    "",
    response_model=list[AccountResponse],
    summary="List accounts",
)
async def list_accounts(
    current_user: CurrentUser,
    account_service: AccountService = Depends(get_account_service),
):
    """
    List all accounts of the current user. Order is not guaranteed.
    
    Requires valid token as query parameter: `?token=xxx`
    """
    try:
        return await account_service.list_accounts(current_user.id)
    except StoreError as e:
        raise store_unavailable(e)


@router.post(
    "",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create account",
)
async def create_account(
    body: AccountCreate,
    current_user: CurrentUser,
    account_service: AccountService = Depends(get_account_service),
):
    """
    Create a new brokerage account.
    
    - **name**: Account name (required, not blank)
    
    Requires valid token as query parameter: `?token=xxx`
    """
    try:
        return await account_service.create_account(current_user.id, body)
    except StoreError as e:
        raise store_unavailable(e)


# ==================== Holdings per account ====================


@router.get(
    "/{account_id}/holdings",
    response_model=list[HoldingResponse],
    summary="List holdings of an account",
)
async def list_account_holdings(
    account_id: str,
    current_user: CurrentUser,
    holding_service: HoldingService = Depends(get_holding_service),
):
    """
    List the holdings recorded under one account.
    
    Requires valid token as query parameter: `?token=xxx`
    """
    try:
        holdings = await holding_service.list_holdings_by_account(
            account_id, current_user.id
        )
    except StoreError as e:
        raise store_unavailable(e)
    
    if holdings is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Account not found",
        )
    
    return holdings


@router.post(
    "/{account_id}/holdings",
    response_model=HoldingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add holding to account",
)
async def add_holding(
    account_id: str,
    body: HoldingCreate,
    current_user: CurrentUser,
    holding_service: HoldingService = Depends(get_holding_service),
):
    """
    Record a stock holding under an account.
    
    - **symbol**: Ticker symbol
    - **name**: Security name
    - **quantity**: Number of shares (positive integer)
    
    Requires valid token as query parameter: `?token=xxx`
    """
    try:
        holding = await holding_service.add_holding(account_id, current_user.id, body)
    except StoreError as e:
        raise store_unavailable(e)
    
    if not holding:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Account not found",
        )
    
    return holding
