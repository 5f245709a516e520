"""
Holdings router for cross-account holding queries and marks.
"""
from fastapi import APIRouter, Depends

from app.core.exceptions import StoreError
from app.dependencies.auth import CurrentUser
from app.routers.accounts import get_holding_service, store_unavailable
from app.schemas.holding import HoldingResponse, MarkUpdate, MarkUpdateResponse
from app.services.holding_service import HoldingService

router = APIRouter(prefix="/holdings", tags=["Holdings"])


@router.get(
    "",
    response_model=list[HoldingResponse],
    summary="List all holdings",
)
async def list_all_holdings(
    current_user: CurrentUser,
    holding_service: HoldingService = Depends(get_holding_service),
):
    """
    List every holding of the current user across all accounts.
    
    Requires valid token as query parameter: `?token=xxx`
    """
    try:
        return await holding_service.list_all_holdings(current_user.id)
    except StoreError as e:
        raise store_unavailable(e)


@router.put(
    "/marks",
    response_model=MarkUpdateResponse,
    summary="Mark or unmark a symbol",
)
async def set_marked(
    body: MarkUpdate,
    current_user: CurrentUser,
    holding_service: HoldingService = Depends(get_holding_service),
):
    """
    Set the mark flag on **every** holding of the symbol owned by the current
    user, in all accounts, as one atomic write.
    
    - **symbol**: Ticker symbol
    - **is_marked**: New mark state
    
    Requires valid token as query parameter: `?token=xxx`
    """
    try:
        return await holding_service.set_marked(
            body.symbol, current_user.id, body.is_marked
        )
    except StoreError as e:
        raise store_unavailable(e)
