"""Shop and economy routes."""

import logging

from fastapi import APIRouter, Depends

from app.auth import verify_api_key
from app.dependencies import get_item_repository, get_user_repository
from app.repositories import ItemRepository, UserRepository
from app.repositories.items import item_to_schema
from app.repositories.users import (
    InsufficientGoldError,
    ItemAlreadyOwnedError,
    ItemNotFoundError,
    UserNotFoundError,
)
from app.schemas.catalog import ItemData
from app.schemas.user import BuyItemRequest, BuyItemResponse, ProgressUpdate, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["shop"])

# Messages shown to the player in-game
MSG_NOT_FOUND = "Data not found"
MSG_NOT_ENOUGH_GOLD = "Gold kurang"
MSG_ALREADY_OWNED = "Sudah punya"


@router.get("/shop/items", response_model=list[ItemData])
async def list_shop_items(
    items: ItemRepository = Depends(get_item_repository),
    _api_key: str = Depends(verify_api_key),
) -> list[ItemData]:
    """List items that can be bought in the shop."""
    return [item_to_schema(item) for item in await items.list_buyable()]


@router.post("/buy-item", response_model=BuyItemResponse)
async def buy_item(
    request: BuyItemRequest,
    users: UserRepository = Depends(get_user_repository),
    _api_key: str = Depends(verify_api_key),
) -> BuyItemResponse:
    """Buy an item with gold.

    Rule violations are reported as ``success=False`` with a player-facing
    message rather than an HTTP error.
    """
    try:
        user, item = await users.purchase(request.roblox_id, request.item_id)
    except (UserNotFoundError, ItemNotFoundError):
        return BuyItemResponse(success=False, msg=MSG_NOT_FOUND)
    except InsufficientGoldError:
        return BuyItemResponse(success=False, msg=MSG_NOT_ENOUGH_GOLD)
    except ItemAlreadyOwnedError:
        return BuyItemResponse(success=False, msg=MSG_ALREADY_OWNED)

    logger.info("Roblox account %s bought %s for %d gold", request.roblox_id, item.item_id, item.price)
    return BuyItemResponse(success=True, new_gold=user.gold, item_details=item_to_schema(item))


@router.post("/update-progress", response_model=SuccessResponse)
async def update_progress(
    request: ProgressUpdate,
    users: UserRepository = Depends(get_user_repository),
    _api_key: str = Depends(verify_api_key),
) -> SuccessResponse:
    """Add gold and XP earned in a session."""
    updated = await users.add_progress(request.roblox_id, request.gold_gained, request.xp_gained)
    if not updated:
        logger.warning("Progress update for unknown Roblox account %s", request.roblox_id)
    return SuccessResponse(success=updated)
