"""Login route: load a player's profile and enriched inventory."""

import logging

from fastapi import APIRouter, Depends

from app.auth import verify_api_key
from app.constants import UNKNOWN_ITEM_ICON
from app.dependencies import get_item_repository, get_user_repository, get_whitelist_repository
from app.models import Item, InventoryEntry
from app.repositories import ItemRepository, UserRepository, WhitelistRepository
from app.schemas.user import GuestLoginResponse, InventoryItemView, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["login"])

GUEST_USERNAME = "Guest"


def _inventory_view(entry: InventoryEntry, item: Item | None) -> InventoryItemView:
    """Merge an owned item id with its catalog details.

    Items missing from the catalog fall back to their id and a blank icon.
    """
    if item is None:
        return InventoryItemView(item_id=entry.item_id, item_name=entry.item_id, icon=UNKNOWN_ITEM_ICON)
    return InventoryItemView(
        item_id=entry.item_id,
        item_name=item.display_name or entry.item_id,
        icon=item.icon or UNKNOWN_ITEM_ICON,
        description=item.description or "",
        category=item.category or "",
    )


@router.get("/roblox-login/{roblox_id}", response_model=LoginResponse | GuestLoginResponse)
async def roblox_login(
    roblox_id: str,
    users: UserRepository = Depends(get_user_repository),
    items: ItemRepository = Depends(get_item_repository),
    whitelist: WhitelistRepository = Depends(get_whitelist_repository),
    _api_key: str = Depends(verify_api_key),
) -> LoginResponse | GuestLoginResponse:
    """Authorize a Roblox account and return its game data.

    Args:
        roblox_id: Roblox account id.

    Returns:
        Progress and inventory for registered players. Unregistered players
        are authorized as guests only when whitelisted.
    """
    user = await users.get_by_roblox_id(roblox_id)

    if user is None:
        entry = await whitelist.get(roblox_id)
        if entry is None:
            logger.info("Rejected login for unknown Roblox account %s", roblox_id)
        return GuestLoginResponse(
            authorized=entry is not None,
            username=GUEST_USERNAME if entry else None,
        )

    catalog = await items.get_many(entry.item_id for entry in user.inventory)

    return LoginResponse(
        authorized=True,
        username=user.username,
        gold=user.gold,
        xp=user.xp,
        level=user.level,
        inventory=[_inventory_view(entry, catalog.get(entry.item_id)) for entry in user.inventory],
    )
