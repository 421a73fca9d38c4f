"""Pydantic schemas for login, shop and progress endpoints."""

from pydantic import Field

from app.schemas.base import ApiModel
from app.schemas.catalog import ItemData


class InventoryItemView(ApiModel):
    """Inventory entry enriched with catalog details."""

    item_id: str
    item_name: str
    icon: str
    description: str = ""
    category: str = ""


class LoginResponse(ApiModel):
    """Login result for a registered player, with progress and inventory."""

    authorized: bool
    username: str | None = None
    gold: int
    xp: int
    level: int
    inventory: list[InventoryItemView] = Field(default_factory=list)


class GuestLoginResponse(ApiModel):
    """Login result for an unregistered account.

    Authorized only when whitelisted, in which case the player is "Guest".
    """

    authorized: bool
    username: str | None = None
    inventory: list[InventoryItemView] = Field(default_factory=list)


class BuyItemRequest(ApiModel):
    roblox_id: str = Field(min_length=1)
    item_id: str = Field(min_length=1)


class BuyItemResponse(ApiModel):
    """Purchase outcome. Business rule failures are ``success=False`` with a message."""

    success: bool
    msg: str | None = None
    new_gold: int | None = None
    item_details: ItemData | None = None


class ProgressUpdate(ApiModel):
    roblox_id: str = Field(min_length=1)
    gold_gained: int = 0
    xp_gained: int = 0


class SuccessResponse(ApiModel):
    success: bool
