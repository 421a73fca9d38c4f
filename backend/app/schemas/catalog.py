"""Pydantic schemas for catalog master data (items, achievements, whitelist)."""

from pydantic import Field

from app.constants import DEFAULT_ITEM_CATEGORY, DEFAULT_ITEM_RARITY
from app.schemas.base import ApiModel


class ItemData(ApiModel):
    """Shop/inventory item master record."""

    item_id: str = Field(min_length=1, max_length=255)
    display_name: str | None = None
    description: str | None = None
    icon: str | None = None
    category: str = DEFAULT_ITEM_CATEGORY
    price: int = Field(default=0, ge=0)
    is_buyable: bool = True
    rarity: str = DEFAULT_ITEM_RARITY


class AchievementData(ApiModel):
    achieve_id: str = Field(min_length=1, max_length=255)
    title: str | None = None
    description: str | None = None
    target_count: int | None = Field(default=None, ge=0)
    reward_gold: int | None = Field(default=None, ge=0)
    reward_xp: int | None = Field(default=None, ge=0, alias="rewardXP")


class WhitelistData(ApiModel):
    roblox_id: str = Field(min_length=1, max_length=64)
    added_by: str | None = None


class MessageResponse(ApiModel):
    """Plain acknowledgement for admin writes."""

    msg: str
