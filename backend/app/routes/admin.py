"""Admin routes for entering master data (items, achievements, presets, whitelist)."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.auth import verify_api_key
from app.dependencies import (
    get_achievement_repository,
    get_item_repository,
    get_preset_repository,
    get_whitelist_repository,
)
from app.repositories import (
    AchievementRepository,
    DuplicateRecordError,
    ItemRepository,
    NpcPresetRepository,
    WhitelistRepository,
)
from app.schemas.catalog import AchievementData, ItemData, MessageResponse, WhitelistData
from app.schemas.demographics import VisualPreset

router = APIRouter(tags=["admin"])


def _conflict(e: DuplicateRecordError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/items", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_item(
    item_data: ItemData,
    items: ItemRepository = Depends(get_item_repository),
    _api_key: str = Depends(verify_api_key),
) -> MessageResponse:
    try:
        await items.create(item_data)
    except DuplicateRecordError as e:
        raise _conflict(e)
    return MessageResponse(msg="Item Saved")


@router.post("/achievements", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_achievement(
    achievement_data: AchievementData,
    achievements: AchievementRepository = Depends(get_achievement_repository),
    _api_key: str = Depends(verify_api_key),
) -> MessageResponse:
    try:
        await achievements.create(achievement_data)
    except DuplicateRecordError as e:
        raise _conflict(e)
    return MessageResponse(msg="Achievement Saved")


@router.post("/npc-presets", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_npc_preset(
    preset_data: VisualPreset,
    presets: NpcPresetRepository = Depends(get_preset_repository),
    _api_key: str = Depends(verify_api_key),
) -> MessageResponse:
    """Add a patient appearance preset. Gender must be Male or Female."""
    await presets.create(preset_data)
    return MessageResponse(msg="NPC Preset Saved")


@router.post("/whitelist", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_whitelist_entry(
    entry_data: WhitelistData,
    whitelist: WhitelistRepository = Depends(get_whitelist_repository),
    _api_key: str = Depends(verify_api_key),
) -> MessageResponse:
    try:
        await whitelist.create(entry_data)
    except DuplicateRecordError as e:
        raise _conflict(e)
    return MessageResponse(msg="Whitelisted")
