"""Repositories for achievements and the login whitelist."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.achievement import Achievement
from app.models.whitelist import WhitelistEntry
from app.repositories.base import insert_unique
from app.schemas.catalog import AchievementData, WhitelistData


class AchievementRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: AchievementData) -> Achievement:
        """Raises DuplicateRecordError if the achieve_id is taken."""
        achievement = Achievement(**data.model_dump())
        return await insert_unique(self.db, achievement, data.achieve_id)


class WhitelistRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, roblox_id: str) -> WhitelistEntry | None:
        result = await self.db.execute(
            select(WhitelistEntry).where(WhitelistEntry.roblox_id == roblox_id)
        )
        return result.scalar_one_or_none()

    async def create(self, data: WhitelistData) -> WhitelistEntry:
        """Raises DuplicateRecordError if the account is already whitelisted."""
        entry = WhitelistEntry(roblox_id=data.roblox_id, added_by=data.added_by)
        return await insert_unique(self.db, entry, data.roblox_id)
