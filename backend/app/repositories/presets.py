"""NPC visual preset repository."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.npc_preset import NpcPreset
from app.schemas.demographics import Gender, VisualPreset


def preset_to_schema(preset: NpcPreset) -> VisualPreset:
    return VisualPreset(
        preset_id=preset.preset_id,
        gender=preset.gender,
        shirt_id=preset.shirt_id,
        pants_id=preset.pants_id,
        face_id=preset.face_id,
        hair_id=preset.hair_id,
        accessory_id=preset.accessory_id,
    )


class NpcPresetRepository:
    """Repository for patient appearance presets."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def sample_by_gender(self, gender: Gender) -> VisualPreset | None:
        """Return one random preset for the gender, or None if none match.

        Database errors propagate; an empty match is not an error.
        """
        result = await self.db.execute(
            select(NpcPreset)
            .where(NpcPreset.gender == gender)
            .order_by(func.random())
            .limit(1)
        )
        preset = result.scalar_one_or_none()
        return preset_to_schema(preset) if preset else None

    async def create(self, data: VisualPreset) -> NpcPreset:
        preset = NpcPreset(
            preset_id=data.preset_id,
            gender=data.gender,
            shirt_id=data.shirt_id,
            pants_id=data.pants_id,
            face_id=data.face_id,
            hair_id=data.hair_id,
            accessory_id=data.accessory_id,
        )
        self.db.add(preset)
        await self.db.flush()
        return preset
