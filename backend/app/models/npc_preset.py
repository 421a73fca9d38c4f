"""NPC visual preset model."""

import uuid

from sqlalchemy import Enum, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.schemas.demographics import Gender


class NpcPreset(Base):
    """One possible patient appearance, as Roblox asset ids."""

    __tablename__ = "npc_presets"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    preset_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    gender: Mapped[Gender] = mapped_column(
        Enum(Gender, name="patient_gender", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        index=True,
    )
    shirt_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    pants_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    face_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    hair_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    accessory_id: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<NpcPreset(preset_id={self.preset_id}, gender={self.gender})>"
