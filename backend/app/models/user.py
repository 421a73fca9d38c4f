"""Player account and inventory models."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint, func, text
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.constants import STARTING_GOLD, STARTING_LEVEL
from app.database import Base


class User(Base):
    """Player profile linked to a Roblox account.

    ``current_session`` holds the patient generated for the case in progress;
    ``chat_history`` is pruned to the most recent messages on every append.
    """

    __tablename__ = "users"

    # === Identity ===
    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    user_id: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True)
    roblox_id: Mapped[str | None] = mapped_column(String(64), unique=True, nullable=True, index=True)
    roblox_username: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # === Progress ===
    xp: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=STARTING_LEVEL)
    gold: Mapped[int] = mapped_column(Integer, nullable=False, default=STARTING_GOLD)
    achievements: Mapped[list[dict[str, Any]]] = mapped_column(
        JSONB,
        nullable=False,
        default=list,
        server_default=text("'[]'::jsonb"),
        comment="[{achieveId, progress, completed}]",
    )

    # === Session ===
    current_session: Mapped[dict[str, Any] | None] = mapped_column(
        JSONB,
        nullable=True,
        comment="{patientProfile, startTime} for the case in progress",
    )
    chat_history: Mapped[list[dict[str, Any]]] = mapped_column(
        JSONB,
        nullable=False,
        default=list,
        server_default=text("'[]'::jsonb"),
    )

    # === Relationships ===
    inventory: Mapped[list[InventoryEntry]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="InventoryEntry.obtained_at",
        lazy="selectin",
    )

    def owns(self, item_id: str) -> bool:
        return any(entry.item_id == item_id for entry in self.inventory)

    def __repr__(self) -> str:
        return f"<User(user_id={self.user_id}, roblox_id={self.roblox_id})>"


class InventoryEntry(Base):
    """An item owned by a user. Details live in the item catalog."""

    __tablename__ = "inventory_entries"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    user_pk: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    item_id: Mapped[str] = mapped_column(String(255), nullable=False)
    obtained_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    user: Mapped[User] = relationship(back_populates="inventory")

    __table_args__ = (
        UniqueConstraint("user_pk", "item_id", name="uq_inventory_user_item"),
    )

    def __repr__(self) -> str:
        return f"<InventoryEntry(item_id={self.item_id})>"
