"""Item catalog model (tools and cosmetics sold in the shop)."""

import uuid

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.constants import DEFAULT_ITEM_CATEGORY, DEFAULT_ITEM_RARITY
from app.database import Base


class Item(Base):
    """Master data for an item a player can own.

    Player inventories store only ``item_id``; display details are joined
    from this table at login.
    """

    __tablename__ = "items"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    item_id: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    display_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    icon: Mapped[str | None] = mapped_column(String(255), nullable=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False, default=DEFAULT_ITEM_CATEGORY)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_buyable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)
    rarity: Mapped[str] = mapped_column(String(50), nullable=False, default=DEFAULT_ITEM_RARITY)

    def __repr__(self) -> str:
        return f"<Item(item_id={self.item_id}, price={self.price})>"
