"""Item catalog repository."""

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.item import Item
from app.repositories.base import insert_unique
from app.schemas.catalog import ItemData


def item_to_schema(item: Item) -> ItemData:
    return ItemData(
        item_id=item.item_id,
        display_name=item.display_name,
        description=item.description,
        icon=item.icon,
        category=item.category,
        price=item.price,
        is_buyable=item.is_buyable,
        rarity=item.rarity,
    )


class ItemRepository:
    """Repository for item master data."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_buyable(self) -> list[Item]:
        """Items shown in the shop."""
        result = await self.db.execute(
            select(Item).where(Item.is_buyable.is_(True)).order_by(Item.price, Item.item_id)
        )
        return list(result.scalars().all())

    async def get_by_item_id(self, item_id: str) -> Item | None:
        result = await self.db.execute(select(Item).where(Item.item_id == item_id))
        return result.scalar_one_or_none()

    async def get_many(self, item_ids: Iterable[str]) -> dict[str, Item]:
        """Catalog entries keyed by item_id; unknown ids are simply absent."""
        ids = set(item_ids)
        if not ids:
            return {}
        result = await self.db.execute(select(Item).where(Item.item_id.in_(ids)))
        return {item.item_id: item for item in result.scalars().all()}

    async def create(self, data: ItemData) -> Item:
        """Insert a new item.

        Raises:
            DuplicateRecordError: If the item_id is taken.
        """
        item = Item(**data.model_dump())
        return await insert_unique(self.db, item, data.item_id)
