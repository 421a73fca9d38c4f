"""Player repository.

Covers account lookup, the gold/XP economy, inventory purchases, the
per-user patient session, and the pruned chat log.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.item import Item
from app.models.user import InventoryEntry, User
from app.repositories.items import ItemRepository
from app.schemas.demographics import PatientProfile

ChatRole = Literal["user", "model"]


class PurchaseError(ValueError):
    """Base class for purchase rule violations."""

    pass


class UserNotFoundError(PurchaseError):
    pass


class ItemNotFoundError(PurchaseError):
    pass


class InsufficientGoldError(PurchaseError):
    pass


class ItemAlreadyOwnedError(PurchaseError):
    pass


class UserRepository:
    """Repository for player accounts."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_roblox_id(self, roblox_id: str, for_update: bool = False) -> User | None:
        """Load a user by Roblox id.

        Args:
            roblox_id: Roblox account id.
            for_update: Lock the row until the transaction ends.
        """
        query = select(User).where(User.roblox_id == roblox_id)
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def add_progress(self, roblox_id: str, gold: int, xp: int) -> bool:
        """Atomically increment gold and XP. Returns False if the user is unknown."""
        result = await self.db.execute(
            update(User)
            .where(User.roblox_id == roblox_id)
            .values(gold=User.gold + gold, xp=User.xp + xp)
        )
        return result.rowcount > 0

    async def purchase(self, roblox_id: str, item_id: str) -> tuple[User, Item]:
        """Buy an item for a user, deducting its price.

        The user row is locked so concurrent purchases cannot overspend.

        Raises:
            UserNotFoundError: Unknown Roblox id.
            ItemNotFoundError: Unknown item id.
            InsufficientGoldError: Price exceeds the user's gold.
            ItemAlreadyOwnedError: Item already in the inventory.
        """
        user = await self.get_by_roblox_id(roblox_id, for_update=True)
        if user is None:
            raise UserNotFoundError(f"User {roblox_id} not found")

        item = await ItemRepository(self.db).get_by_item_id(item_id)
        if item is None:
            raise ItemNotFoundError(f"Item {item_id} not found")

        if user.gold < item.price:
            raise InsufficientGoldError(f"User {roblox_id} cannot afford {item_id}")
        if user.owns(item_id):
            raise ItemAlreadyOwnedError(f"User {roblox_id} already owns {item_id}")

        user.gold -= item.price
        user.inventory.append(InventoryEntry(item_id=item_id))
        await self.db.flush()
        return user, item

    async def save_patient_session(self, roblox_id: str, profile: PatientProfile) -> bool:
        """Store the generated patient as the user's current case session."""
        user = await self.get_by_roblox_id(roblox_id)
        if user is None:
            return False

        user.current_session = {
            "patientProfile": profile.model_dump(mode="json", by_alias=True),
            "startTime": datetime.now(timezone.utc).isoformat(),
        }
        await self.db.flush()
        return True

    async def get_patient_session(self, roblox_id: str) -> dict | None:
        """The stored patient profile for the user's case in progress, if any."""
        user = await self.get_by_roblox_id(roblox_id)
        if user is None or not user.current_session:
            return None
        return user.current_session.get("patientProfile")

    async def append_chat(self, roblox_id: str, role: ChatRole, text: str, limit: int) -> bool:
        """Append a chat turn and keep only the newest ``limit`` entries.

        Returns:
            False if the user is unknown.
        """
        user = await self.get_by_roblox_id(roblox_id, for_update=True)
        if user is None:
            return False

        history = list(user.chat_history)
        history.append(
            {
                "source": "roblox",
                "role": role,
                "parts": [{"text": text}],
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )
        user.chat_history = history[-limit:]
        await self.db.flush()
        return True
