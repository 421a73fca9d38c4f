"""Repository layer for data access.

Repositories encapsulate database operations and provide a clean interface
for CRUD operations on domain objects.
"""

from app.repositories.cases import CaseRepository
from app.repositories.catalog import AchievementRepository, WhitelistRepository
from app.repositories.errors import DuplicateRecordError
from app.repositories.items import ItemRepository
from app.repositories.presets import NpcPresetRepository
from app.repositories.users import UserRepository

__all__ = [
    "AchievementRepository",
    "CaseRepository",
    "DuplicateRecordError",
    "ItemRepository",
    "NpcPresetRepository",
    "UserRepository",
    "WhitelistRepository",
]
