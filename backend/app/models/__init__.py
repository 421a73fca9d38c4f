"""SQLAlchemy models."""

from app.models.achievement import Achievement
from app.models.item import Item
from app.models.medical_case import MedicalCase
from app.models.npc_preset import NpcPreset
from app.models.user import InventoryEntry, User
from app.models.whitelist import WhitelistEntry

__all__ = [
    "Achievement",
    "InventoryEntry",
    "Item",
    "MedicalCase",
    "NpcPreset",
    "User",
    "WhitelistEntry",
]
