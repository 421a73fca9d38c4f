"""FastAPI dependencies binding repositories and services to a request."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.repositories import (
    AchievementRepository,
    CaseRepository,
    ItemRepository,
    NpcPresetRepository,
    UserRepository,
    WhitelistRepository,
)
from app.services.patient_generator import PatientProfileGenerator


def get_case_repository(db: AsyncSession = Depends(get_db)) -> CaseRepository:
    return CaseRepository(db)


def get_preset_repository(db: AsyncSession = Depends(get_db)) -> NpcPresetRepository:
    return NpcPresetRepository(db)


def get_item_repository(db: AsyncSession = Depends(get_db)) -> ItemRepository:
    return ItemRepository(db)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_achievement_repository(db: AsyncSession = Depends(get_db)) -> AchievementRepository:
    return AchievementRepository(db)


def get_whitelist_repository(db: AsyncSession = Depends(get_db)) -> WhitelistRepository:
    return WhitelistRepository(db)


def get_patient_generator() -> PatientProfileGenerator:
    """A fresh generator per request, seeded from system entropy."""
    return PatientProfileGenerator()
