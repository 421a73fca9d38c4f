"""Pytest configuration and shared fixtures.

This module provides centralized test fixtures for:
- HTTP client for API testing, with repositories replaced by mocks
- PostgreSQL test database sessions for repository tests
- Common game data (cases, presets, items, users)
"""

import os
import random
import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.config import settings
from app.database import Base, get_db
from app.dependencies import (
    get_achievement_repository,
    get_case_repository,
    get_item_repository,
    get_patient_generator,
    get_preset_repository,
    get_user_repository,
    get_whitelist_repository,
)
from app.main import app
from app.models import InventoryEntry, Item, MedicalCase, User
from app.repositories import (
    AchievementRepository,
    CaseRepository,
    ItemRepository,
    NpcPresetRepository,
    UserRepository,
    WhitelistRepository,
)
from app.schemas.case import Difficulty
from app.schemas.demographics import Gender, GenderConstraint, VisualPreset
from app.services.patient_generator import PatientProfileGenerator

TEST_SEED = 1234


# =============================================================================
# Repository Mocks
# =============================================================================


@pytest.fixture
def case_repo() -> MagicMock:
    return MagicMock(spec=CaseRepository)


@pytest.fixture
def preset_repo() -> MagicMock:
    repo = MagicMock(spec=NpcPresetRepository)
    repo.sample_by_gender.return_value = None
    return repo


@pytest.fixture
def user_repo() -> MagicMock:
    repo = MagicMock(spec=UserRepository)
    repo.get_by_roblox_id.return_value = None
    repo.get_patient_session.return_value = None
    repo.append_chat.return_value = True
    repo.save_patient_session.return_value = True
    return repo


@pytest.fixture
def item_repo() -> MagicMock:
    repo = MagicMock(spec=ItemRepository)
    repo.get_many.return_value = {}
    repo.list_buyable.return_value = []
    return repo


@pytest.fixture
def whitelist_repo() -> MagicMock:
    repo = MagicMock(spec=WhitelistRepository)
    repo.get.return_value = None
    return repo


@pytest.fixture
def achievement_repo() -> MagicMock:
    return MagicMock(spec=AchievementRepository)


# =============================================================================
# HTTP Client Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def client(case_repo, preset_repo, user_repo, item_repo, whitelist_repo, achievement_repo):
    """Async test client for the FastAPI app with mocked repositories.

    The patient generator is seeded so responses are reproducible.
    """

    async def override_get_db():
        yield AsyncMock(spec=AsyncSession)

    overrides = {
        get_db: override_get_db,
        get_case_repository: lambda: case_repo,
        get_preset_repository: lambda: preset_repo,
        get_user_repository: lambda: user_repo,
        get_item_repository: lambda: item_repo,
        get_whitelist_repository: lambda: whitelist_repo,
        get_achievement_repository: lambda: achievement_repo,
        get_patient_generator: lambda: PatientProfileGenerator(rng=random.Random(TEST_SEED)),
    }
    app.dependency_overrides.update(overrides)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    # Clean up overrides
    for dependency in overrides:
        app.dependency_overrides.pop(dependency, None)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Authentication headers for API requests."""
    return {"Authorization": settings.api_secret}


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine with automatic schema management.

    Creates all tables before tests, drops them after.
    Uses DATABASE_TEST_URL env var if set, otherwise derives from settings.
    Skips the test when the database is unreachable.
    """
    # Use env var if set (for CI/CD), otherwise derive from settings
    db_url = os.environ.get("DATABASE_TEST_URL")
    if not db_url:
        base_url = settings.database_url
        db_url = (
            base_url + "_test"
            if base_url.endswith("/dentsim")
            else base_url.rsplit("/", 1)[0] + "/dentsim_test"
        )

    engine = create_async_engine(db_url, echo=False)

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
    except (SQLAlchemyError, OSError) as e:
        await engine.dispose()
        pytest.skip(f"PostgreSQL test database not available: {e}")

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncSession:
    """Create test database session with automatic rollback.

    Each test gets a fresh session that rolls back on completion,
    ensuring test isolation.
    """
    session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session
        await session.rollback()


# =============================================================================
# Game Data Fixtures
# =============================================================================


@pytest.fixture
def roblox_id() -> str:
    """Generate a unique Roblox account id for testing."""
    return str(uuid.uuid4().int)[:10]


@pytest.fixture
def sample_case() -> MedicalCase:
    """Unsaved medical case with a fixed Female 20-20 pregnant constraint."""
    return MedicalCase(
        id=uuid.uuid4(),
        case_id="GING-PREG-01",
        disease_name="Gingivitis Kehamilan",
        category="Periodonsia",
        difficulty=Difficulty.HARD,
        gender=GenderConstraint.FEMALE,
        min_age=20,
        max_age=20,
        is_pregnant=True,
        ai_scenario="Gusi bengkak dan mudah berdarah saat sikat gigi.",
        assets={"intraoral": "rbxassetid://1", "radiograf": None},
        physical_exam={"palpasi": "Positif (+)"},
        anamnesis_checklist=["keluhan", "durasi"],
        examination_checklist=["palpasi"],
        contraindications=["radiograf"],
        correct_diagnosis="Gingivitis Kehamilan",
        similar_diagnoses=["Periodontitis"],
        correct_plans=["Scaling"],
        required_tools=["Sonde Half"],
        reward_xp=120,
        reward_gold=250,
    )


@pytest.fixture
def female_preset() -> VisualPreset:
    return VisualPreset(
        preset_id="Casual_Female_1",
        gender=Gender.FEMALE,
        shirt_id="rbxassetid://11",
        pants_id="rbxassetid://12",
        face_id="rbxassetid://13",
        hair_id="rbxassetid://14",
    )


@pytest.fixture
def sample_item() -> Item:
    return Item(
        item_id="Ekskavator",
        display_name="Ekskavator Double Ended",
        description="Membersihkan jaringan karies lunak.",
        icon="rbxassetid://21",
        category="Perawatan",
        price=500,
        is_buyable=True,
        rarity="Rare",
    )


@pytest.fixture
def sample_user(roblox_id: str) -> User:
    """Unsaved player owning one catalog item and one item missing from the catalog."""
    user = User(
        user_id="player-1",
        username="drgigi",
        roblox_id=roblox_id,
        gold=1000,
        xp=40,
        level=2,
        chat_history=[],
    )
    user.inventory = [
        InventoryEntry(item_id="Ekskavator"),
        InventoryEntry(item_id="Retired Tool"),
    ]
    return user
