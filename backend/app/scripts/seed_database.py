"""Seed database with master data fixtures.

Creates the schema and loads items, achievements, NPC presets and medical
cases from fixtures/seed/ into PostgreSQL.

Usage:
    uv run python -m app.scripts.seed_database

The script is idempotent - it can be run multiple times safely.
Records whose natural key already exists are skipped.
"""

import asyncio
import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base, async_session_maker, engine
from app.models import NpcPreset
from app.repositories import (
    AchievementRepository,
    CaseRepository,
    DuplicateRecordError,
    ItemRepository,
    NpcPresetRepository,
)
from app.schemas import AchievementData, ItemData, MedicalCaseData, VisualPreset

SEED_FILES = ("items", "achievements", "npc_presets", "medical_cases")


async def verify_connections() -> bool:
    """Verify the database connection is working."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        print("  PostgreSQL: connected")
    except Exception as e:
        print(f"  PostgreSQL: FAILED - {e}")
        return False
    return True


def load_seed_file(path: Path) -> list[dict[str, Any]]:
    """Read a JSON array of records."""
    with open(path) as f:
        records = json.load(f)
    if not isinstance(records, list):
        raise ValueError(f"{path.name} must contain a JSON array")
    return records


async def _preset_exists(db: AsyncSession, preset: VisualPreset) -> bool:
    result = await db.execute(
        select(NpcPreset.id).where(
            NpcPreset.preset_id == preset.preset_id,
            NpcPreset.gender == preset.gender,
        )
    )
    return result.first() is not None


async def seed_records(db: AsyncSession, kind: str, records: list[dict[str, Any]]) -> int:
    """Insert records of one kind, skipping ones that already exist.

    Args:
        db: Database session.
        kind: Seed file stem (items, achievements, npc_presets, medical_cases).
        records: Raw records with camelCase keys.

    Returns:
        Number of records inserted.

    Raises:
        pydantic.ValidationError: If a record is malformed.
    """
    inserted = 0
    for record in records:
        try:
            if kind == "items":
                await ItemRepository(db).create(ItemData.model_validate(record))
            elif kind == "achievements":
                await AchievementRepository(db).create(AchievementData.model_validate(record))
            elif kind == "npc_presets":
                preset = VisualPreset.model_validate(record)
                if await _preset_exists(db, preset):
                    continue
                await NpcPresetRepository(db).create(preset)
            elif kind == "medical_cases":
                case_data = MedicalCaseData.model_validate(record)
                for warning in case_data.demographics.warnings():
                    print(f"    WARNING {case_data.case_id}: {warning}")
                await CaseRepository(db).create(case_data)
            else:
                raise ValueError(f"Unknown seed kind: {kind}")
        except DuplicateRecordError:
            continue
        inserted += 1
    return inserted


async def seed_database(fixtures_dir: Path) -> dict[str, int]:
    """
    Create tables and seed all master data fixtures.

    Args:
        fixtures_dir: Path to fixtures/seed directory.

    Returns:
        Dictionary with inserted counts per seed file.
    """
    stats = {kind: 0 for kind in SEED_FILES}

    print("\nVerifying database connection...")
    if not await verify_connections():
        raise RuntimeError("Database connection verification failed")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("  Schema: ready")

    for kind in SEED_FILES:
        path = fixtures_dir / f"{kind}.json"
        if not path.exists():
            print(f"\n  Skipping {kind}: {path.name} not found")
            continue

        print(f"\n  Loading {path.name}...")
        records = load_seed_file(path)
        async with async_session_maker() as session:
            try:
                stats[kind] = await seed_records(session, kind, records)
            except ValidationError:
                await session.rollback()
                raise
            await session.commit()
        print(f"    Inserted: {stats[kind]} / {len(records)}")

    return stats


def main() -> None:
    """Main entry point for the seed script."""
    # Resolve fixtures directory relative to repo root
    repo_root = Path(__file__).parent.parent.parent.parent
    fixtures_dir = repo_root / "fixtures" / "seed"

    if not fixtures_dir.exists():
        print(f"Fixtures directory not found: {fixtures_dir}")
        return

    print("=" * 50)
    print("DentSim Database Seeding")
    print("=" * 50)

    stats = asyncio.run(seed_database(fixtures_dir))

    print("\n" + "=" * 50)
    print("Summary")
    print("=" * 50)
    for kind, count in stats.items():
        print(f"  {kind}: {count} inserted")
    print("\nDatabase seeding complete!")


if __name__ == "__main__":
    main()
