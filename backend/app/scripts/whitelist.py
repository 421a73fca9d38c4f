"""Whitelist a Roblox account so it can log in as a guest.

Usage:
    uv run python -m app.scripts.whitelist <roblox_id> [--added-by NAME]

Idempotent - skips accounts that are already whitelisted.
"""

import argparse
import asyncio

from sqlalchemy import text

from app.database import async_session_maker, engine
from app.repositories import DuplicateRecordError, WhitelistRepository
from app.schemas import WhitelistData


async def add_to_whitelist(roblox_id: str, added_by: str | None = None) -> bool:
    """Whitelist an account. Returns False if it was already whitelisted."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    print("  PostgreSQL: connected")

    async with async_session_maker() as session:
        try:
            await WhitelistRepository(session).create(
                WhitelistData(roblox_id=roblox_id, added_by=added_by)
            )
        except DuplicateRecordError:
            print(f"  Already whitelisted: {roblox_id}")
            return False
        await session.commit()

    print(f"  Whitelisted: {roblox_id}")
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Whitelist a Roblox account")
    parser.add_argument("roblox_id", help="Roblox account id")
    parser.add_argument("--added-by", default="cli", help="Who granted access")
    args = parser.parse_args()

    asyncio.run(add_to_whitelist(args.roblox_id, args.added_by))


if __name__ == "__main__":
    main()
