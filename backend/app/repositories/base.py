"""Shared insert helper for master-data repositories."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.repositories.errors import DuplicateRecordError


async def insert_unique(db: AsyncSession, record: Base, key: str) -> Base:
    """Insert a record inside a savepoint.

    A unique-key violation rolls back only the savepoint, so the caller's
    session stays usable.

    Raises:
        DuplicateRecordError: If a record with the same natural key exists.
    """
    try:
        async with db.begin_nested():
            db.add(record)
    except IntegrityError as e:
        raise DuplicateRecordError(f"{type(record).__name__} '{key}' already exists") from e
    return record
