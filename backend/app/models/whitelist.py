"""Whitelisted Roblox accounts allowed to play without a profile."""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class WhitelistEntry(Base):
    __tablename__ = "whitelist"

    roblox_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    added_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<WhitelistEntry(roblox_id={self.roblox_id})>"
