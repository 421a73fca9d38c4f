"""Medical case model: the exam scenario behind each patient.

A case carries the demographic constraint the patient randomizer must
respect, the AI roleplay scenario, the physical examination findings shown
in-game, and the OSCE checklist used for scoring.
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import Boolean, CheckConstraint, Enum, Integer, String, Text, text
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.constants import DEFAULT_CASE_CATEGORY
from app.database import Base
from app.schemas.case import Difficulty
from app.schemas.demographics import GenderConstraint


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


class MedicalCase(Base):
    """Dental case definition."""

    __tablename__ = "medical_cases"

    # === Identity ===
    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    case_id: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    # === Classification ===
    disease_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False, default=DEFAULT_CASE_CATEGORY)
    difficulty: Mapped[Difficulty] = mapped_column(
        Enum(Difficulty, name="case_difficulty", values_callable=_enum_values),
        nullable=False,
        default=Difficulty.EASY,
    )

    # === Demographic constraint ===
    gender: Mapped[GenderConstraint] = mapped_column(
        Enum(GenderConstraint, name="gender_constraint", values_callable=_enum_values),
        nullable=False,
        default=GenderConstraint.ANY,
    )
    min_age: Mapped[int] = mapped_column(Integer, nullable=False, default=17)
    max_age: Mapped[int] = mapped_column(Integer, nullable=False, default=60)
    is_pregnant: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # === Scenario & assets ===
    ai_scenario: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Condition narrative fed to the roleplay prompt",
    )
    assets: Mapped[dict[str, Any]] = mapped_column(
        JSONB,
        nullable=False,
        default=dict,
        server_default=text("'{}'::jsonb"),
        comment="intraoral / radiograph image asset ids",
    )
    physical_exam: Mapped[dict[str, Any]] = mapped_column(
        JSONB,
        nullable=False,
        default=dict,
        server_default=text("'{}'::jsonb"),
        comment="Finding per examination (sonde, perkusi, palpasi, thermal, mobilitas)",
    )

    # === OSCE checklist ===
    anamnesis_checklist: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)
    examination_checklist: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)
    contraindications: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)
    correct_diagnosis: Mapped[str | None] = mapped_column(String(255), nullable=True)
    similar_diagnoses: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)
    correct_plans: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)
    required_tools: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)

    # === Rewards ===
    reward_xp: Mapped[int] = mapped_column(Integer, nullable=False, default=50)
    reward_gold: Mapped[int] = mapped_column(Integer, nullable=False, default=100)

    __table_args__ = (
        CheckConstraint("min_age > 0 AND min_age <= max_age", name="ck_medical_case_age_bounds"),
    )

    def __repr__(self) -> str:
        return f"<MedicalCase(case_id={self.case_id}, difficulty={self.difficulty})>"
