"""Medical case repository."""

from __future__ import annotations

import random

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.medical_case import MedicalCase
from app.repositories.base import insert_unique
from app.schemas.case import CaseAssets, CaseRewards, MedicalCaseData, PhysicalExam
from app.schemas.demographics import DemographicConstraint


def case_constraint(case: MedicalCase) -> DemographicConstraint:
    """Demographic constraint stored on a case.

    Built without validation: stored rows are checked by the patient
    generator, which reports bad bounds as ConstraintError.
    """
    return DemographicConstraint.model_construct(
        gender=case.gender,
        min_age=case.min_age,
        max_age=case.max_age,
        is_pregnant=case.is_pregnant,
    )


def case_to_schema(case: MedicalCase) -> MedicalCaseData:
    """Convert a MedicalCase row to its API schema."""
    return MedicalCaseData(
        case_id=case.case_id,
        disease_name=case.disease_name,
        category=case.category,
        difficulty=case.difficulty,
        demographics=DemographicConstraint(
            gender=case.gender,
            min_age=case.min_age,
            max_age=case.max_age,
            is_pregnant=case.is_pregnant,
        ),
        ai_scenario=case.ai_scenario,
        assets=CaseAssets.model_validate(case.assets or {}),
        physical_exam=PhysicalExam.model_validate(case.physical_exam or {}),
        anamnesis_checklist=case.anamnesis_checklist,
        examination_checklist=case.examination_checklist,
        contraindications=case.contraindications,
        correct_diagnosis=case.correct_diagnosis,
        similar_diagnoses=case.similar_diagnoses,
        correct_plans=case.correct_plans,
        required_tools=case.required_tools,
        rewards=CaseRewards(xp=case.reward_xp, gold=case.reward_gold),
    )


class CaseRepository:
    """Repository for medical case definitions."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(MedicalCase))
        return result.scalar() or 0

    async def random_case(self, rng: random.Random | None = None) -> MedicalCase | None:
        """Pick one case uniformly at random, or None if there are none."""
        total = await self.count()
        if total == 0:
            return None

        offset = (rng or random).randrange(total)
        result = await self.db.execute(
            select(MedicalCase).order_by(MedicalCase.case_id).offset(offset).limit(1)
        )
        return result.scalar_one_or_none()

    async def get_by_case_id(self, case_id: str) -> MedicalCase | None:
        result = await self.db.execute(select(MedicalCase).where(MedicalCase.case_id == case_id))
        return result.scalar_one_or_none()

    async def create(self, data: MedicalCaseData) -> MedicalCase:
        """Insert a new case.

        Raises:
            DuplicateRecordError: If the case_id is taken.
        """
        case = MedicalCase(
            case_id=data.case_id,
            disease_name=data.disease_name,
            category=data.category,
            difficulty=data.difficulty,
            gender=data.demographics.gender,
            min_age=data.demographics.min_age,
            max_age=data.demographics.max_age,
            is_pregnant=data.demographics.is_pregnant,
            ai_scenario=data.ai_scenario,
            assets=data.assets.model_dump(by_alias=True),
            physical_exam=data.physical_exam.model_dump(by_alias=True),
            anamnesis_checklist=data.anamnesis_checklist,
            examination_checklist=data.examination_checklist,
            contraindications=data.contraindications,
            correct_diagnosis=data.correct_diagnosis,
            similar_diagnoses=data.similar_diagnoses,
            correct_plans=data.correct_plans,
            required_tools=data.required_tools,
            reward_xp=data.rewards.xp,
            reward_gold=data.rewards.gold,
        )
        return await insert_unique(self.db, case, data.case_id)
