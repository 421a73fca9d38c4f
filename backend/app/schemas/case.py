"""Pydantic schemas for medical cases and case sessions.

Wire names follow the game client's (Indonesian) field names; Python
attributes are English.
"""

from enum import Enum

from pydantic import Field

from app.constants import DEFAULT_CASE_CATEGORY
from app.schemas.base import ApiModel
from app.schemas.demographics import DemographicConstraint, PatientProfile


class Difficulty(str, Enum):
    """Case difficulty tiers."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class CaseAssets(ApiModel):
    """Image assets shown during examination."""

    intraoral: str | None = None
    radiograph: str | None = Field(default=None, alias="radiograf")


class PhysicalExam(ApiModel):
    """What each examination tool reveals when used on the patient."""

    sonde: str = "Normal"
    percussion: str = Field(default="Negatif (-)", alias="perkusi")
    palpation: str = Field(default="Negatif (-)", alias="palpasi")
    thermal: str = "Normal"
    mobility: str = Field(default="Grade 0", alias="mobilitas")


class CaseRewards(ApiModel):
    xp: int = Field(default=50, ge=0)
    gold: int = Field(default=100, ge=0)


class MedicalCaseData(ApiModel):
    """Full medical case definition, used for both creation and responses."""

    case_id: str = Field(min_length=1, max_length=255)
    disease_name: str | None = Field(default=None, alias="namaPenyakit")
    category: str = Field(default=DEFAULT_CASE_CATEGORY, alias="kategori")
    difficulty: Difficulty = Field(default=Difficulty.EASY, alias="tingkatKesulitan")

    demographics: DemographicConstraint = Field(default_factory=DemographicConstraint)

    ai_scenario: str | None = Field(default=None, alias="skenarioAI")
    assets: CaseAssets = Field(default_factory=CaseAssets)
    physical_exam: PhysicalExam = Field(default_factory=PhysicalExam, alias="pemeriksaanFisik")

    # OSCE checklist
    anamnesis_checklist: list[str] = Field(default_factory=list)
    examination_checklist: list[str] = Field(default_factory=list, alias="pemeriksaanChecklist")
    contraindications: list[str] = Field(default_factory=list, alias="kontraIndikasi")
    correct_diagnosis: str | None = Field(default=None, alias="diagnosisBenar")
    similar_diagnoses: list[str] = Field(default_factory=list, alias="diagnosisMirip")
    correct_plans: list[str] = Field(default_factory=list, alias="planningBenar")
    required_tools: list[str] = Field(default_factory=list, alias="alatWajib")

    rewards: CaseRewards = Field(default_factory=CaseRewards)


class StartSessionResponse(ApiModel):
    """A randomly chosen case together with its generated patient."""

    case_data: MedicalCaseData
    patient: PatientProfile


class CaseSavedResponse(ApiModel):
    """Acknowledgement for an admin case write, with authoring warnings."""

    msg: str
    warnings: list[str] = Field(default_factory=list)
