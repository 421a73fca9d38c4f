"""Pydantic schemas."""

from app.schemas.case import (
    CaseAssets,
    CaseRewards,
    CaseSavedResponse,
    Difficulty,
    MedicalCaseData,
    PhysicalExam,
    StartSessionResponse,
)
from app.schemas.catalog import AchievementData, ItemData, MessageResponse, WhitelistData
from app.schemas.chat import ChatRequest, ChatResponse
from app.schemas.demographics import (
    DemographicConstraint,
    Gender,
    GenderConstraint,
    PatientProfile,
    VisualPreset,
)
from app.schemas.user import (
    BuyItemRequest,
    BuyItemResponse,
    GuestLoginResponse,
    InventoryItemView,
    LoginResponse,
    ProgressUpdate,
    SuccessResponse,
)

__all__ = [
    # Demographics
    "DemographicConstraint",
    "Gender",
    "GenderConstraint",
    "PatientProfile",
    "VisualPreset",
    # Cases
    "CaseAssets",
    "CaseRewards",
    "CaseSavedResponse",
    "Difficulty",
    "MedicalCaseData",
    "PhysicalExam",
    "StartSessionResponse",
    # Catalog
    "AchievementData",
    "ItemData",
    "MessageResponse",
    "WhitelistData",
    # Chat
    "ChatRequest",
    "ChatResponse",
    # Users
    "BuyItemRequest",
    "BuyItemResponse",
    "InventoryItemView",
    "GuestLoginResponse",
    "LoginResponse",
    "ProgressUpdate",
    "SuccessResponse",
]
