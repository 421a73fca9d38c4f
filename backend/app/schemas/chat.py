"""Pydantic schemas for the patient roleplay chat."""

from typing import Any

from pydantic import Field

from app.constants import MAX_CONTEXT_LENGTH, MAX_MESSAGE_LENGTH
from app.schemas.base import ApiModel


class ChatRequest(ApiModel):
    """A doctor's question to the roleplayed patient."""

    roblox_id: str | None = Field(
        default=None,
        description="Player account; enables chat logging and stored-session fallback",
    )
    message: str = Field(
        alias="pesan",
        min_length=1,
        max_length=MAX_MESSAGE_LENGTH,
        description="The doctor's question",
    )
    disease_context: str = Field(
        default="",
        alias="konteksPenyakit",
        max_length=MAX_CONTEXT_LENGTH,
        description="Medical condition the patient is roleplaying",
    )
    patient_profile: dict[str, Any] | None = Field(
        default=None,
        description="Generated patient echoed back by the client",
    )


class ChatResponse(ApiModel):
    answer: str = Field(alias="jawaban")
    tags: dict[str, str] = Field(
        default_factory=dict,
        description="Anamnesis markers such as NAMA or KELUHAN found in the answer",
    )
