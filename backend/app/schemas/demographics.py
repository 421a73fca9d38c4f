"""Demographic constraint, visual preset and generated patient profile schemas."""

from enum import Enum

from pydantic import Field, model_validator

from app.exceptions import ConstraintError
from app.schemas.base import ApiModel


# === Enums (match SQLAlchemy enums) ===


class Gender(str, Enum):
    """Concrete patient gender."""

    MALE = "Male"
    FEMALE = "Female"


class GenderConstraint(str, Enum):
    """Gender allowed by a medical case."""

    MALE = "Male"
    FEMALE = "Female"
    ANY = "Any"


def check_age_bounds(min_age: int, max_age: int) -> None:
    """Raise ConstraintError unless 0 < min_age <= max_age."""
    if min_age <= 0:
        raise ConstraintError(f"minAge must be positive, got {min_age}")
    if min_age > max_age:
        raise ConstraintError(f"minAge ({min_age}) is greater than maxAge ({max_age})")


class DemographicConstraint(ApiModel):
    """Gender/age/pregnancy bounds attached to a medical case."""

    gender: GenderConstraint = GenderConstraint.ANY
    min_age: int = 17
    max_age: int = 60
    is_pregnant: bool = False

    @model_validator(mode="after")
    def check_bounds(self) -> "DemographicConstraint":
        check_age_bounds(self.min_age, self.max_age)
        return self

    def warnings(self) -> list[str]:
        """Content-authoring problems that do not block generation."""
        issues = []
        if self.is_pregnant and self.gender == GenderConstraint.MALE:
            issues.append("isPregnant is set but gender is Male")
        elif self.is_pregnant and self.gender == GenderConstraint.ANY:
            issues.append("isPregnant is set but gender may resolve to Male")
        return issues


class VisualPreset(ApiModel):
    """Roblox appearance assets for one possible patient look."""

    preset_id: str | None = None
    gender: Gender
    shirt_id: str | None = None
    pants_id: str | None = None
    face_id: str | None = None
    hair_id: str | None = None
    accessory_id: str | None = None


class PatientProfile(ApiModel):
    """Randomized patient generated for one play session."""

    name: str
    age: int = Field(gt=0)
    gender: Gender
    is_pregnant: bool
    visual: VisualPreset | None = None
