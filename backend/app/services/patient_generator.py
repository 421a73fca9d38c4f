"""Patient profile randomizer.

Turns a medical case's demographic constraint into a concrete patient:
gender, age, name, pregnancy flag and a matching visual preset. The name
tables, random source and preset lookup are all injected so the generator
holds no storage or global state of its own.
"""

import logging
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from app.exceptions import ConstraintError, LookupFailure
from app.schemas.demographics import (
    DemographicConstraint,
    Gender,
    GenderConstraint,
    PatientProfile,
    VisualPreset,
    check_age_bounds,
)

logger = logging.getLogger(__name__)

PresetLookup = Callable[[Gender], Awaitable[VisualPreset | None]]


@dataclass(frozen=True)
class NameTable:
    """Gender-keyed patient first names."""

    male: tuple[str, ...]
    female: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.male or not self.female:
            raise ValueError("Name tables must not be empty")
        overlap = set(self.male) & set(self.female)
        if overlap:
            raise ValueError(f"Name tables must be disjoint, shared: {sorted(overlap)}")

    def for_gender(self, gender: Gender) -> tuple[str, ...]:
        return self.male if gender == Gender.MALE else self.female


DEFAULT_NAME_TABLE = NameTable(
    male=("Budi", "Agus", "Slamet", "Joko", "Rudi", "Eko", "Bambang", "Fajar", "Dedi", "Hendra"),
    female=("Siti", "Sri", "Lestari", "Wati", "Rina", "Ani", "Dewi", "Putri", "Ratna", "Indah"),
)


class PatientProfileGenerator:
    """Generates a fresh random patient per call.

    Draw order is gender, age, then name, so a seeded random source yields
    reproducible profiles.
    """

    def __init__(
        self,
        names: NameTable = DEFAULT_NAME_TABLE,
        rng: random.Random | None = None,
    ):
        self.names = names
        self._rng = rng or random.Random()

    def resolve_gender(self, constraint: GenderConstraint) -> Gender:
        """Pick the concrete gender, 50/50 when the case allows any."""
        if constraint == GenderConstraint.ANY:
            return Gender.MALE if self._rng.random() < 0.5 else Gender.FEMALE
        return Gender(constraint.value)

    def resolve_age(self, min_age: int, max_age: int) -> int:
        """Uniform integer age, both bounds inclusive."""
        return self._rng.randint(min_age, max_age)

    def resolve_name(self, gender: Gender) -> str:
        return self._rng.choice(self.names.for_gender(gender))

    async def generate(
        self,
        constraint: DemographicConstraint,
        preset_lookup: PresetLookup,
    ) -> PatientProfile:
        """Generate a patient profile satisfying the constraint.

        Args:
            constraint: The case's demographic bounds.
            preset_lookup: Awaitable returning one random preset for a gender,
                or None when no preset matches.

        Returns:
            The generated profile. ``visual`` is None when no preset matched.

        Raises:
            ConstraintError: If the constraint is malformed.
            LookupFailure: If the preset lookup raised or returned a preset
                for the wrong gender.
        """
        try:
            gender_constraint = GenderConstraint(constraint.gender)
        except ValueError as e:
            raise ConstraintError(f"Unknown gender constraint: {constraint.gender!r}") from e
        check_age_bounds(constraint.min_age, constraint.max_age)

        for issue in constraint.warnings():
            logger.warning("Demographic constraint warning: %s", issue)

        gender = self.resolve_gender(gender_constraint)
        if constraint.is_pregnant and gender == Gender.MALE:
            logger.warning("Generated a pregnant male patient; check the case's demographic constraint")
        age = self.resolve_age(constraint.min_age, constraint.max_age)
        name = self.resolve_name(gender)

        try:
            visual = await preset_lookup(gender)
        except Exception as e:
            raise LookupFailure(f"Visual preset lookup failed for {gender.value}") from e

        if visual is None:
            logger.info("No visual preset found for %s, generating patient without visual", gender.value)
        elif visual.gender != gender:
            raise LookupFailure(
                f"Preset lookup returned a {visual.gender.value} preset for a {gender.value} patient"
            )

        return PatientProfile(
            name=name,
            age=age,
            gender=gender,
            is_pregnant=constraint.is_pregnant,
            visual=visual,
        )
