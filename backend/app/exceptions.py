"""Domain errors raised by the patient profile generator."""


class ConstraintError(ValueError):
    """Raised when a case's demographic constraint is malformed or contradictory."""


class LookupFailure(RuntimeError):
    """Raised when the visual preset lookup itself fails.

    Distinct from "no preset matched", which is a valid result and yields a
    profile without a visual.
    """
