"""Errors shared by repositories."""


class DuplicateRecordError(ValueError):
    """Raised when a create would violate a unique natural key."""

    pass
