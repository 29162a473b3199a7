"""
Error taxonomy for the persistence layer.

Missing records are not errors: repositories return ``None`` and the API
answers 404. Request validation is handled by FastAPI/pydantic before any
repository call.
"""


class NZWalksError(Exception):
    """Base class for service errors."""


class ReferentialIntegrityError(NZWalksError):
    """A walk references a region or difficulty that does not exist."""

    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"{field} {value} does not reference an existing record")


class StorageError(NZWalksError):
    """The database rejected or failed a read/write."""
