from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class DomainError(Exception):
    """Base exception for business rule violations."""


class InputError(DomainError):
    """Raised when a caller passes a missing or malformed parameter (e.g. pay period)."""


class ValidationError(DomainError):
    """Raised when a submitted payload fails its field constraints.

    Carries every violation found so callers can report them together.
    """

    def __init__(self, message: str, violations: Sequence[FieldViolation] = ()):
        super().__init__(message)
        self.violations = list(violations)


class NotFoundError(DomainError):
    """Raised when an employee or record referenced by id does not exist."""


class StorageError(DomainError):
    """Raised when the data store is unreachable or a write fails."""
