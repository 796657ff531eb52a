"""
Failure types raised by the student service.

Every expected rejection is a ``StudentError`` subclass carrying a
``kind`` tag, the HTTP status it maps to and the list of
human‑readable messages shown to the user.  The application turns
them into ``{"success": false, "error": kind, "errors": [...]}``
responses, so none of them ever reaches the client as a 500.
"""

from typing import Iterable, List

from fastapi import status


class StudentError(ValueError):
    """Base class for recoverable student operation failures."""

    kind: str = "error"
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors: List[str] = list(errors)
        super().__init__("; ".join(self.errors))

    def to_dict(self) -> dict:
        return {"success": False, "error": self.kind, "errors": self.errors}


class ValidationFailure(StudentError):
    """Name or birth date failed validation."""

    kind = "validation_failure"


class DuplicateName(StudentError):
    """Another record already uses the requested name."""

    kind = "duplicate_name"
    status_code = status.HTTP_409_CONFLICT


class NotFound(StudentError):
    """The id does not resolve to a record."""

    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class InvalidId(StudentError):
    """The id is malformed."""

    kind = "invalid_id"
