"""
Error types raised by the record store and the person service.

All errors derive from ``PeopleServiceError`` which itself subclasses
``ValueError`` so that callers may keep catching ``ValueError`` the
way other services in this codebase are consumed.  The HTTP layer maps
each kind to a status code; nothing here knows about HTTP.
"""

from typing import Dict, Optional


class PeopleServiceError(ValueError):
    """Base class for recoverable, request-scoped failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PeopleServiceError):
    """One or more required Person fields are missing or invalid.

    ``errors`` maps each offending field (wire name) to a message.
    """

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None) -> None:
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(message or f"Invalid person data: {fields}")


class DuplicateKeyError(PeopleServiceError):
    """A record with the same identifier already exists."""


class MismatchError(PeopleServiceError):
    """The addressing identifier and the body identifier disagree."""


class NotFoundError(PeopleServiceError):
    """The targeted identifier is not present in the store."""


class InvalidArgumentError(PeopleServiceError):
    """Pagination parameters are out of range."""
