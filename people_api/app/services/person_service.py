"""
Service layer for people.

``PersonService`` turns list/get/create/update/delete requests into
record store operations.  It validates payloads, applies pagination
and raises the error types from ``core.exceptions`` on failure; the
API layer maps those to HTTP status codes.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from people_api.app.core.config import settings
from people_api.app.core.exceptions import (
    DuplicateKeyError,
    InvalidArgumentError,
    MismatchError,
    NotFoundError,
    ValidationError,
)
from people_api.app.core.store import get_store
from people_api.app.schemas.person import PagedResult, PersonBase, PersonRead

logger = logging.getLogger(__name__)

# Maximum length of each required string field.
FIELD_MAX_LENGTHS: Dict[str, int] = {
    "identifier": 11,
    "name": 100,
    "genre": 20,
    "address": 200,
    "neighborhood": 100,
    "region": 50,
}


class PersonService:
    """Service class for managing people."""

    @staticmethod
    def validate_person(data: PersonBase) -> Dict[str, str]:
        """Return a mapping of field name to error message.

        String fields must be present, non-blank and within their
        maximum length, and ``identifier`` may only contain the digits
        0-9.  ``age`` must only be present; negative values are accepted.
        An empty dict means the payload is valid.
        """
        errors: Dict[str, str] = {}
        for field, max_length in FIELD_MAX_LENGTHS.items():
            value = getattr(data, field)
            if value is None or not value.strip():
                errors[field] = f"The {field} field is required."
            elif len(value) > max_length:
                errors[field] = f"The {field} field must be at most {max_length} characters."
            elif field == "identifier" and not (value.isascii() and value.isdigit()):
                errors[field] = "The identifier field must contain only digits."
        if data.age is None:
            errors["age"] = "The age field is required."
        return errors

    @classmethod
    def _ensure_valid(cls, data: PersonBase) -> PersonRead:
        errors = cls.validate_person(data)
        if errors:
            raise ValidationError(errors)
        return PersonRead(**data.model_dump())

    @classmethod
    async def list_people(
        cls,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> PagedResult[PersonRead]:
        """Return one page of people in store order.

        ``page`` is 1‑based.  Requesting a page past the last one
        yields an empty ``data`` list with ``hasNext`` false rather
        than an error.
        """
        if page_size is None:
            page_size = settings.default_page_size
        if page < 1:
            raise InvalidArgumentError("page must be >= 1")
        if page_size < 1 or page_size > settings.max_page_size:
            raise InvalidArgumentError(f"pageSize must be between 1 and {settings.max_page_size}")

        people = get_store().get_all()
        skip = (page - 1) * page_size
        return PagedResult[PersonRead](
            data=people[skip:skip + page_size],
            page=page,
            page_size=page_size,
            total_count=len(people),
        )

    @classmethod
    async def get_person(cls, identifier: str) -> PersonRead:
        person = get_store().get_by_key(identifier)
        if person is None:
            raise NotFoundError(f"Person with identifier '{identifier}' not found.")
        return person

    @classmethod
    async def create_person(cls, data: PersonBase) -> PersonRead:
        """Validate and store a new person.

        The identifier is checked up front so the error names it; the
        store re-checks under its lock, so a concurrent insert of the
        same identifier still fails with ``DuplicateKeyError``.
        """
        person = cls._ensure_valid(data)
        store = get_store()
        if store.get_by_key(person.identifier) is not None:
            raise DuplicateKeyError(f"Person with identifier '{person.identifier}' already exists.")
        created = store.insert(person)
        logger.info("Created person %s", created.identifier)
        return created

    @classmethod
    async def update_person(cls, identifier: str, data: PersonBase) -> PersonRead:
        """Replace every field of an existing person.

        Raises ``ValidationError`` for an incomplete body,
        ``MismatchError`` when ``identifier`` differs from the body's
        identifier and ``NotFoundError`` when nothing is stored under
        ``identifier``.
        """
        person = cls._ensure_valid(data)
        if identifier != person.identifier:
            raise MismatchError("Identifier in URL does not match identifier in request body.")
        updated = get_store().replace(identifier, person)
        logger.info("Updated person %s", identifier)
        return updated

    @classmethod
    async def delete_person(cls, identifier: str) -> None:
        get_store().remove(identifier)
        logger.info("Deleted person %s", identifier)
