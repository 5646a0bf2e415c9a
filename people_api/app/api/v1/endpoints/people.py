"""
People endpoints for API v1.

CRUD routes for person records keyed by identifier.  Listing is
paginated with ``page`` (1‑based) and ``pageSize`` query parameters.
Service errors are translated to HTTP responses here: a missing
record is a 404, every other failure is a 400.
"""

from typing import NoReturn
from urllib.parse import quote

from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from people_api.app.core.config import settings
from people_api.app.core.exceptions import NotFoundError, PeopleServiceError, ValidationError
from people_api.app.schemas.person import PagedResult, PersonCreate, PersonRead, PersonUpdate
from people_api.app.services.person_service import PersonService

router = APIRouter()


def _raise_http_error(exc: PeopleServiceError) -> NoReturn:
    if isinstance(exc, NotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message) from exc
    if isinstance(exc, ValidationError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": exc.message, "errors": exc.errors},
        ) from exc
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message) from exc


@router.get("", response_model=PagedResult[PersonRead])
async def list_people(
    page: int = Query(1, description="Page number (1-based)"),
    page_size: int = Query(settings.default_page_size, alias="pageSize", description="Items per page (1-100)"),
) -> PagedResult[PersonRead]:
    """Return one page of people.

    - **page**: 1‑based page number; values below 1 are rejected.
    - **pageSize**: number of items per page, between 1 and 100.

    Pages past the last one return an empty ``data`` list.
    """
    try:
        return await PersonService.list_people(page=page, page_size=page_size)
    except PeopleServiceError as e:
        _raise_http_error(e)


@router.get("/{identifier}", response_model=PersonRead)
async def get_person(identifier: str) -> PersonRead:
    """Retrieve a single person by identifier.  Raises 404 if absent."""
    try:
        return await PersonService.get_person(identifier)
    except PeopleServiceError as e:
        _raise_http_error(e)


@router.post("", response_model=PersonRead, status_code=status.HTTP_201_CREATED)
async def create_person(person: PersonCreate, request: Request, response: Response) -> PersonRead:
    """Create a new person.

    Returns 400 when required fields are missing or the identifier is
    already taken.  The ``Location`` header points at the new record.
    """
    try:
        created = await PersonService.create_person(person)
    except PeopleServiceError as e:
        _raise_http_error(e)
    response.headers["Location"] = f"{request.url_for('list_people')}/{quote(created.identifier, safe='')}"
    return created


@router.put("/{identifier}", response_model=PersonRead)
async def update_person(identifier: str, person: PersonUpdate) -> PersonRead:
    """Replace an existing person.

    The body must be complete and its ``identifier`` must match the
    one in the URL (400 otherwise).  Returns 404 if the person does not
    exist.
    """
    try:
        return await PersonService.update_person(identifier, person)
    except PeopleServiceError as e:
        _raise_http_error(e)


@router.delete("/{identifier}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(identifier: str) -> Response:
    """Delete a person.  Returns 404 if the person does not exist."""
    try:
        await PersonService.delete_person(identifier)
    except PeopleServiceError as e:
        _raise_http_error(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
