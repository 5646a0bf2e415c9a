"""
Pydantic models for person data and paginated listings.

``PersonCreate`` and ``PersonUpdate`` describe request bodies.  Every
field is optional at the schema level: required-field checks happen in
``PersonService.validate_person`` so that all missing fields are
reported together with a 400 response instead of FastAPI's default
422.  ``PersonRead`` is the fully populated record returned by the API
and held by the store.

``PagedResult`` wraps one page of items together with the paging
metadata.  Field names are serialized in camelCase (``pageSize``,
``totalCount``, ``totalPages``, ``hasPrevious``, ``hasNext``).
"""

import math
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field

T = TypeVar("T")


class PersonBase(BaseModel):
    identifier: Optional[str] = Field(None, examples=["12345678901"])
    name: Optional[str] = Field(None, examples=["João Silva"])
    genre: Optional[str] = Field(None, examples=["Masculino"])
    address: Optional[str] = Field(None, examples=["Rua das Flores, 123"])
    age: Optional[int] = Field(None, examples=[30])
    neighborhood: Optional[str] = Field(None, examples=["Centro"])
    region: Optional[str] = Field(None, examples=["São Paulo"])


class PersonCreate(PersonBase):
    """Schema for creating a person."""
    pass


class PersonUpdate(PersonBase):
    """Schema for updating a person.

    Updates use full replace semantics: every field must be supplied
    and ``identifier`` must equal the identifier in the URL.
    """
    pass


class PersonRead(BaseModel):
    """Schema for reading a person from the API."""

    identifier: str
    name: str
    genre: str
    address: str
    age: int
    neighborhood: str
    region: str

    model_config = {
        "from_attributes": True,
    }


class PagedResult(BaseModel, Generic[T]):
    """One page of results plus paging metadata."""

    model_config = ConfigDict(populate_by_name=True)

    data: List[T] = Field(default_factory=list)
    page: int
    page_size: int = Field(..., alias="pageSize")
    total_count: int = Field(..., alias="totalCount")

    @computed_field(alias="totalPages")
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @computed_field(alias="hasPrevious")
    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @computed_field(alias="hasNext")
    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
