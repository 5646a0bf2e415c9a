"""
Tests for PersonService: validation, pagination and CRUD error kinds.
"""
from __future__ import annotations

import asyncio
import math

import pytest

from people_api.app.core.exceptions import (
    DuplicateKeyError,
    InvalidArgumentError,
    MismatchError,
    NotFoundError,
    ValidationError,
)
from people_api.app.schemas.person import PersonCreate, PersonRead, PersonUpdate
from people_api.app.services.person_service import FIELD_MAX_LENGTHS, PersonService


def run(coro):
    return asyncio.run(coro)


def test_first_page_of_seeded_store():
    result = run(PersonService.list_people(page=1, page_size=10))
    assert len(result.data) == 10
    assert result.total_count == 30
    assert result.total_pages == 3
    assert result.has_previous is False
    assert result.has_next is True


def test_default_page_size_is_ten():
    result = run(PersonService.list_people())
    assert result.page == 1
    assert result.page_size == 10


@pytest.mark.parametrize(
    "page,page_size",
    [(1, 1), (2, 7), (3, 10), (4, 10), (5, 7), (1, 100), (2, 29), (10, 3)],
)
def test_page_length_and_flags(page, page_size):
    result = run(PersonService.list_people(page=page, page_size=page_size))
    total = 30
    assert len(result.data) == min(page_size, max(0, total - (page - 1) * page_size))
    assert result.total_pages == math.ceil(total / page_size)
    assert result.has_next == (page < result.total_pages)
    assert result.has_previous == (page > 1)


def test_page_past_end_is_empty():
    result = run(PersonService.list_people(page=4, page_size=10))
    assert result.data == []
    assert result.has_next is False
    assert result.has_previous is True


def test_last_page_is_partial():
    result = run(PersonService.list_people(page=4, page_size=8))
    assert [p.identifier for p in result.data] == [
        "12345678925",
        "12345678926",
        "12345678927",
        "12345678928",
        "12345678929",
        "12345678930",
    ]
    assert result.has_next is False


def test_invalid_page_rejected():
    with pytest.raises(InvalidArgumentError, match="page must be >= 1"):
        run(PersonService.list_people(page=0, page_size=10))


@pytest.mark.parametrize("page_size", [0, -1, 101])
def test_invalid_page_size_rejected(page_size):
    with pytest.raises(InvalidArgumentError, match="pageSize must be between 1 and 100"):
        run(PersonService.list_people(page=1, page_size=page_size))


def test_validate_person_reports_every_missing_field():
    errors = PersonService.validate_person(PersonCreate())
    assert set(errors) == {"identifier", "name", "genre", "address", "age", "neighborhood", "region"}


def test_validate_person_rejects_blank_and_too_long_values(new_person):
    new_person["name"] = "   "
    new_person["genre"] = "x" * 21
    errors = PersonService.validate_person(PersonCreate(**new_person))
    assert set(errors) == {"name", "genre"}


@pytest.mark.parametrize("field,max_length", sorted(FIELD_MAX_LENGTHS.items()))
def test_validate_person_enforces_each_max_length(new_person, field, max_length):
    filler = "1" if field == "identifier" else "x"
    new_person[field] = filler * max_length
    assert PersonService.validate_person(PersonCreate(**new_person)) == {}
    new_person[field] = filler * (max_length + 1)
    errors = PersonService.validate_person(PersonCreate(**new_person))
    assert set(errors) == {field}


def test_twelve_digit_identifier_rejected_eleven_accepted(new_person):
    new_person["identifier"] = "123456789012"
    with pytest.raises(ValidationError) as excinfo:
        run(PersonService.create_person(PersonCreate(**new_person)))
    assert set(excinfo.value.errors) == {"identifier"}
    new_person["identifier"] = "98765432100"
    assert run(PersonService.create_person(PersonCreate(**new_person))).identifier == "98765432100"


@pytest.mark.parametrize("identifier", ["12/34", "..", "12a", "-1", "1 2", "\u0661\u0662"])
def test_non_numeric_identifier_rejected(new_person, identifier):
    new_person["identifier"] = identifier
    with pytest.raises(ValidationError) as excinfo:
        run(PersonService.create_person(PersonCreate(**new_person)))
    assert "identifier" in excinfo.value.errors
    assert run(PersonService.list_people(page=1, page_size=100)).total_count == 30


def test_negative_age_is_accepted(new_person):
    new_person["age"] = -5
    assert PersonService.validate_person(PersonCreate(**new_person)) == {}
    created = run(PersonService.create_person(PersonCreate(**new_person)))
    assert created.age == -5


def test_create_then_get_round_trip(new_person):
    created = run(PersonService.create_person(PersonCreate(**new_person)))
    assert created == PersonRead(**new_person)
    assert run(PersonService.get_person("999")) == PersonRead(**new_person)
    assert run(PersonService.list_people(page=1, page_size=10)).total_count == 31


def test_create_duplicate_rejected(new_person):
    run(PersonService.create_person(PersonCreate(**new_person)))
    with pytest.raises(DuplicateKeyError, match="'999'"):
        run(PersonService.create_person(PersonCreate(**new_person)))


def test_create_missing_fields_raises_validation_error():
    with pytest.raises(ValidationError) as excinfo:
        run(PersonService.create_person(PersonCreate(identifier="1", name="Só Nome")))
    assert "age" in excinfo.value.errors
    assert "identifier" not in excinfo.value.errors


def test_update_replaces_all_fields(new_person):
    new_person["identifier"] = "12345678901"
    updated = run(PersonService.update_person("12345678901", PersonUpdate(**new_person)))
    assert updated == PersonRead(**new_person)
    assert run(PersonService.get_person("12345678901")).name == "Teste Pessoa"


def test_update_identifier_mismatch(new_person):
    new_person["identifier"] = "222"
    with pytest.raises(MismatchError):
        run(PersonService.update_person("111", PersonUpdate(**new_person)))


def test_update_missing_person(new_person):
    with pytest.raises(NotFoundError):
        run(PersonService.update_person("999", PersonUpdate(**new_person)))


def test_update_validates_before_checking_mismatch():
    with pytest.raises(ValidationError):
        run(PersonService.update_person("A", PersonUpdate(identifier="B")))


def test_delete_then_get_not_found():
    run(PersonService.delete_person("12345678905"))
    with pytest.raises(NotFoundError):
        run(PersonService.get_person("12345678905"))


def test_delete_nonexistent():
    with pytest.raises(NotFoundError):
        run(PersonService.delete_person("nonexistent"))


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        run(PersonService.get_person("nonexistent"))
