"""Tests for books_repo helpers using in-memory SQLite."""
from __future__ import annotations

import pytest

from book_catalog.db.engine import init_database
from book_catalog.db.models import Book, BookValidationError
from book_catalog.db.repositories import books_repo
from book_catalog.utils.paging import MAX_OFFSET


@pytest.fixture
def db():
    handle = init_database("sqlite:///:memory:")
    yield handle
    handle.drop_schema()
    handle.dispose()


def _fields(**overrides):
    payload = {"title": "Dune", "author": "Frank Herbert", "genre": "Science Fiction", "year": "1965"}
    payload.update(overrides)
    return payload


def test_create_assigns_id_and_round_trips_values(db):
    created = books_repo.create_book(db, _fields())
    assert created.id is not None

    fetched = books_repo.get_book(db, created.id)
    assert fetched is not None
    assert fetched.as_dict() == {
        "id": created.id,
        "title": "Dune",
        "author": "Frank Herbert",
        "genre": "Science Fiction",
        "year": 1965,
    }


def test_create_ignores_client_supplied_id(db):
    first = books_repo.create_book(db, _fields())
    second = books_repo.create_book(db, _fields(id=first.id, title="Dune Messiah"))
    assert second.id != first.id
    assert books_repo.get_book(db, first.id).title == "Dune"


def test_create_strips_whitespace_and_blanks_genre(db):
    created = books_repo.create_book(db, _fields(title="  Emma  ", genre="   ", year=" 1815 "))
    assert created.title == "Emma"
    assert created.genre is None
    assert created.year == 1815


def test_create_missing_title_raises_and_persists_nothing(db):
    with pytest.raises(BookValidationError) as info:
        books_repo.create_book(db, _fields(title=""))
    assert info.value.errors == {"title": ["title_required"]}
    assert books_repo.count_books(db) == 0


def test_create_collects_all_field_errors(db):
    with pytest.raises(BookValidationError) as info:
        books_repo.create_book(db, {"title": " ", "author": None, "year": ""})
    assert info.value.errors == {
        "title": ["title_required"],
        "author": ["author_required"],
        "year": ["year_required"],
    }


@pytest.mark.parametrize(
    "year, code",
    [
        ("nineteen", "year_invalid"),
        ("19.5", "year_invalid"),
        ("999", "year_out_of_range"),
        ("10000", "year_out_of_range"),
    ],
)
def test_create_rejects_bad_years(db, year, code):
    with pytest.raises(BookValidationError) as info:
        books_repo.create_book(db, _fields(year=year))
    assert info.value.errors == {"year": [code]}


def test_create_rejects_overlong_title(db):
    with pytest.raises(BookValidationError) as info:
        books_repo.create_book(db, _fields(title="x" * 256))
    assert info.value.errors == {"title": ["title_too_long"]}


def test_find_all_applies_window_and_reports_total(db):
    for idx in range(1, 13):
        books_repo.create_book(db, _fields(title=f"Book {idx}", year=str(2000 + idx)))

    rows, total = books_repo.find_all(db, offset=10, limit=10)
    assert total == 12
    assert [b.title for b in rows] == ["Book 11", "Book 12"]


def test_find_all_with_capped_offset_returns_no_rows(db):
    books_repo.create_book(db, _fields())
    rows, total = books_repo.find_all(db, offset=MAX_OFFSET, limit=10)
    assert rows == []
    assert total == 1


def test_find_all_with_filter_and_order(db):
    books_repo.create_book(db, _fields(title="Later", year="2001"))
    books_repo.create_book(db, _fields(title="Earlier", year="1999"))
    books_repo.create_book(db, _fields(title="Other", author="Someone Else", year="1950"))

    rows, total = books_repo.find_all(
        db,
        where=Book.author == "Frank Herbert",
        order=[Book.year.asc()],
    )
    assert total == 2
    assert [b.title for b in rows] == ["Earlier", "Later"]


def test_update_unknown_id_returns_none(db):
    assert books_repo.update_book(db, 42, _fields()) is None


def test_update_invalid_values_keeps_stored_record(db):
    created = books_repo.create_book(db, _fields())
    with pytest.raises(BookValidationError):
        books_repo.update_book(db, created.id, _fields(author="", year="abc"))

    stored = books_repo.get_book(db, created.id)
    assert stored.author == "Frank Herbert"
    assert stored.year == 1965


def test_update_applies_changes_in_place(db):
    created = books_repo.create_book(db, _fields())
    updated = books_repo.update_book(db, created.id, _fields(title="Dune (Revised)", genre=""))
    assert updated.id == created.id

    stored = books_repo.get_book(db, created.id)
    assert stored.title == "Dune (Revised)"
    assert stored.genre is None


def test_delete_returns_boolean_result(db):
    created = books_repo.create_book(db, _fields())
    assert books_repo.delete_book(db, created.id) is True
    assert books_repo.get_book(db, created.id) is None
    assert books_repo.delete_book(db, created.id) is False


def test_ids_outside_integer_range_are_unknown(db):
    books_repo.create_book(db, _fields())
    huge = 10**20
    assert books_repo.get_book(db, huge) is None
    assert books_repo.update_book(db, huge, _fields()) is None
    assert books_repo.delete_book(db, huge) is False
    assert books_repo.count_books(db) == 1


def test_find_by_title_author(db):
    created = books_repo.create_book(db, _fields())
    found = books_repo.find_by_title_author(db, "Dune", "Frank Herbert")
    assert found is not None and found.id == created.id
    assert books_repo.find_by_title_author(db, "Dune", "Someone Else") is None
