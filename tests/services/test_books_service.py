"""Tests for books_service paging, search and not-found handling."""
from __future__ import annotations

import pytest
from flask import Flask
from flask_babel import Babel

from book_catalog.db.engine import init_database
from book_catalog.db.models import BookValidationError
from book_catalog.db.repositories import books_repo
from book_catalog.services import books_service
from book_catalog.services.errors import BookNotFoundError


@pytest.fixture
def db():
    handle = init_database("sqlite:///:memory:")
    yield handle
    handle.drop_schema()
    handle.dispose()


@pytest.fixture
def app_context():
    app = Flask(__name__)
    Babel(app)
    with app.app_context():
        yield


def _add(db, title, author="Frank Herbert", genre="Science Fiction", year=1965):
    return books_repo.create_book(db, {"title": title, "author": author, "genre": genre, "year": year})


def test_list_page_returns_remainder_on_last_page(db):
    for idx in range(23):
        _add(db, f"Book {idx:02d}", year=1900 + idx)

    first = books_service.list_page(db, "1")
    assert len(first.books) == 10
    assert first.total_pages == 3
    assert first.total == 23

    last = books_service.list_page(db, "3")
    assert [b.title for b in last.books] == ["Book 20", "Book 21", "Book 22"]

    beyond = books_service.list_page(db, "4")
    assert beyond.books == []
    assert beyond.page == 4
    assert beyond.total_pages == 3


@pytest.mark.parametrize("raw", [None, "", "abc", "0", "-3", "2.5"])
def test_list_page_defaults_bad_page_to_first(db, raw):
    _add(db, "Dune")
    result = books_service.list_page(db, raw)
    assert result.page == 1
    assert [b.title for b in result.books] == ["Dune"]


def test_list_page_on_empty_store(db):
    result = books_service.list_page(db)
    assert result.books == []
    assert result.total_pages == 0
    assert result.total == 0


def test_list_page_orders_by_insertion(db):
    _add(db, "Zeta", year=2001)
    _add(db, "Alpha", year=1801)
    assert [b.title for b in books_service.list_page(db).books] == ["Zeta", "Alpha"]


def test_search_matches_title_case_insensitively(db):
    _add(db, "Dune", author="Herbert", genre=None, year=1965)
    _add(db, "Emma", author="Jane Austen", genre="Classic", year=1815)

    results = books_service.search(db, "dune")
    assert [b.title for b in results] == ["Dune"]


@pytest.mark.parametrize("query", ["HERBERT", "herb", "science", "196", "  Dune  "])
def test_search_covers_author_genre_and_year(db, query):
    _add(db, "Dune", author="Frank Herbert", genre="Science Fiction", year=1965)
    _add(db, "Emma", author="Jane Austen", genre="Classic", year=1815)

    assert [b.title for b in books_service.search(db, query)] == ["Dune"]


def test_search_orders_by_year_ascending(db):
    _add(db, "Ready Player One", author="Ernest Cline", year=2011)
    _add(db, "Armada", author="Ernest Cline", year=2015)
    _add(db, "Early Cline", author="Ernest Cline", year=1999)

    results = books_service.search(db, "cline")
    assert [b.year for b in results] == [1999, 2011, 2015]


def test_search_without_matches_returns_empty_list(db):
    _add(db, "Dune")
    assert books_service.search(db, "tolkien") == []


def test_search_treats_wildcards_literally(db):
    _add(db, "Dune")
    _add(db, "100% Pure", author="Someone", genre=None, year=2020)

    assert [b.title for b in books_service.search(db, "%")] == ["100% Pure"]
    assert books_service.search(db, "_") == []


def test_search_with_blank_query_returns_everything(db):
    _add(db, "Dune", year=1965)
    _add(db, "Emma", year=1815)
    assert [b.title for b in books_service.search(db, "")] == ["Emma", "Dune"]


def test_get_book_missing_raises_not_found(db):
    with pytest.raises(BookNotFoundError) as info:
        books_service.get_book(db, 99)
    assert info.value.status_code == 404


def test_update_missing_raises_not_found_even_with_invalid_values(db):
    with pytest.raises(BookNotFoundError):
        books_service.update_book(db, 99, {"title": ""})


def test_delete_missing_is_not_found_every_time(db):
    book = _add(db, "Dune")
    books_service.delete_book(db, book.id)
    for _ in range(2):
        with pytest.raises(BookNotFoundError):
            books_service.delete_book(db, book.id)


def test_create_ignores_unknown_form_keys(db):
    book = books_service.create_book(
        db, {"id": "77", "title": "Dune", "author": "Herbert", "year": "1965", "extra": "x"}
    )
    assert book.id == 1
    assert books_repo.get_book(db, 77) is None


def test_form_with_errors_keeps_values_id_and_messages(db, app_context):
    values = {"title": "", "author": "Herbert", "genre": "", "year": "19x5"}
    with pytest.raises(BookValidationError) as info:
        books_service.create_book(db, values)

    form = books_service.form_with_errors(values, info.value, book_id=5)
    assert form.id == 5
    assert form.author == "Herbert"
    assert form.year == "19x5"
    assert form.errors == {
        "title": ["Title is required."],
        "year": ["Year must be a whole number."],
    }


def test_book_form_from_book(db):
    book = _add(db, "Dune", genre=None)
    form = books_service.BookForm.from_book(book)
    assert form.id == book.id
    assert form.genre == ""
    assert form.year == "1965"
