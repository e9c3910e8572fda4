"""Book catalog HTML routes.

Routes:
    GET  /books                 -> paginated listing (?page=N)
    GET  /books/new             -> blank creation form
    POST /books                 -> create, redirect to listing
    GET  /books/search          -> search (?query=...)
    GET  /books/<id>            -> detail view
    GET  /books/<id>/edit       -> edit form
    POST /books/<id>/edit       -> apply edit, redirect to listing
    GET  /books/<id>/delete     -> delete confirmation
    POST /books/<id>/delete     -> delete, redirect to listing

Unknown ids raise ``BookNotFoundError``; the app-level error handlers turn
it into a 404 page. Validation failures re-render the form with status 200.
"""
from __future__ import annotations

from typing import Any

from flask import Blueprint, current_app, redirect, render_template, request, url_for
from flask_babel import gettext as _

from book_catalog.db.engine import get_database
from book_catalog.services import books_service
from book_catalog.services.books_service import BookForm
from book_catalog.db.models import BookValidationError
from book_catalog.db.models.books import MAX_BOOK_ID
from book_catalog.utils.logging import get_logger

bp = Blueprint("books", __name__, url_prefix="/books")
LOG = get_logger("book_catalog.routes.books")

# Ids beyond the store's integer range fail to match and fall through to NotFound.
BOOK_ID = f"<int(max={MAX_BOOK_ID}):book_id>"


def _db():
    return get_database(current_app)


def _to_listing():
    return redirect(url_for("books.index"))


@bp.route("/", methods=["GET"])
@bp.route("", methods=["GET"])
def index():
    result = books_service.list_page(_db(), request.args.get("page"))
    return render_template(
        "books/index.html",
        books=result.books,
        page=result.page,
        pages=result.total_pages,
        total=result.total,
        title=_("Books"),
    )


@bp.route("/new", methods=["GET"])
def new():
    return render_template("books/new.html", book=BookForm(), errors={}, title=_("New Book"))


@bp.route("/", methods=["POST"])
@bp.route("", methods=["POST"])
def create():
    values = request.form
    try:
        book = books_service.create_book(_db(), values)
    except BookValidationError as exc:
        form = books_service.form_with_errors(values, exc)
        LOG.info("Create rejected: %s", exc)
        return render_template("books/new.html", book=form, errors=form.errors, title=_("New Book"))
    LOG.debug("Book %s created; redirecting to listing", book.id)
    return _to_listing()


@bp.route("/search/", methods=["GET"])
@bp.route("/search", methods=["GET"])
def search():
    query = request.args.get("query", "")
    books = books_service.search(_db(), query)
    return render_template(
        "books/index.html",
        books=books,
        page=None,
        pages=None,
        total=len(books),
        query=query,
        title=_("Results"),
    )


@bp.route(f"/{BOOK_ID}", methods=["GET"])
def show(book_id: int):
    book = books_service.get_book(_db(), book_id)
    return render_template("books/show.html", book=book, title=book.title)


@bp.route(f"/{BOOK_ID}/edit", methods=["GET"])
def edit(book_id: int):
    book = books_service.get_book(_db(), book_id)
    return render_template(
        "books/edit.html", book=BookForm.from_book(book), errors={}, title=_("Edit Book")
    )


@bp.route(f"/{BOOK_ID}/edit", methods=["POST"])
def update(book_id: int):
    values = request.form
    try:
        books_service.update_book(_db(), book_id, values)
    except BookValidationError as exc:
        form = books_service.form_with_errors(values, exc, book_id=book_id)
        LOG.info("Update rejected id=%s: %s", book_id, exc)
        return render_template("books/edit.html", book=form, errors=form.errors, title=_("Edit Book"))
    return _to_listing()


@bp.route(f"/{BOOK_ID}/delete", methods=["GET"])
def confirm_delete(book_id: int):
    book = books_service.get_book(_db(), book_id)
    return render_template("books/delete.html", book=book, title=_("Delete Book"))


@bp.route(f"/{BOOK_ID}/delete", methods=["POST"])
def delete(book_id: int):
    books_service.delete_book(_db(), book_id)
    return _to_listing()


def register_books_blueprint(app: Any) -> None:
    if getattr(app, "_books_bp", None):  # idempotent
        return
    app.register_blueprint(bp)
    setattr(app, "_books_bp", bp)
    LOG.debug("books blueprint registered")


__all__ = ["register_books_blueprint", "bp"]
