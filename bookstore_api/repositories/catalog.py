from __future__ import annotations

from bookstore_api.db.models.catalog import Author, Book
from .base import CrudRepository


class AuthorRepository(CrudRepository[Author]):
    """Repository for Authors."""

    model = Author


class BookRepository(CrudRepository[Book]):
    """Repository for Books."""

    model = Book
