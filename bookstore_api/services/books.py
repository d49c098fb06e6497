from __future__ import annotations

from bookstore_api.db.models.catalog import Book
from bookstore_api.schemas.books import BookCreate, BookUpdate
from bookstore_api.services.crud import CrudService


class BookService(CrudService[Book, BookCreate, BookUpdate]):
    """Request handling for the Books resource."""

    label = "BooksService"
    create_schema = BookCreate
    update_schema = BookUpdate
