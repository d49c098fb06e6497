from __future__ import annotations

from typing import Union

from bookstore_api.db.models.catalog import Book
from bookstore_api.schemas.books import BookCreate, BookRead, BookUpdate


class BookMapper:
    """Mapper for Book ORM <-> DTO conversion."""

    def to_read(self, book: Book) -> BookRead:
        return BookRead.model_validate(book)

    def to_entity(self, dto: Union[BookCreate, BookUpdate]) -> Book:
        book = Book(
            title=dto.title,
            year=dto.year,
            isbn=dto.isbn,
            summary=dto.summary,
            image=dto.image,
            price=dto.price,
            author_id=dto.author_id,
        )
        if isinstance(dto, BookUpdate):
            book.id = dto.id
        return book
