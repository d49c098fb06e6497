from __future__ import annotations

from typing import List, Optional

from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore_api.db.base import Base, IntPkMixin


class Author(IntPkMixin, Base):
    """Author of one or more books."""
    __tablename__ = "authors"

    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    books: Mapped[List["Book"]] = relationship(
        "Book",
        back_populates="author",
        lazy="selectin",
        order_by="Book.id",
    )


class Book(IntPkMixin, Base):
    """Catalog book; written by a single author."""
    __tablename__ = "books"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    isbn: Mapped[str] = mapped_column(Text, nullable=False)
    summary: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # cover image reference
    price: Mapped[Optional[float]] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=True)
    author_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("authors.id", ondelete="SET NULL"), nullable=True, index=True
    )

    author: Mapped[Optional[Author]] = relationship(
        "Author",
        back_populates="books",
        lazy="selectin",
    )
