from __future__ import annotations

from typing import Optional

from pydantic import Field

from .common import CamelModel


class AuthorSummary(CamelModel):
    """Author as embedded in a book."""
    id: int = Field(..., description="Author ID")
    first_name: str = Field(...)
    last_name: str = Field(...)
    bio: Optional[str] = Field(None)


class BookRead(CamelModel):
    """Book read model."""
    id: int = Field(..., description="Book ID")
    title: str = Field(..., description="Title")
    year: Optional[int] = Field(None)
    isbn: str = Field(..., description="ISBN")
    summary: Optional[str] = Field(None)
    image: Optional[str] = Field(None, description="Cover image reference")
    price: Optional[float] = Field(None)
    author_id: Optional[int] = Field(None)
    author: Optional[AuthorSummary] = Field(None)


class BookCreate(CamelModel):
    """Create book payload."""
    title: str = Field(..., min_length=1, description="Title")
    year: Optional[int] = Field(None)
    isbn: str = Field(..., min_length=1, description="ISBN")
    summary: Optional[str] = Field(None, max_length=500)
    image: Optional[str] = Field(None)
    price: Optional[float] = Field(None, ge=0)
    author_id: int = Field(..., description="Author ID")


class BookUpdate(CamelModel):
    """Update book payload; `id` must match the path id."""
    id: int = Field(..., description="Book ID")
    title: str = Field(..., min_length=1)
    year: Optional[int] = Field(None)
    isbn: str = Field(..., min_length=1)
    summary: Optional[str] = Field(None, max_length=500)
    image: Optional[str] = Field(None)
    price: Optional[float] = Field(None, ge=0)
    author_id: int = Field(...)
