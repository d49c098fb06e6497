from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .common import CamelModel


class BookSummary(CamelModel):
    """Book as listed under its author."""
    id: int = Field(..., description="Book ID")
    title: str = Field(..., description="Title")
    year: Optional[int] = Field(None)
    isbn: str = Field(..., description="ISBN")
    summary: Optional[str] = Field(None)
    image: Optional[str] = Field(None)
    price: Optional[float] = Field(None)


class AuthorRead(CamelModel):
    """Author read model."""
    id: int = Field(..., description="Author ID")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    bio: Optional[str] = Field(None)
    books: List[BookSummary] = Field(default_factory=list, description="Books by this author")


class AuthorCreate(CamelModel):
    """Create author payload."""
    first_name: str = Field(..., min_length=1, description="First name")
    last_name: str = Field(..., min_length=1, description="Last name")
    bio: Optional[str] = Field(None, max_length=250)


class AuthorUpdate(CamelModel):
    """Update author payload; `id` must match the path id."""
    id: int = Field(..., description="Author ID")
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    bio: Optional[str] = Field(None, max_length=250)
