from __future__ import annotations

from typing import Union

from bookstore_api.db.models.catalog import Author
from bookstore_api.schemas.authors import AuthorCreate, AuthorRead, AuthorUpdate


class AuthorMapper:
    """Mapper for Author ORM <-> DTO conversion."""

    def to_read(self, author: Author) -> AuthorRead:
        """Convert ORM model to the read DTO (books included)."""
        return AuthorRead.model_validate(author)

    def to_entity(self, dto: Union[AuthorCreate, AuthorUpdate]) -> Author:
        """Convert a create or update DTO to a detached ORM model."""
        author = Author(
            first_name=dto.first_name,
            last_name=dto.last_name,
            bio=dto.bio,
        )
        if isinstance(dto, AuthorUpdate):
            author.id = dto.id
        return author
