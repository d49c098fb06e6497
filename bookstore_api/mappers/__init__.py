"""Field-by-field converters between ORM entities and API DTOs."""

from .author_mapper import AuthorMapper  # noqa: F401
from .book_mapper import BookMapper  # noqa: F401
