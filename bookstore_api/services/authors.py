from __future__ import annotations

from bookstore_api.db.models.catalog import Author
from bookstore_api.schemas.authors import AuthorCreate, AuthorUpdate
from bookstore_api.services.crud import CrudService


class AuthorService(CrudService[Author, AuthorCreate, AuthorUpdate]):
    """Request handling for the Authors resource."""

    label = "AuthorsService"
    create_schema = AuthorCreate
    update_schema = AuthorUpdate
