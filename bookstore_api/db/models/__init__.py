"""
ORM models for the catalog (authors, books) and identity (users, roles).

Importing this package ensures model classes are registered with the Base
metadata for Alembic and runtime usage.
"""

from .catalog import (  # noqa: F401
    Author,
    Book,
)
from .security import (  # noqa: F401
    User,
    Role,
    UserRole,
)
