"""
Public Pydantic schemas used by FastAPI routes, services, and tests.

Catalog schemas come in create / update / read variants per entity. JSON
field names are camelCase; Python attribute names are snake_case.
"""

from .common import MessageResponse  # noqa: F401
