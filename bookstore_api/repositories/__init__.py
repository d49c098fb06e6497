"""
Repository layer for data access.

Repositories encapsulate SQLAlchemy queries for each entity type. The catalog
repositories expose the same CRUD primitives: find_all, find_by_id, exists,
create, update and delete.
"""
