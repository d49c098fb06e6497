"""
API route modules.

This package contains subrouters for:
- Auth: register, login, refresh and current user
- Authors: CRUD over the authors catalog
- Books: CRUD over the books catalog

Routers are included from bookstore_api.api.main (under the /api prefix).
"""
