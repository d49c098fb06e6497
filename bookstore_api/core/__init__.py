"""
Core application utilities for settings, logging, security and FastAPI dependencies.

This package provides:
- Application-level settings (separate from DB settings)
- Structured logging with correlation ids and operation labels
- Password hashing and JWT helpers
- Dependency helpers (session, current user, access policy checks)
"""
