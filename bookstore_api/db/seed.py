"""
Database seeding utilities for minimal reference data.

Seeds:
- Administrator and Customer roles
- An administrator account when ADMIN_EMAIL and ADMIN_PASSWORD are set

Usage:
  python -m bookstore_api.db.run_migrations upgrade head
  python -m bookstore_api.db.seed
"""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from bookstore_api.core.security import get_password_hash
from bookstore_api.core.settings import AppSettings, get_app_settings
from bookstore_api.db.session import get_async_session
from bookstore_api.repositories.security import SecurityRepository

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
async def seed_security(session: AsyncSession, settings: AppSettings) -> None:
    """Ensure roles exist and create the administrator account if configured."""
    repo = SecurityRepository(session)
    admin_role = await repo.ensure_role(settings.ADMIN_ROLE, "Administrator")
    await repo.ensure_role(settings.CUSTOMER_ROLE, "Customer")

    if not (settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD):
        logger.info("ADMIN_EMAIL/ADMIN_PASSWORD not set; skipping administrator account")
        return

    user = await repo.get_user_by_email(settings.ADMIN_EMAIL)
    if user is None:
        user = await repo.create_user(
            email=settings.ADMIN_EMAIL,
            hashed_password=get_password_hash(settings.ADMIN_PASSWORD),
        )
        logger.info("Created administrator account %s", settings.ADMIN_EMAIL)
    await repo.assign_role_to_user(user.id, admin_role.id)


# PUBLIC_INTERFACE
async def seed_all() -> None:
    """Seed the database with roles and the administrator account."""
    settings = get_app_settings()
    async for session in get_async_session():
        await seed_security(session, settings)


if __name__ == "__main__":
    asyncio.run(seed_all())
