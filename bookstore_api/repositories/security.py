from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from bookstore_api.db.models.security import Role, User, UserRole
from .base import BaseRepository


class SecurityRepository(BaseRepository):
    """Repository for users and roles."""

    # Users
    async def get_user_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email)
        return await self.scalar_one_or_none(stmt)

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        return await self.scalar_one_or_none(stmt)

    async def create_user(self, *, email: str, hashed_password: str, is_active: bool = True) -> User:
        user = User(email=email, hashed_password=hashed_password, is_active=is_active)
        await self.add(user)
        await self.commit()
        await self.session.refresh(user)
        return user

    # Roles
    async def get_role_by_name(self, name: str) -> Optional[Role]:
        stmt = select(Role).where(Role.name == name)
        return await self.scalar_one_or_none(stmt)

    async def ensure_role(self, name: str, description: Optional[str] = None) -> Role:
        role = await self.get_role_by_name(name)
        if role:
            return role
        role = Role(name=name, description=description)
        await self.add(role)
        await self.commit()
        return (await self.get_role_by_name(name))  # type: ignore

    # Associations
    async def assign_role_to_user(self, user_id: int, role_id: int) -> None:
        existing = await self.scalar_one_or_none(
            select(UserRole).where(UserRole.user_id == user_id, UserRole.role_id == role_id)
        )
        if existing:
            return
        await self.add(UserRole(user_id=user_id, role_id=role_id))
        await self.commit()
