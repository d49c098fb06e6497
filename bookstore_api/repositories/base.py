from __future__ import annotations

from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import Executable, func, inspect, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore_api.db.base import Base


ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository:
    """
    Base class for repositories providing common helpers.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def execute(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute a SQLAlchemy statement."""
        return await self.session.execute(statement, params or {})

    async def scalars(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute and return scalars."""
        result = await self.execute(statement, params)
        return result.scalars()

    async def scalar_one_or_none(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute and return a single scalar or None."""
        result = await self.execute(statement, params)
        return result.scalar_one_or_none()

    async def commit(self) -> None:
        """Commit current transaction."""
        await self.session.commit()

    async def add(self, entity: Any) -> None:
        """Add a single entity to session."""
        self.session.add(entity)

    async def save(self) -> bool:
        """
        Commit pending changes and report whether anything was written.
        """
        changes = len(self.session.new) + len(self.session.dirty) + len(self.session.deleted)
        await self.commit()
        return changes > 0


class CrudRepository(BaseRepository, Generic[ModelT]):
    """
    Generic CRUD primitives over a single model keyed by an integer `id`.

    Lookups return the entity or None; mutations return True when at least
    one row was written.
    """

    model: Type[ModelT]

    async def find_all(self) -> List[ModelT]:
        stmt = select(self.model).order_by(self.model.id)
        res = await self.scalars(stmt)
        return list(res)

    async def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        stmt = select(self.model).where(self.model.id == entity_id)
        return await self.scalar_one_or_none(stmt)

    async def exists(self, entity_id: int) -> bool:
        stmt = select(func.count()).select_from(self.model).where(self.model.id == entity_id)
        result = await self.execute(stmt)
        return int(result.scalar_one()) > 0

    async def create(self, entity: ModelT) -> bool:
        await self.add(entity)
        is_success = await self.save()
        if is_success:
            # reload generated id and eager relationships for the response
            stmt = (
                select(self.model)
                .where(self.model.id == entity.id)
                .execution_options(populate_existing=True)
            )
            await self.scalar_one_or_none(stmt)
        return is_success

    async def update(self, entity: ModelT) -> bool:
        values = {
            attr.key: getattr(entity, attr.key)
            for attr in inspect(self.model).column_attrs
            if attr.key != "id"
        }
        stmt = (
            update(self.model)
            .where(self.model.id == entity.id)
            .values(**values)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.execute(stmt)
        await self.commit()
        return result.rowcount > 0

    async def delete(self, entity: ModelT) -> bool:
        await self.session.delete(entity)
        return await self.save()
