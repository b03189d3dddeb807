"""
ⒸAngelaMos | 2025
base.py
"""

from collections.abc import Sequence
from typing import (
    Any,
    Generic,
    TypeVar,
)
from uuid import UUID

from sqlalchemy import (
    func,
    select,
)
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.core.query import ListQuery
from socialhub.models.Base import Base


ModelT = TypeVar("ModelT", bound = Base)


class BaseRepository(Generic[ModelT]):
    """
    Generic async CRUD operations shared by all repositories
    """
    model: type[ModelT]

    @classmethod
    async def get_by_id(
        cls,
        session: AsyncSession,
        id: UUID,
    ) -> ModelT | None:
        """
        Get a row by primary key
        """
        return await session.get(cls.model, id)

    @classmethod
    async def get_multi(
        cls,
        session: AsyncSession,
        query: ListQuery,
        *conditions: Any,
    ) -> Sequence[ModelT]:
        """
        Filtered, sorted and paginated rows
        """
        stmt = query.apply(select(cls.model).where(*conditions), cls.model)
        result = await session.execute(stmt)
        return result.scalars().all()

    @classmethod
    async def count(
        cls,
        session: AsyncSession,
        query: ListQuery | None = None,
        *conditions: Any,
    ) -> int:
        """
        Count rows matching the same filters as get_multi
        """
        stmt = select(func.count()).select_from(cls.model).where(*conditions)
        if query is not None:
            stmt = stmt.where(*query.where_clauses(cls.model))
        result = await session.execute(stmt)
        return result.scalar_one()

    @classmethod
    async def create(
        cls,
        session: AsyncSession,
        **kwargs: Any,
    ) -> ModelT:
        """
        Insert a new row
        """
        instance = cls.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    @classmethod
    async def update(
        cls,
        session: AsyncSession,
        instance: ModelT,
        **kwargs: Any,
    ) -> ModelT:
        """
        Set attributes on an existing row
        """
        for key, value in kwargs.items():
            setattr(instance, key, value)
        await session.flush()
        await session.refresh(instance)
        return instance

    @classmethod
    async def delete(
        cls,
        session: AsyncSession,
        instance: ModelT,
    ) -> None:
        """
        Delete a row
        """
        await session.delete(instance)
        await session.flush()
