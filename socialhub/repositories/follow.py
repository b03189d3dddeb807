"""
ⒸAngelaMos | 2025
follow.py
"""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import (
    delete,
    func,
    insert,
    select,
)
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.core.query import ListQuery
from socialhub.models.Follow import follows
from socialhub.models.User import User


class FollowRepository:
    """
    Operations on the follower graph
    """
    @staticmethod
    async def is_following(
        session: AsyncSession,
        follower_id: UUID,
        following_id: UUID,
    ) -> bool:
        result = await session.execute(
            select(follows.c.follower_id).where(
                follows.c.follower_id == follower_id,
                follows.c.following_id == following_id,
            )
        )
        return result.first() is not None

    @classmethod
    async def follow(
        cls,
        session: AsyncSession,
        follower_id: UUID,
        following_id: UUID,
    ) -> bool:
        """
        Add an edge, returns False when it already existed
        """
        if await cls.is_following(session, follower_id, following_id):
            return False
        await session.execute(
            insert(follows).values(
                follower_id = follower_id,
                following_id = following_id,
            )
        )
        return True

    @staticmethod
    async def unfollow(
        session: AsyncSession,
        follower_id: UUID,
        following_id: UUID,
    ) -> bool:
        """
        Remove an edge, returns False when there was none
        """
        result = await session.execute(
            delete(follows).where(
                follows.c.follower_id == follower_id,
                follows.c.following_id == following_id,
            )
        )
        return result.rowcount > 0

    @staticmethod
    async def followers(
        session: AsyncSession,
        user_id: UUID,
        query: ListQuery,
    ) -> tuple[Sequence[User],
               int]:
        """
        Active users following user_id
        """
        conditions = (
            follows.c.following_id == user_id,
            User.is_active.is_(True),
        )
        stmt = select(User).join(follows, follows.c.follower_id == User.id)
        result = await session.execute(
            query.apply(stmt.where(*conditions), User)
        )
        total = await session.execute(
            select(func.count()).select_from(User).join(
                follows,
                follows.c.follower_id == User.id
            ).where(*conditions, *query.where_clauses(User))
        )
        return result.scalars().all(), total.scalar_one()

    @staticmethod
    async def following(
        session: AsyncSession,
        user_id: UUID,
        query: ListQuery,
    ) -> tuple[Sequence[User],
               int]:
        """
        Active users that user_id follows
        """
        conditions = (
            follows.c.follower_id == user_id,
            User.is_active.is_(True),
        )
        stmt = select(User).join(follows, follows.c.following_id == User.id)
        result = await session.execute(
            query.apply(stmt.where(*conditions), User)
        )
        total = await session.execute(
            select(func.count()).select_from(User).join(
                follows,
                follows.c.following_id == User.id
            ).where(*conditions, *query.where_clauses(User))
        )
        return result.scalars().all(), total.scalar_one()
