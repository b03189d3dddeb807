"""
ⒸAngelaMos | 2025
comment.py
"""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import (
    delete,
    select,
)
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.core.query import ListQuery
from socialhub.models.Comment import Comment
from socialhub.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    """
    Repository for comments, always scoped to their post
    """
    model = Comment

    @classmethod
    async def get_for_post(
        cls,
        session: AsyncSession,
        post_id: UUID,
        comment_id: UUID,
    ) -> Comment | None:
        result = await session.execute(
            select(Comment).where(
                Comment.id == comment_id,
                Comment.post_id == post_id,
            )
        )
        return result.scalars().first()

    @classmethod
    async def list_for_post(
        cls,
        session: AsyncSession,
        post_id: UUID,
        query: ListQuery,
    ) -> tuple[Sequence[Comment],
               int]:
        """
        Page of comments on one post
        """
        comments = await cls.get_multi(session, query, Comment.post_id == post_id)
        total = await cls.count(session, query, Comment.post_id == post_id)
        return comments, total

    @staticmethod
    async def delete_for_post(
        session: AsyncSession,
        post_id: UUID,
    ) -> None:
        """
        Remove every comment of a post before the post itself goes
        """
        await session.execute(
            delete(Comment).where(Comment.post_id == post_id)
        )
