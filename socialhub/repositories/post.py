"""
ⒸAngelaMos | 2025
post.py
"""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.core.query import ListQuery
from socialhub.models.Post import Post
from socialhub.models.PostLike import PostLike
from socialhub.repositories.base import BaseRepository


class PostRepository(BaseRepository[Post]):
    """
    Repository for Post model database operations
    """
    model = Post

    @classmethod
    async def list_posts(
        cls,
        session: AsyncSession,
        query: ListQuery,
        user_id: UUID | None = None,
    ) -> tuple[Sequence[Post],
               int]:
        """
        Page of posts, optionally only those of one author
        """
        conditions = [] if user_id is None else [Post.user_id == user_id]
        posts = await cls.get_multi(session, query, *conditions)
        total = await cls.count(session, query, *conditions)
        return posts, total

    @staticmethod
    async def toggle_like(
        session: AsyncSession,
        post: Post,
        user_id: UUID,
    ) -> bool:
        """
        Like the post or take the like back, returns the new state
        """
        existing = next(
            (like for like in post.likes if like.user_id == user_id),
            None,
        )
        if existing is not None:
            post.likes.remove(existing)
        else:
            post.likes.append(PostLike(user_id = user_id))
        await session.flush()
        return existing is None
