"""
ⒸAngelaMos | 2025
post.py
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.core.exceptions import PostNotFound
from socialhub.core.logging import get_logger
from socialhub.core.permissions import ensure_can_mutate
from socialhub.core.query import ListQuery
from socialhub.models.Post import Post
from socialhub.models.User import User
from socialhub.repositories.comment import CommentRepository
from socialhub.repositories.post import PostRepository
from socialhub.schemas.post import (
    LikeResponse,
    PostCreate,
    PostListResponse,
    PostResponse,
    PostUpdate,
)


logger = get_logger(__name__)


class PostService:
    """
    Business logic for posts and likes
    """
    @staticmethod
    async def get_post_model(
        session: AsyncSession,
        post_id: UUID,
    ) -> Post:
        post = await PostRepository.get_by_id(session, post_id)
        if post is None:
            raise PostNotFound(str(post_id))
        return post

    @staticmethod
    async def list_posts(
        session: AsyncSession,
        query: ListQuery,
        user_id: UUID | None = None,
    ) -> PostListResponse:
        """
        Feed of posts, optionally for a single author
        """
        posts, total = await PostRepository.list_posts(session, query, user_id)
        return PostListResponse(
            items = [PostResponse.model_validate(p) for p in posts],
            total = total,
            page = query.page,
            size = query.size,
        )

    @staticmethod
    async def get_post(
        session: AsyncSession,
        post_id: UUID,
    ) -> PostResponse:
        post = await PostService.get_post_model(session, post_id)
        return PostResponse.model_validate(post)

    @staticmethod
    async def create_post(
        session: AsyncSession,
        user: User,
        post_data: PostCreate,
    ) -> PostResponse:
        """
        Create a post owned by the acting user
        """
        post = await PostRepository.create(
            session,
            caption = post_data.caption,
            image = post_data.image,
            user_id = user.id,
            likes = [],
        )
        logger.info("post_created", post_id = str(post.id))
        return PostResponse.model_validate(post)

    @staticmethod
    async def update_post(
        session: AsyncSession,
        user: User,
        post_id: UUID,
        post_data: PostUpdate,
    ) -> PostResponse:
        """
        Update a post, owner or admin only
        """
        post = await PostService.get_post_model(session, post_id)
        ensure_can_mutate(post.user_id, user)
        updated = await PostRepository.update(
            session,
            post,
            **post_data.model_dump(exclude_none = True)
        )
        return PostResponse.model_validate(updated)

    @staticmethod
    async def delete_post(
        session: AsyncSession,
        user: User,
        post_id: UUID,
    ) -> None:
        """
        Delete a post with its comments and likes, owner or admin only
        """
        post = await PostService.get_post_model(session, post_id)
        ensure_can_mutate(post.user_id, user)
        await CommentRepository.delete_for_post(session, post.id)
        await PostRepository.delete(session, post)
        logger.info("post_deleted", post_id = str(post_id))

    @staticmethod
    async def toggle_like(
        session: AsyncSession,
        user: User,
        post_id: UUID,
    ) -> LikeResponse:
        """
        Like or unlike a post as the acting user
        """
        post = await PostService.get_post_model(session, post_id)
        liked = await PostRepository.toggle_like(session, post, user.id)
        return LikeResponse(
            liked = liked,
            post = PostResponse.model_validate(post),
        )
