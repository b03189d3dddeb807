"""
ⒸAngelaMos | 2025
comment.py
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.core.exceptions import CommentNotFound
from socialhub.core.permissions import ensure_can_mutate
from socialhub.core.query import ListQuery
from socialhub.models.Comment import Comment
from socialhub.models.User import User
from socialhub.repositories.comment import CommentRepository
from socialhub.schemas.comment import (
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    CommentUpdate,
)
from socialhub.services.post import PostService


class CommentService:
    """
    Business logic for comments, every call is scoped to an existing post
    """
    @staticmethod
    async def get_comment_model(
        session: AsyncSession,
        post_id: UUID,
        comment_id: UUID,
    ) -> Comment:
        await PostService.get_post_model(session, post_id)
        comment = await CommentRepository.get_for_post(
            session,
            post_id,
            comment_id
        )
        if comment is None:
            raise CommentNotFound(str(comment_id))
        return comment

    @staticmethod
    async def list_comments(
        session: AsyncSession,
        post_id: UUID,
        query: ListQuery,
    ) -> CommentListResponse:
        await PostService.get_post_model(session, post_id)
        comments, total = await CommentRepository.list_for_post(
            session,
            post_id,
            query
        )
        return CommentListResponse(
            items = [CommentResponse.model_validate(c) for c in comments],
            total = total,
            page = query.page,
            size = query.size,
        )

    @staticmethod
    async def get_comment(
        session: AsyncSession,
        post_id: UUID,
        comment_id: UUID,
    ) -> CommentResponse:
        comment = await CommentService.get_comment_model(
            session,
            post_id,
            comment_id
        )
        return CommentResponse.model_validate(comment)

    @staticmethod
    async def create_comment(
        session: AsyncSession,
        user: User,
        post_id: UUID,
        comment_data: CommentCreate,
    ) -> CommentResponse:
        """
        Comment on a post as the acting user
        """
        await PostService.get_post_model(session, post_id)
        comment = await CommentRepository.create(
            session,
            content = comment_data.content,
            post_id = post_id,
            user_id = user.id,
        )
        return CommentResponse.model_validate(comment)

    @staticmethod
    async def update_comment(
        session: AsyncSession,
        user: User,
        post_id: UUID,
        comment_id: UUID,
        comment_data: CommentUpdate,
    ) -> CommentResponse:
        comment = await CommentService.get_comment_model(
            session,
            post_id,
            comment_id
        )
        ensure_can_mutate(comment.user_id, user)
        updated = await CommentRepository.update(
            session,
            comment,
            content = comment_data.content
        )
        return CommentResponse.model_validate(updated)

    @staticmethod
    async def delete_comment(
        session: AsyncSession,
        user: User,
        post_id: UUID,
        comment_id: UUID,
    ) -> None:
        comment = await CommentService.get_comment_model(
            session,
            post_id,
            comment_id
        )
        ensure_can_mutate(comment.user_id, user)
        await CommentRepository.delete(session, comment)
