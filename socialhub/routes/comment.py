"""
ⒸAngelaMos | 2025
comment.py
"""

from uuid import UUID

from fastapi import (
    APIRouter,
    status,
)

from socialhub.core.dependencies import (
    CurrentUser,
    DBSession,
    ListQueryDep,
)
from socialhub.core.responses import (
    AUTH_401,
    BAD_REQUEST_400,
    FORBIDDEN_403,
    NOT_FOUND_404,
)
from socialhub.schemas.comment import (
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    CommentUpdate,
)
from socialhub.services.comment import CommentService


router = APIRouter(prefix = "/posts/{post_id}/comments", tags = ["comments"])


@router.get(
    "",
    response_model = CommentListResponse,
    responses = {
        **AUTH_401,
        **NOT_FOUND_404
    },
)
async def list_comments(
    db: DBSession,
    _: CurrentUser,
    post_id: UUID,
    query: ListQueryDep,
) -> CommentListResponse:
    """
    Comments on a post
    """
    return await CommentService.list_comments(db, post_id, query)


@router.post(
    "",
    response_model = CommentResponse,
    status_code = status.HTTP_201_CREATED,
    responses = {
        **AUTH_401,
        **BAD_REQUEST_400,
        **NOT_FOUND_404
    },
)
async def create_comment(
    db: DBSession,
    current_user: CurrentUser,
    post_id: UUID,
    comment_data: CommentCreate,
) -> CommentResponse:
    """
    Comment on a post
    """
    return await CommentService.create_comment(
        db,
        current_user,
        post_id,
        comment_data
    )


@router.get(
    "/{comment_id}",
    response_model = CommentResponse,
    responses = {
        **AUTH_401,
        **NOT_FOUND_404
    },
)
async def get_comment(
    db: DBSession,
    _: CurrentUser,
    post_id: UUID,
    comment_id: UUID,
) -> CommentResponse:
    return await CommentService.get_comment(db, post_id, comment_id)


@router.patch(
    "/{comment_id}",
    response_model = CommentResponse,
    responses = {
        **AUTH_401,
        **FORBIDDEN_403,
        **NOT_FOUND_404
    },
)
async def update_comment(
    db: DBSession,
    current_user: CurrentUser,
    post_id: UUID,
    comment_id: UUID,
    comment_data: CommentUpdate,
) -> CommentResponse:
    """
    Edit a comment (author or admin)
    """
    return await CommentService.update_comment(
        db,
        current_user,
        post_id,
        comment_id,
        comment_data,
    )


@router.delete(
    "/{comment_id}",
    status_code = status.HTTP_204_NO_CONTENT,
    responses = {
        **AUTH_401,
        **FORBIDDEN_403,
        **NOT_FOUND_404
    },
)
async def delete_comment(
    db: DBSession,
    current_user: CurrentUser,
    post_id: UUID,
    comment_id: UUID,
) -> None:
    """
    Delete a comment (author or admin)
    """
    await CommentService.delete_comment(db, current_user, post_id, comment_id)
