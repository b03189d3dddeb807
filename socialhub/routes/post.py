"""
ⒸAngelaMos | 2025
post.py
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
from socialhub.schemas.post import (
    LikeResponse,
    PostCreate,
    PostListResponse,
    PostResponse,
    PostUpdate,
)
from socialhub.services.post import PostService


router = APIRouter(prefix = "/posts", tags = ["posts"])


@router.get("", response_model = PostListResponse)
async def list_posts(
    db: DBSession,
    query: ListQueryDep,
) -> PostListResponse:
    """
    Public feed with filtering, sorting and pagination
    """
    return await PostService.list_posts(db, query)


@router.get("/me", response_model = PostListResponse, responses = {**AUTH_401})
async def list_my_posts(
    db: DBSession,
    current_user: CurrentUser,
    query: ListQueryDep,
) -> PostListResponse:
    """
    Posts of the current user
    """
    return await PostService.list_posts(db, query, current_user.id)


@router.get("/user/{user_id}", response_model = PostListResponse)
async def list_user_posts(
    db: DBSession,
    user_id: UUID,
    query: ListQueryDep,
) -> PostListResponse:
    """
    Posts of one author
    """
    return await PostService.list_posts(db, query, user_id)


@router.get(
    "/{post_id}",
    response_model = PostResponse,
    responses = {**NOT_FOUND_404}
)
async def get_post(
    db: DBSession,
    post_id: UUID,
) -> PostResponse:
    return await PostService.get_post(db, post_id)


@router.post(
    "",
    response_model = PostResponse,
    status_code = status.HTTP_201_CREATED,
    responses = {
        **AUTH_401,
        **BAD_REQUEST_400
    },
)
async def create_post(
    db: DBSession,
    current_user: CurrentUser,
    post_data: PostCreate,
) -> PostResponse:
    """
    Publish a new post
    """
    return await PostService.create_post(db, current_user, post_data)


@router.patch(
    "/{post_id}",
    response_model = PostResponse,
    responses = {
        **AUTH_401,
        **FORBIDDEN_403,
        **NOT_FOUND_404
    },
)
async def update_post(
    db: DBSession,
    current_user: CurrentUser,
    post_id: UUID,
    post_data: PostUpdate,
) -> PostResponse:
    """
    Edit a post (owner or admin)
    """
    return await PostService.update_post(db, current_user, post_id, post_data)


@router.delete(
    "/{post_id}",
    status_code = status.HTTP_204_NO_CONTENT,
    responses = {
        **AUTH_401,
        **FORBIDDEN_403,
        **NOT_FOUND_404
    },
)
async def delete_post(
    db: DBSession,
    current_user: CurrentUser,
    post_id: UUID,
) -> None:
    """
    Delete a post (owner or admin)
    """
    await PostService.delete_post(db, current_user, post_id)


@router.patch(
    "/{post_id}/like",
    response_model = LikeResponse,
    responses = {
        **AUTH_401,
        **NOT_FOUND_404
    },
)
async def toggle_like(
    db: DBSession,
    current_user: CurrentUser,
    post_id: UUID,
) -> LikeResponse:
    """
    Like the post, or remove the like if already given
    """
    return await PostService.toggle_like(db, current_user, post_id)
