"""
ⒸAngelaMos | 2025
user.py
"""

from uuid import UUID

from fastapi import (
    APIRouter,
    Query,
    Response,
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
    NOT_FOUND_404,
)
from socialhub.core.security import clear_access_cookie
from socialhub.schemas.user import (
    UserPublicListResponse,
    UserPublicResponse,
    UserResponse,
    UserUpdate,
)
from socialhub.services.user import UserService


router = APIRouter(prefix = "/users", tags = ["users"])


@router.get("/me", response_model = UserResponse, responses = {**AUTH_401})
async def get_me(current_user: CurrentUser) -> UserResponse:
    """
    Get current user profile
    """
    return UserResponse.model_validate(current_user)


@router.patch(
    "/me",
    response_model = UserResponse,
    responses = {
        **AUTH_401,
        **BAD_REQUEST_400
    },
)
async def update_me(
    db: DBSession,
    current_user: CurrentUser,
    user_data: UserUpdate,
) -> UserResponse:
    """
    Update name, surname, photo or bio
    """
    return await UserService.update_user(db, current_user, user_data)


@router.delete(
    "/me",
    status_code = status.HTTP_204_NO_CONTENT,
    responses = {**AUTH_401}
)
async def delete_me(
    response: Response,
    db: DBSession,
    current_user: CurrentUser,
) -> None:
    """
    Deactivate own account
    """
    await UserService.deactivate_user(db, current_user)
    clear_access_cookie(response)


@router.get(
    "/search",
    response_model = UserPublicListResponse,
    responses = {
        **AUTH_401,
        **BAD_REQUEST_400
    },
)
async def search_users(
    db: DBSession,
    _: CurrentUser,
    query: ListQueryDep,
    q: str = Query(min_length = 1),
) -> UserPublicListResponse:
    """
    Search users by username, name or surname
    """
    return await UserService.search_users(db, q, query)


@router.get(
    "/u/{username}",
    response_model = UserPublicResponse,
    responses = {
        **AUTH_401,
        **NOT_FOUND_404
    },
)
async def get_by_username(
    db: DBSession,
    _: CurrentUser,
    username: str,
) -> UserPublicResponse:
    """
    Public profile by username
    """
    return await UserService.get_public_profile(db, username)


@router.post(
    "/{user_id}/follow",
    status_code = status.HTTP_204_NO_CONTENT,
    responses = {
        **AUTH_401,
        **BAD_REQUEST_400,
        **NOT_FOUND_404
    },
)
async def follow_user(
    db: DBSession,
    current_user: CurrentUser,
    user_id: UUID,
) -> None:
    """
    Follow another user
    """
    await UserService.follow(db, current_user, user_id)


@router.post(
    "/{user_id}/unfollow",
    status_code = status.HTTP_204_NO_CONTENT,
    responses = {
        **AUTH_401,
        **BAD_REQUEST_400,
        **NOT_FOUND_404
    },
)
async def unfollow_user(
    db: DBSession,
    current_user: CurrentUser,
    user_id: UUID,
) -> None:
    """
    Unfollow another user
    """
    await UserService.unfollow(db, current_user, user_id)


@router.get(
    "/{user_id}/followers",
    response_model = UserPublicListResponse,
    responses = {
        **AUTH_401,
        **NOT_FOUND_404
    },
)
async def list_followers(
    db: DBSession,
    _: CurrentUser,
    user_id: UUID,
    query: ListQueryDep,
) -> UserPublicListResponse:
    return await UserService.list_followers(db, user_id, query)


@router.get(
    "/{user_id}/following",
    response_model = UserPublicListResponse,
    responses = {
        **AUTH_401,
        **NOT_FOUND_404
    },
)
async def list_following(
    db: DBSession,
    _: CurrentUser,
    user_id: UUID,
    query: ListQueryDep,
) -> UserPublicListResponse:
    return await UserService.list_following(db, user_id, query)
