"""
ⒸAngelaMos | 2025
admin.py
"""

from uuid import UUID

from fastapi import (
    APIRouter,
    status,
)

from socialhub.core.dependencies import (
    AdminOnly,
    DBSession,
    ListQueryDep,
)
from socialhub.core.responses import (
    AUTH_401,
    BAD_REQUEST_400,
    FORBIDDEN_403,
    NOT_FOUND_404,
)
from socialhub.schemas.user import (
    UserListResponse,
    UserResponse,
    UserUpdateAdmin,
)
from socialhub.services.user import UserService


router = APIRouter(prefix = "/admin", tags = ["admin"])


@router.get(
    "/users",
    response_model = UserListResponse,
    responses = {
        **AUTH_401,
        **FORBIDDEN_403
    },
)
async def list_users(
    db: DBSession,
    _: AdminOnly,
    query: ListQueryDep,
) -> UserListResponse:
    """
    List all users (admin only)
    """
    return await UserService.list_users(db, query)


@router.get(
    "/users/{user_id}",
    response_model = UserResponse,
    responses = {
        **AUTH_401,
        **FORBIDDEN_403,
        **NOT_FOUND_404
    },
)
async def get_user(
    db: DBSession,
    _: AdminOnly,
    user_id: UUID,
) -> UserResponse:
    """
    Get user by ID (admin only)
    """
    return await UserService.admin_get_user(db, user_id)


@router.patch(
    "/users/{user_id}",
    response_model = UserResponse,
    responses = {
        **AUTH_401,
        **BAD_REQUEST_400,
        **FORBIDDEN_403,
        **NOT_FOUND_404
    },
)
async def update_user(
    db: DBSession,
    _: AdminOnly,
    user_id: UUID,
    user_data: UserUpdateAdmin,
) -> UserResponse:
    """
    Update user (admin only)
    """
    return await UserService.admin_update_user(db, user_id, user_data)


@router.delete(
    "/users/{user_id}",
    status_code = status.HTTP_204_NO_CONTENT,
    responses = {
        **AUTH_401,
        **FORBIDDEN_403,
        **NOT_FOUND_404
    },
)
async def delete_user(
    db: DBSession,
    _: AdminOnly,
    user_id: UUID,
) -> None:
    """
    Deactivate user (admin only, soft delete)
    """
    await UserService.admin_delete_user(db, user_id)
