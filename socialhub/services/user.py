"""
ⒸAngelaMos | 2025
user.py
"""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.core.exceptions import (
    UserNotFound,
    ValidationError,
)
from socialhub.core.logging import get_logger
from socialhub.core.query import ListQuery
from socialhub.models.User import User
from socialhub.repositories.follow import FollowRepository
from socialhub.repositories.user import UserRepository
from socialhub.schemas.user import (
    UserListResponse,
    UserPublicListResponse,
    UserPublicResponse,
    UserResponse,
    UserUpdate,
    UserUpdateAdmin,
)


logger = get_logger(__name__)


def _public_page(
    users: Sequence[User],
    total: int,
    query: ListQuery,
) -> UserPublicListResponse:
    return UserPublicListResponse(
        items = [UserPublicResponse.model_validate(u) for u in users],
        total = total,
        page = query.page,
        size = query.size,
    )


class UserService:
    """
    Business logic for user operations
    """
    @staticmethod
    async def get_user_model_by_id(
        session: AsyncSession,
        user_id: UUID,
        *,
        include_inactive: bool = False,
    ) -> User:
        """
        Get user model by ID (for internal use)
        """
        user = await UserRepository.get_by_id(
            session,
            user_id,
            include_inactive = include_inactive,
        )
        if not user:
            raise UserNotFound(str(user_id))
        return user

    @staticmethod
    async def get_public_profile(
        session: AsyncSession,
        username: str,
    ) -> UserPublicResponse:
        """
        Look up an active user by username
        """
        user = await UserRepository.get_by_username(session, username)
        if not user:
            raise UserNotFound(username)
        return UserPublicResponse.model_validate(user)

    @staticmethod
    async def update_user(
        session: AsyncSession,
        user: User,
        user_data: UserUpdate,
    ) -> UserResponse:
        """
        Update user profile
        """
        update_dict = user_data.model_dump(exclude_unset = True)
        updated_user = await UserRepository.update_fields(
            session,
            user,
            **update_dict
        )
        return UserResponse.model_validate(updated_user)

    @staticmethod
    async def deactivate_user(
        session: AsyncSession,
        user: User,
    ) -> None:
        """
        Deactivate user account
        """
        await UserRepository.deactivate(session, user)
        logger.info("user_deactivated", user_id = str(user.id))

    @staticmethod
    async def search_users(
        session: AsyncSession,
        term: str,
        query: ListQuery,
    ) -> UserPublicListResponse:
        """
        Search active users by username, name or surname
        """
        if not term.strip():
            raise ValidationError("Please provide a search term")
        users, total = await UserRepository.search(
            session,
            term.strip(),
            query
        )
        return _public_page(users, total, query)

    @staticmethod
    async def follow(
        session: AsyncSession,
        user: User,
        target_id: UUID,
    ) -> None:
        """
        Start following another active user
        """
        if target_id == user.id:
            raise ValidationError("You cannot follow yourself")
        await UserService.get_user_model_by_id(session, target_id)
        if await FollowRepository.follow(session, user.id, target_id):
            logger.info("user_followed", target_id = str(target_id))

    @staticmethod
    async def unfollow(
        session: AsyncSession,
        user: User,
        target_id: UUID,
    ) -> None:
        """
        Stop following another active user
        """
        if target_id == user.id:
            raise ValidationError("You cannot unfollow yourself")
        await UserService.get_user_model_by_id(session, target_id)
        if await FollowRepository.unfollow(session, user.id, target_id):
            logger.info("user_unfollowed", target_id = str(target_id))

    @staticmethod
    async def list_followers(
        session: AsyncSession,
        user_id: UUID,
        query: ListQuery,
    ) -> UserPublicListResponse:
        await UserService.get_user_model_by_id(session, user_id)
        users, total = await FollowRepository.followers(session, user_id, query)
        return _public_page(users, total, query)

    @staticmethod
    async def list_following(
        session: AsyncSession,
        user_id: UUID,
        query: ListQuery,
    ) -> UserPublicListResponse:
        await UserService.get_user_model_by_id(session, user_id)
        users, total = await FollowRepository.following(session, user_id, query)
        return _public_page(users, total, query)

    @staticmethod
    async def list_users(
        session: AsyncSession,
        query: ListQuery,
    ) -> UserListResponse:
        """
        List users with pagination, inactive accounts included
        """
        users = await UserRepository.get_multi(session, query)
        total = await UserRepository.count(session, query)
        return UserListResponse(
            items = [UserResponse.model_validate(u) for u in users],
            total = total,
            page = query.page,
            size = query.size,
        )

    @staticmethod
    async def admin_get_user(
        session: AsyncSession,
        user_id: UUID,
    ) -> UserResponse:
        user = await UserService.get_user_model_by_id(
            session,
            user_id,
            include_inactive = True,
        )
        return UserResponse.model_validate(user)

    @staticmethod
    async def admin_update_user(
        session: AsyncSession,
        user_id: UUID,
        user_data: UserUpdateAdmin,
    ) -> UserResponse:
        """
        Admin updates a user
        """
        user = await UserService.get_user_model_by_id(
            session,
            user_id,
            include_inactive = True,
        )
        update_dict = user_data.model_dump(exclude_unset = True)
        updated_user = await UserRepository.update_fields(
            session,
            user,
            **update_dict
        )
        logger.info(
            "admin_updated_user",
            target_id = str(user_id),
            fields = sorted(update_dict),
        )
        return UserResponse.model_validate(updated_user)

    @staticmethod
    async def admin_delete_user(
        session: AsyncSession,
        user_id: UUID,
    ) -> None:
        """
        Admin deactivates a user, the row is kept
        """
        user = await UserService.get_user_model_by_id(
            session,
            user_id,
            include_inactive = True,
        )
        await UserRepository.deactivate(session, user)
        logger.info("admin_deactivated_user", target_id = str(user_id))
