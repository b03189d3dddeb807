"""
ⒸAngelaMos | 2025
user.py
"""
from collections.abc import Sequence
from datetime import (
    UTC,
    datetime,
    timedelta,
)
from typing import Any
from uuid import UUID

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy import (
    Select,
    func,
    inspect,
    or_,
    select,
    update,
)
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import undefer

from socialhub.core.constants import PASSWORD_CHANGED_AT_SKEW_SECONDS
from socialhub.core.exceptions import ValidationError
from socialhub.core.query import ListQuery
from socialhub.models.User import User
from socialhub.repositories.base import BaseRepository


PASSWORD_FIELDS = frozenset(
    {
        "hashed_password",
        "password_changed_at",
        "password_reset_token_hash",
        "password_reset_expires_at",
    }
)

_EMAIL_ADAPTER = TypeAdapter(EmailStr)


def _is_valid_email(value: str | None) -> bool:
    try:
        _EMAIL_ADAPTER.validate_python(value)
    except SchemaValidationError:
        return False
    return True


def validate_user_record(user: User) -> None:
    """
    Record level checks run by save() unless explicitly skipped
    """
    errors = []
    if not user.username:
        errors.append("Please tell us a username!")
    if not user.name:
        errors.append("Please tell us your name!")
    if not user.surname:
        errors.append("Please tell us your surname!")
    if not _is_valid_email(user.email) or user.email != user.email.lower():
        errors.append("Please provide a valid email")
    if (user.password_reset_token_hash is None) != (
            user.password_reset_expires_at is None):
        errors.append("Reset token and its expiry must be set together")
    if "hashed_password" not in inspect(user).unloaded and not user.hashed_password:
        errors.append("Please provide a password")

    if errors:
        raise ValidationError(f"Invalid input data. {'. '.join(errors)}")


class UserRepository(BaseRepository[User]):
    """
    Repository for User model database operations

    Default lookups only see active users and never load the password hash
    """
    model = User

    @staticmethod
    def _lookup(
        *conditions: Any,
        include_inactive: bool = False,
        with_password: bool = False,
    ) -> Select:
        stmt = select(User).where(*conditions)
        if not include_inactive:
            stmt = stmt.where(User.is_active.is_(True))
        if with_password:
            stmt = stmt.options(undefer(User.hashed_password)
                                ).execution_options(populate_existing = True)
        return stmt

    @classmethod
    async def get_by_id(
        cls,
        session: AsyncSession,
        id: UUID,
        *,
        include_inactive: bool = False,
        with_password: bool = False,
    ) -> User | None:
        """
        Get user by ID
        """
        result = await session.execute(
            cls._lookup(
                User.id == id,
                include_inactive = include_inactive,
                with_password = with_password,
            )
        )
        return result.scalars().first()

    @classmethod
    async def get_by_email(
        cls,
        session: AsyncSession,
        email: str,
        *,
        include_inactive: bool = False,
        with_password: bool = False,
    ) -> User | None:
        """
        Get user by email address
        """
        result = await session.execute(
            cls._lookup(
                User.email == email.lower(),
                include_inactive = include_inactive,
                with_password = with_password,
            )
        )
        return result.scalars().first()

    @classmethod
    async def get_by_username(
        cls,
        session: AsyncSession,
        username: str,
    ) -> User | None:
        """
        Get active user by username
        """
        result = await session.execute(
            cls._lookup(User.username == username)
        )
        return result.scalars().first()

    @classmethod
    async def get_by_reset_token(
        cls,
        session: AsyncSession,
        token_hash: str,
        now: datetime,
    ) -> User | None:
        """
        Active user holding this reset token hash with an unexpired window
        """
        result = await session.execute(
            cls._lookup(
                User.password_reset_token_hash == token_hash,
                User.password_reset_expires_at > now,
            )
        )
        return result.scalars().first()

    @classmethod
    async def email_exists(
        cls,
        session: AsyncSession,
        email: str,
    ) -> bool:
        """
        Check if email is already registered, including inactive accounts
        """
        result = await session.execute(
            select(User.id).where(User.email == email.lower())
        )
        return result.scalars().first() is not None

    @classmethod
    async def username_exists(
        cls,
        session: AsyncSession,
        username: str,
    ) -> bool:
        """
        Check if username is taken, including inactive accounts
        """
        result = await session.execute(
            select(User.id).where(User.username == username)
        )
        return result.scalars().first() is not None

    @classmethod
    async def create_user(
        cls,
        session: AsyncSession,
        username: str,
        name: str,
        surname: str,
        email: str,
        hashed_password: str,
    ) -> User:
        """
        Create a new user
        """
        user = User(
            username = username,
            name = name,
            surname = surname,
            email = email.lower(),
            hashed_password = hashed_password,
        )
        return await cls.save(session, user)

    @classmethod
    async def save(
        cls,
        session: AsyncSession,
        user: User,
        *,
        skip_validation: bool = False,
    ) -> User:
        """
        Persist a user, validating the record unless told not to
        """
        if not skip_validation:
            validate_user_record(user)
        session.add(user)
        await session.flush()
        await session.refresh(user)
        return user

    @classmethod
    async def update_fields(
        cls,
        session: AsyncSession,
        user: User,
        **fields: Any,
    ) -> User:
        """
        Update profile fields, never the password group
        """
        forbidden = PASSWORD_FIELDS.intersection(fields)
        if forbidden:
            raise ValueError(
                f"update_fields cannot change {sorted(forbidden)}"
            )
        return await cls.update(session, user, **fields)

    @classmethod
    async def update_password(
        cls,
        session: AsyncSession,
        user: User,
        hashed_password: str,
        now: datetime | None = None,
    ) -> User:
        """
        Store a new hash and stamp the change slightly in the past
        """
        changed_at = (now or datetime.now(UTC)) - timedelta(
            seconds = PASSWORD_CHANGED_AT_SKEW_SECONDS
        )
        user.hashed_password = hashed_password
        user.password_changed_at = changed_at
        return await cls.save(session, user)

    @classmethod
    async def set_password_reset_token(
        cls,
        session: AsyncSession,
        user: User,
        token_hash: str,
        expires_at: datetime,
    ) -> User:
        """
        Store a pending reset token hash and its expiry
        """
        user.password_reset_token_hash = token_hash
        user.password_reset_expires_at = expires_at
        return await cls.save(session, user, skip_validation = True)

    @classmethod
    async def clear_password_reset_token(
        cls,
        session: AsyncSession,
        user: User,
    ) -> User:
        """
        Drop any pending reset token
        """
        user.password_reset_token_hash = None
        user.password_reset_expires_at = None
        return await cls.save(session, user, skip_validation = True)

    @classmethod
    async def consume_password_reset_token(
        cls,
        session: AsyncSession,
        user_id: UUID,
        token_hash: str,
    ) -> bool:
        """
        Clear the reset fields only if they still hold this token

        Returns False when a concurrent request consumed it first
        """
        result = await session.execute(
            update(User).where(
                User.id == user_id,
                User.password_reset_token_hash == token_hash,
            ).values(
                password_reset_token_hash = None,
                password_reset_expires_at = None,
            )
        )
        return result.rowcount == 1

    @classmethod
    async def deactivate(
        cls,
        session: AsyncSession,
        user: User,
    ) -> User:
        """
        Soft delete, the row is kept
        """
        return await cls.update(session, user, is_active = False)

    @classmethod
    async def list_active(
        cls,
        session: AsyncSession,
        query: ListQuery,
    ) -> tuple[Sequence[User],
               int]:
        """
        Page of active users with total count
        """
        users = await cls.get_multi(session, query, User.is_active.is_(True))
        total = await cls.count(session, query, User.is_active.is_(True))
        return users, total

    @classmethod
    async def search(
        cls,
        session: AsyncSession,
        term: str,
        query: ListQuery,
    ) -> tuple[Sequence[User],
               int]:
        """
        Case insensitive match on username, name or surname
        """
        pattern = f"%{term.lower()}%"
        matches = or_(
            func.lower(User.username).like(pattern),
            func.lower(User.name).like(pattern),
            func.lower(User.surname).like(pattern),
        )
        active = User.is_active.is_(True)
        users = await cls.get_multi(session, query, active, matches)
        total = await cls.count(session, query, active, matches)
        return users, total
