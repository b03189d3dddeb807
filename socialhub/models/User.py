"""
ⒸAngelaMos | 2025
User.py
"""

from datetime import datetime

from sqlalchemy import (
    DateTime,
    Enum,
    String,
)
from sqlalchemy.orm import (
    Mapped,
    mapped_column,
)

from socialhub.config import (
    EMAIL_MAX_LENGTH,
    PASSWORD_HASH_MAX_LENGTH,
    UserRole,
)
from socialhub.core.constants import (
    BIO_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PHOTO_MAX_LENGTH,
    RESET_TOKEN_HASH_LENGTH,
    USERNAME_MAX_LENGTH,
)
from socialhub.models.Base import (
    Base,
    TimestampMixin,
    UUIDMixin,
    as_utc,
)


class User(Base, UUIDMixin, TimestampMixin):
    """
    User account model

    hashed_password is deferred and raises unless explicitly loaded
    """
    __tablename__ = "users"

    FILTERABLE_FIELDS = (
        "username",
        "name",
        "surname",
        "role",
        "is_active",
        "created_at",
    )

    username: Mapped[str] = mapped_column(
        String(USERNAME_MAX_LENGTH),
        unique = True,
        index = True,
    )
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH))
    surname: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH))
    email: Mapped[str] = mapped_column(
        String(EMAIL_MAX_LENGTH),
        unique = True,
        index = True,
    )
    photo: Mapped[str | None] = mapped_column(
        String(PHOTO_MAX_LENGTH),
        default = None,
    )
    bio: Mapped[str | None] = mapped_column(
        String(BIO_MAX_LENGTH),
        default = None,
    )
    role: Mapped[UserRole] = mapped_column(
        Enum(
            UserRole,
            name = "user_role",
            native_enum = False,
            values_callable = lambda roles: [r.value for r in roles],
        ),
        default = UserRole.USER,
    )
    hashed_password: Mapped[str] = mapped_column(
        String(PASSWORD_HASH_MAX_LENGTH),
        deferred = True,
        deferred_raiseload = True,
    )
    password_changed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone = True),
        default = None,
    )
    password_reset_token_hash: Mapped[str | None] = mapped_column(
        String(RESET_TOKEN_HASH_LENGTH),
        default = None,
        index = True,
    )
    password_reset_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone = True),
        default = None,
    )
    is_active: Mapped[bool] = mapped_column(default = True)

    def changed_password_after(self, issued_at: datetime) -> bool:
        """
        True when the password changed at or after a token was issued
        """
        if self.password_changed_at is None:
            return False
        return as_utc(self.password_changed_at) >= as_utc(issued_at)
