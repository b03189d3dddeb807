"""
ⒸAngelaMos | 2025
user.py
"""

from typing import Any
from uuid import UUID

from pydantic import (
    EmailStr,
    Field,
    field_validator,
    model_validator,
)

from socialhub.core.constants import (
    BIO_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    PHOTO_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
)
from socialhub.core.enums import UserRole
from socialhub.schemas.base import (
    BaseSchema,
    BaseResponseSchema,
)


PASSWORD_INPUT_FIELDS = ("password", "password_confirm", "current_password")

NOT_NULL_FIELDS = frozenset({"name", "surname", "role", "is_active"})


class PasswordConfirmMixin(BaseSchema):
    """
    New password typed twice
    """
    password: str = Field(
        min_length = PASSWORD_MIN_LENGTH,
        max_length = PASSWORD_MAX_LENGTH
    )
    password_confirm: str

    @model_validator(mode = "after")
    def passwords_match(self) -> "PasswordConfirmMixin":
        if self.password != self.password_confirm:
            raise ValueError("Passwords are not the same!")
        return self


def _reject_password_fields(data: Any) -> Any:
    if isinstance(data, dict) and any(
            key in data for key in PASSWORD_INPUT_FIELDS):
        raise ValueError(
            "This route is not for password updates. "
            "Please use /auth/update-password."
        )
    return data


class UserCreate(PasswordConfirmMixin):
    """
    Schema for user registration
    """
    username: str = Field(min_length = 1, max_length = USERNAME_MAX_LENGTH)
    name: str = Field(min_length = 1, max_length = NAME_MAX_LENGTH)
    surname: str = Field(min_length = 1, max_length = NAME_MAX_LENGTH)
    email: EmailStr

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()


class UserUpdate(BaseSchema):
    """
    Profile fields a user may change on their own account
    """
    name: str | None = Field(
        default = None,
        min_length = 1,
        max_length = NAME_MAX_LENGTH
    )
    surname: str | None = Field(
        default = None,
        min_length = 1,
        max_length = NAME_MAX_LENGTH
    )
    photo: str | None = Field(default = None, max_length = PHOTO_MAX_LENGTH)
    bio: str | None = Field(default = None, max_length = BIO_MAX_LENGTH)

    @model_validator(mode = "before")
    @classmethod
    def no_password_fields(cls, data: Any) -> Any:
        return _reject_password_fields(data)

    @model_validator(mode = "after")
    def required_fields_not_null(self) -> "UserUpdate":
        for field in self.model_fields_set & NOT_NULL_FIELDS:
            if getattr(self, field) is None:
                raise ValueError(f"{field} cannot be empty")
        return self


class UserUpdateAdmin(UserUpdate):
    """
    Admin may also change role and activation
    """
    role: UserRole | None = None
    is_active: bool | None = None


class UserPublicResponse(BaseSchema):
    """
    Profile as other users see it
    """
    id: UUID
    username: str
    name: str
    surname: str
    photo: str | None = None
    bio: str | None = None


class UserResponse(BaseResponseSchema):
    """
    Schema for user API responses
    """
    username: str
    name: str
    surname: str
    email: str
    photo: str | None = None
    bio: str | None = None
    role: UserRole
    is_active: bool


class UserListResponse(BaseSchema):
    """
    Schema for paginated user list
    """
    items: list[UserResponse]
    total: int
    page: int
    size: int


class UserPublicListResponse(BaseSchema):
    """
    Paginated public profiles
    """
    items: list[UserPublicResponse]
    total: int
    page: int
    size: int
