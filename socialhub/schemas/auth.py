"""
ⒸAngelaMos | 2025
auth.py
"""

from pydantic import (
    EmailStr,
    Field,
)

from socialhub.schemas.base import BaseSchema
from socialhub.schemas.user import (
    PasswordConfirmMixin,
    UserResponse,
)


class LoginRequest(BaseSchema):
    """
    Email and password login
    """
    email: EmailStr
    password: str = Field(min_length = 1)


class PasswordChange(PasswordConfirmMixin):
    """
    Schema for password change while logged in
    """
    current_password: str = Field(min_length = 1)


class PasswordResetRequest(BaseSchema):
    """
    Email that should receive a reset link
    """
    email: EmailStr


class PasswordResetConfirm(PasswordConfirmMixin):
    """
    New password submitted with a reset token
    """


class TokenWithUserResponse(BaseSchema):
    """
    Access token with user data
    """
    status: str = "success"
    token: str
    user: UserResponse
