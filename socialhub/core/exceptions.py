"""
ⒸAngelaMos | 2025
exceptions.py
"""

from collections.abc import Callable
from typing import Any

import jwt
from sqlalchemy.exc import IntegrityError


class BaseAppException(Exception):
    """
    Base exception for all application specific errors
    """
    def __init__(
        self,
        message: str,
        status_code: int = 500,
        extra: dict[str,
                    Any] | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.extra = extra or {}
        super().__init__(self.message)


class ValidationError(BaseAppException):
    """
    Raised for malformed input, including password confirmation mismatch
    """
    def __init__(
        self,
        message: str = "Invalid input data",
        extra: dict[str,
                    Any] | None = None,
    ) -> None:
        super().__init__(
            message = message,
            status_code = 400,
            extra = extra
        )


class InvalidOrExpiredResetToken(BaseAppException):
    """
    Raised when a password reset token does not match or has expired
    """
    def __init__(self, extra: dict[str, Any] | None = None) -> None:
        super().__init__(
            message = "Token is invalid or has expired",
            status_code = 400,
            extra = extra,
        )


class ResourceNotFound(BaseAppException):
    """
    Raised when a requested resource does not exist
    """
    def __init__(
        self,
        resource: str,
        identifier: str | int,
        extra: dict[str,
                    Any] | None = None,
    ) -> None:
        super().__init__(
            message = f"{resource} with id '{identifier}' not found",
            status_code = 404,
            extra = extra,
        )
        self.resource = resource
        self.identifier = identifier


class ConflictError(BaseAppException):
    """
    Raised when an operation conflicts with existing state
    """
    def __init__(
        self,
        message: str,
        extra: dict[str,
                    Any] | None = None,
    ) -> None:
        super().__init__(
            message = message,
            status_code = 409,
            extra = extra
        )


class AuthenticationError(BaseAppException):
    """
    Raised when authentication fails
    """
    def __init__(
        self,
        message: str = "Authentication failed",
        extra: dict[str,
                    Any] | None = None,
    ) -> None:
        super().__init__(
            message = message,
            status_code = 401,
            extra = extra
        )


class TokenError(AuthenticationError):
    """
    Raised for JWT token specific errors
    """
    reason = "invalid"

    def __init__(
        self,
        message: str = "Invalid or expired token",
        extra: dict[str,
                    Any] | None = None,
    ) -> None:
        super().__init__(message = message, extra = extra)


class InvalidTokenError(TokenError):
    """
    Raised when a token signature or shape does not verify
    """
    reason = "invalid"

    def __init__(self, extra: dict[str, Any] | None = None) -> None:
        super().__init__(
            message = "Invalid token. Please log in again!",
            extra = extra
        )


class ExpiredTokenError(TokenError):
    """
    Raised when a correctly signed token is past its expiry
    """
    reason = "expired"

    def __init__(self, extra: dict[str, Any] | None = None) -> None:
        super().__init__(
            message = "Your token has expired! Please log in again.",
            extra = extra
        )


class ForbiddenError(BaseAppException):
    """
    Raised when the acting user lacks the role or ownership required
    """
    def __init__(
        self,
        message: str = "You do not have permission to perform this action",
        extra: dict[str,
                    Any] | None = None,
    ) -> None:
        super().__init__(
            message = message,
            status_code = 403,
            extra = extra
        )


class MailDeliveryError(BaseAppException):
    """
    Raised when an outgoing email could not be delivered
    """
    def __init__(
        self,
        message: str = "There was an error sending the email. Try again later!",
        extra: dict[str,
                    Any] | None = None,
    ) -> None:
        super().__init__(
            message = message,
            status_code = 500,
            extra = extra
        )


class ServiceUnavailable(BaseAppException):
    """
    Raised when a lookup or hash computation misses its deadline
    """
    def __init__(
        self,
        message: str = "Service temporarily unavailable, please retry",
        extra: dict[str,
                    Any] | None = None,
    ) -> None:
        super().__init__(
            message = message,
            status_code = 503,
            extra = extra
        )


class UserNotFound(ResourceNotFound):
    """
    Raised when a user is not found
    """
    def __init__(
        self,
        identifier: str | int,
        extra: dict[str,
                    Any] | None = None,
    ) -> None:
        super().__init__(
            resource = "User",
            identifier = identifier,
            extra = extra
        )


class PostNotFound(ResourceNotFound):
    """
    Raised when a post is not found
    """
    def __init__(
        self,
        identifier: str | int,
        extra: dict[str,
                    Any] | None = None,
    ) -> None:
        super().__init__(
            resource = "Post",
            identifier = identifier,
            extra = extra
        )


class CommentNotFound(ResourceNotFound):
    """
    Raised when a comment is not found
    """
    def __init__(
        self,
        identifier: str | int,
        extra: dict[str,
                    Any] | None = None,
    ) -> None:
        super().__init__(
            resource = "Comment",
            identifier = identifier,
            extra = extra
        )


class EmailNotFound(BaseAppException):
    """
    Raised when no active user has the given email address
    """
    def __init__(self, extra: dict[str, Any] | None = None) -> None:
        super().__init__(
            message = "There is no user with that email address.",
            status_code = 404,
            extra = extra,
        )


class EmailAlreadyExists(ConflictError):
    """
    Raised when attempting to register with an existing email
    """
    def __init__(
        self,
        email: str,
        extra: dict[str,
                    Any] | None = None
    ) -> None:
        super().__init__(
            message = f"Email '{email}' is already registered",
            extra = extra,
        )
        self.email = email


class UsernameAlreadyExists(ConflictError):
    """
    Raised when attempting to register with a taken username
    """
    def __init__(
        self,
        username: str,
        extra: dict[str,
                    Any] | None = None
    ) -> None:
        super().__init__(
            message = f"Username '{username}' is already taken",
            extra = extra,
        )
        self.username = username


class InvalidCredentials(AuthenticationError):
    """
    Raised when login credentials are invalid
    """
    def __init__(self, extra: dict[str, Any] | None = None) -> None:
        super().__init__(
            message = "Incorrect email or password",
            extra = extra
        )


def _duplicate_value() -> ConflictError:
    return ConflictError("Duplicate field value. Please use another value!")


LOWER_LEVEL_ERRORS: dict[type[Exception],
                         Callable[[],
                                  BaseAppException]] = {
                                      jwt.ExpiredSignatureError:
                                      ExpiredTokenError,
                                      jwt.InvalidTokenError:
                                      InvalidTokenError,
                                      IntegrityError: _duplicate_value,
                                      TimeoutError: ServiceUnavailable,
                                  }


def translate_exception(exc: Exception) -> BaseAppException | None:
    """
    Build a typed application error from a library failure

    The most specific registered base class of the failure wins
    """
    if isinstance(exc, BaseAppException):
        return exc

    for exc_type in type(exc).__mro__:
        target = LOWER_LEVEL_ERRORS.get(exc_type)
        if target is not None:
            return target()
    return None
