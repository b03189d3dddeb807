"""
ⒸAngelaMos | 2025
auth.py
"""

from datetime import (
    UTC,
    datetime,
)

from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.config import (
    settings,
    API_PREFIX,
)
from socialhub.core.exceptions import (
    AuthenticationError,
    EmailAlreadyExists,
    EmailNotFound,
    InvalidCredentials,
    InvalidOrExpiredResetToken,
    MailDeliveryError,
    UsernameAlreadyExists,
)
from socialhub.core.logging import get_logger
from socialhub.core.security import (
    create_access_token,
    create_password_reset_token,
    hash_password,
    hash_token,
    verify_password,
    verify_password_with_timing_safety,
)
from socialhub.models.User import User
from socialhub.repositories.user import UserRepository
from socialhub.schemas.auth import TokenWithUserResponse
from socialhub.schemas.user import (
    UserCreate,
    UserResponse,
)
from socialhub.services.mail import (
    MailService,
    redact_email,
)


logger = get_logger(__name__)


def token_response(user: User) -> TokenWithUserResponse:
    """
    Fresh access token for user plus their profile
    """
    return TokenWithUserResponse(
        token = create_access_token(user.id),
        user = UserResponse.model_validate(user),
    )


class AuthService:
    """
    Business logic for authentication operations
    """
    @staticmethod
    async def signup(
        session: AsyncSession,
        user_data: UserCreate,
    ) -> TokenWithUserResponse:
        """
        Register a new user and log them in
        """
        if await UserRepository.email_exists(session, user_data.email):
            raise EmailAlreadyExists(user_data.email)
        if await UserRepository.username_exists(session, user_data.username):
            raise UsernameAlreadyExists(user_data.username)

        hashed = await hash_password(user_data.password)
        user = await UserRepository.create_user(
            session,
            username = user_data.username,
            name = user_data.name,
            surname = user_data.surname,
            email = user_data.email,
            hashed_password = hashed,
        )
        logger.info("user_signed_up", user_id = str(user.id))
        return token_response(user)

    @staticmethod
    async def authenticate(
        session: AsyncSession,
        email: str,
        password: str,
    ) -> User:
        """
        Check credentials of an active user
        """
        user = await UserRepository.get_by_email(
            session,
            email,
            with_password = True,
        )
        hashed_password = user.hashed_password if user else None

        is_valid, new_hash = await verify_password_with_timing_safety(
            password, hashed_password
        )

        if not is_valid or user is None:
            logger.info("login_failed", email = redact_email(email))
            raise InvalidCredentials()

        if new_hash:
            await UserRepository.update_password(session, user, new_hash)
            logger.info("password_rehashed", user_id = str(user.id))

        return user

    @staticmethod
    async def login(
        session: AsyncSession,
        email: str,
        password: str,
    ) -> TokenWithUserResponse:
        """
        Login and return token with user data
        """
        user = await AuthService.authenticate(session, email, password)
        logger.info("login_succeeded", user_id = str(user.id))
        return token_response(user)

    @staticmethod
    async def forgot_password(
        session: AsyncSession,
        mail: MailService,
        email: str,
    ) -> None:
        """
        Issue a single use reset token and email it

        The token is committed before sending and withdrawn again if the
        mail cannot be delivered
        """
        user = await UserRepository.get_by_email(session, email)
        if user is None:
            raise EmailNotFound()

        raw_token, token_hash, expires_at = create_password_reset_token()
        await UserRepository.set_password_reset_token(
            session,
            user,
            token_hash,
            expires_at,
        )
        await session.commit()

        base_url = settings.PUBLIC_BASE_URL.rstrip("/")
        reset_url = f"{base_url}{API_PREFIX}/auth/reset-password/{raw_token}"
        body = (
            "Forgot your password? Submit a PATCH request with your new "
            "password and password_confirm to:\n"
            f"{reset_url}\n"
            "If you didn't forget your password, please ignore this email."
        )
        subject = (
            "Your password reset token (valid for "
            f"{settings.PASSWORD_RESET_TOKEN_EXPIRE_MINUTES} min)"
        )

        try:
            await mail.send(user.email, subject, body)
        except MailDeliveryError:
            await UserRepository.clear_password_reset_token(session, user)
            await session.commit()
            logger.error("password_reset_mail_failed", user_id = str(user.id))
            raise

        logger.info("password_reset_issued", user_id = str(user.id))

    @staticmethod
    async def reset_password(
        session: AsyncSession,
        token: str,
        password: str,
    ) -> TokenWithUserResponse:
        """
        Consume a reset token and set the new password
        """
        token_hash = hash_token(token)
        user = await UserRepository.get_by_reset_token(
            session,
            token_hash,
            datetime.now(UTC),
        )
        if user is None:
            raise InvalidOrExpiredResetToken()

        consumed = await UserRepository.consume_password_reset_token(
            session,
            user.id,
            token_hash,
        )
        if not consumed:
            raise InvalidOrExpiredResetToken()
        # the token stays spent even if the password update below fails
        await session.commit()

        hashed = await hash_password(password)
        user = await UserRepository.update_password(session, user, hashed)
        logger.info("password_reset_completed", user_id = str(user.id))
        return token_response(user)

    @staticmethod
    async def update_password(
        session: AsyncSession,
        current_user: User,
        current_password: str,
        new_password: str,
    ) -> TokenWithUserResponse:
        """
        Change password of a logged in user and issue a new token
        """
        user = await UserRepository.get_by_id(
            session,
            current_user.id,
            with_password = True,
        )
        if user is None:
            raise AuthenticationError(
                "The user belonging to this token does no longer exist."
            )

        is_valid, _ = await verify_password(
            current_password,
            user.hashed_password
        )
        if not is_valid:
            raise AuthenticationError("Your current password is wrong.")

        hashed = await hash_password(new_password)
        user = await UserRepository.update_password(session, user, hashed)
        logger.info("password_changed", user_id = str(user.id))
        return token_response(user)
