"""
ⒸAngelaMos | 2025
dependencies.py
"""

from __future__ import annotations

import asyncio
from typing import Annotated

import structlog
from fastapi import (
    Depends,
    Request,
)
from fastapi.security import (
    HTTPAuthorizationCredentials,
    HTTPBearer,
)
from sqlalchemy.ext.asyncio import AsyncSession

from socialhub.config import (
    settings,
    UserRole,
)
from socialhub.core.database import get_db_session
from socialhub.core.exceptions import (
    AuthenticationError,
    ForbiddenError,
    ServiceUnavailable,
    TokenError,
)
from socialhub.core.logging import get_logger
from socialhub.core.query import ListQuery
from socialhub.core.security import decode_access_token
from socialhub.models.User import User
from socialhub.repositories.user import UserRepository
from socialhub.services.mail import (
    MailService,
    get_mail_service,
)


logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error = False)

DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None,
                           Depends(bearer_scheme)],
    db: DBSession,
) -> User:
    """
    Resolve the bearer token to an active user, failing closed
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError(
            "You are not logged in! Please log in to get access."
        )

    try:
        claims = decode_access_token(credentials.credentials)
    except TokenError as e:
        logger.info("token_rejected", reason = e.reason)
        raise AuthenticationError(e.message) from e

    try:
        user = await asyncio.wait_for(
            UserRepository.get_by_id(db, claims.subject_id),
            timeout = settings.AUTH_OPERATION_TIMEOUT_SECONDS,
        )
    except TimeoutError as e:
        logger.warning("user_lookup_timeout", user_id = str(claims.subject_id))
        raise ServiceUnavailable() from e

    if user is None:
        raise AuthenticationError(
            "The user belonging to this token does no longer exist."
        )

    if user.changed_password_after(claims.issued_at):
        raise AuthenticationError(
            "User recently changed password! Please log in again."
        )

    structlog.contextvars.bind_contextvars(user_id = str(user.id))
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


class RequireRole:
    """
    Dependency that allows only the listed roles through
    """
    def __init__(self, *roles: UserRole) -> None:
        self.roles = roles

    async def __call__(
        self,
        user: Annotated[User,
                        Depends(get_current_user)],
    ) -> User:
        if user.role not in self.roles:
            raise ForbiddenError()
        return user


AdminOnly = Annotated[User, Depends(RequireRole(UserRole.ADMIN))]


def get_list_query(request: Request) -> ListQuery:
    """
    Parse pagination, sorting and filters from the query string
    """
    return ListQuery.from_params(request.query_params)


ListQueryDep = Annotated[ListQuery, Depends(get_list_query)]

MailServiceDep = Annotated[MailService, Depends(get_mail_service)]
