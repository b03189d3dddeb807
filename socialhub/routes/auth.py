"""
ⒸAngelaMos | 2025
auth.py
"""

from fastapi import (
    APIRouter,
    Response,
    status,
)

from socialhub.core.dependencies import (
    CurrentUser,
    DBSession,
    MailServiceDep,
)
from socialhub.core.responses import (
    AUTH_401,
    BAD_REQUEST_400,
    CONFLICT_409,
    MAIL_500,
    NOT_FOUND_404,
)
from socialhub.core.security import (
    clear_access_cookie,
    set_access_cookie,
)
from socialhub.schemas.auth import (
    LoginRequest,
    PasswordChange,
    PasswordResetConfirm,
    PasswordResetRequest,
    TokenWithUserResponse,
)
from socialhub.schemas.common import MessageResponse
from socialhub.schemas.user import (
    UserCreate,
    UserResponse,
)
from socialhub.services.auth import AuthService


router = APIRouter(prefix = "/auth", tags = ["auth"])


@router.post(
    "/signup",
    response_model = TokenWithUserResponse,
    status_code = status.HTTP_201_CREATED,
    responses = {
        **BAD_REQUEST_400,
        **CONFLICT_409
    },
)
async def signup(
    response: Response,
    db: DBSession,
    user_data: UserCreate,
) -> TokenWithUserResponse:
    """
    Register a new user and log them in
    """
    result = await AuthService.signup(db, user_data)
    set_access_cookie(response, result.token)
    return result


@router.post(
    "/login",
    response_model = TokenWithUserResponse,
    responses = {
        **BAD_REQUEST_400,
        **AUTH_401
    },
)
async def login(
    response: Response,
    db: DBSession,
    credentials: LoginRequest,
) -> TokenWithUserResponse:
    """
    Login with email and password
    """
    result = await AuthService.login(
        db,
        email = credentials.email,
        password = credentials.password,
    )
    set_access_cookie(response, result.token)
    return result


@router.post("/logout", status_code = status.HTTP_204_NO_CONTENT)
async def logout(response: Response) -> None:
    """
    Drop the access cookie, the token itself stays valid until it expires
    """
    clear_access_cookie(response)


@router.post(
    "/forgot-password",
    response_model = MessageResponse,
    responses = {
        **NOT_FOUND_404,
        **MAIL_500
    },
)
async def forgot_password(
    db: DBSession,
    mail: MailServiceDep,
    data: PasswordResetRequest,
) -> MessageResponse:
    """
    Email a password reset link
    """
    await AuthService.forgot_password(
        db,
        mail,
        email = data.email,
    )
    return MessageResponse(message = "Token sent to email!")


@router.patch(
    "/reset-password/{token}",
    response_model = TokenWithUserResponse,
    responses = {**BAD_REQUEST_400},
)
async def reset_password(
    response: Response,
    db: DBSession,
    token: str,
    data: PasswordResetConfirm,
) -> TokenWithUserResponse:
    """
    Set a new password using an emailed reset token
    """
    result = await AuthService.reset_password(db, token, data.password)
    set_access_cookie(response, result.token)
    return result


@router.patch(
    "/update-password",
    response_model = TokenWithUserResponse,
    responses = {
        **BAD_REQUEST_400,
        **AUTH_401
    },
)
async def update_password(
    response: Response,
    db: DBSession,
    current_user: CurrentUser,
    data: PasswordChange,
) -> TokenWithUserResponse:
    """
    Change current user password
    """
    result = await AuthService.update_password(
        db,
        current_user,
        data.current_password,
        data.password,
    )
    set_access_cookie(response, result.token)
    return result


@router.get("/me", response_model = UserResponse, responses = {**AUTH_401})
async def get_current_user(current_user: CurrentUser) -> UserResponse:
    """
    Get current authenticated user
    """
    return UserResponse.model_validate(current_user)
