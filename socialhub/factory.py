"""
ⒸAngelaMos | 2025
factory.py
"""

from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from socialhub.config import settings, Environment, API_PREFIX
from socialhub.core.database import sessionmanager
from socialhub.core.exceptions import (
    LOWER_LEVEL_ERRORS,
    BaseAppException,
    ValidationError,
    translate_exception,
)
from socialhub.core.logging import configure_logging, get_logger
from socialhub.routes import (
    admin_router,
    auth_router,
    comment_router,
    health_router,
    post_router,
    user_router,
)
from socialhub.schemas.common import AppInfoResponse


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler for startup and shutdown
    """
    sessionmanager.init(str(settings.DATABASE_URL))
    logger.info("startup", environment = settings.ENVIRONMENT.value)
    yield
    await sessionmanager.close()
    logger.info("shutdown")


OPENAPI_TAGS = [
    {
        "name": "root",
        "description": "API information"
    },
    {
        "name": "health",
        "description": "Health check endpoints"
    },
    {
        "name": "auth",
        "description": "Signup, login and password management"
    },
    {
        "name": "users",
        "description": "Profiles and the follower graph"
    },
    {
        "name": "admin",
        "description": "User administration"
    },
    {
        "name": "posts",
        "description": "Posts and likes"
    },
    {
        "name": "comments",
        "description": "Comments on posts"
    },
]


def error_response(exc: BaseAppException) -> JSONResponse:
    return JSONResponse(
        status_code = exc.status_code,
        content = {
            "detail": exc.message,
            "type": exc.__class__.__name__,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map every failure to the {detail, type} error body
    """
    @app.exception_handler(BaseAppException)
    async def app_exception_handler(
        request: Request,
        exc: BaseAppException,
    ) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "request_failed",
                error_type = exc.__class__.__name__,
                detail = exc.message,
            )
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        messages = [
            str(error.get("msg", "")).removeprefix("Value error, ")
            for error in exc.errors()
        ]
        return error_response(
            ValidationError(f"Invalid input data. {'. '.join(messages)}")
        )

    async def lower_level_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        translated = translate_exception(exc)
        if translated is None:
            return await unexpected_error_handler(request, exc)
        logger.warning(
            "lower_level_error",
            error_type = type(exc).__name__,
            translated = translated.__class__.__name__,
        )
        return error_response(translated)

    for exc_type in LOWER_LEVEL_ERRORS:
        app.add_exception_handler(exc_type, lower_level_handler)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception("unhandled_error", error_type = type(exc).__name__)
        content = {
            "detail": "Something went wrong",
            "type": "InternalServerError",
        }
        if settings.DEBUG:
            content["error"] = type(exc).__name__
        return JSONResponse(status_code = 500, content = content)


def create_app() -> FastAPI:
    """
    Application factory
    """
    configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)
    is_production = settings.ENVIRONMENT == Environment.PRODUCTION

    app = FastAPI(
        title = settings.APP_NAME,
        summary = settings.APP_SUMMARY,
        description = settings.APP_DESCRIPTION,
        version = settings.APP_VERSION,
        openapi_tags = OPENAPI_TAGS,
        lifespan = lifespan,
        openapi_url = None if is_production else "/openapi.json",
        docs_url = None if is_production else "/docs",
        redoc_url = None if is_production else "/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins = settings.CORS_ORIGINS,
        allow_credentials = settings.CORS_ALLOW_CREDENTIALS,
        allow_methods = settings.CORS_ALLOW_METHODS,
        allow_headers = settings.CORS_ALLOW_HEADERS,
    )

    @app.middleware("http")
    async def bind_request_context(
        request: Request,
        call_next: Callable[[Request],
                            Awaitable[Response]],
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id = request_id,
            method = request.method,
            path = request.url.path,
        )
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    register_exception_handlers(app)

    @app.get("/", response_model = AppInfoResponse, tags = ["root"])
    async def root() -> AppInfoResponse:
        return AppInfoResponse(
            name = settings.APP_NAME,
            version = settings.APP_VERSION,
            environment = settings.ENVIRONMENT.value,
            docs_url = None if is_production else "/docs",
        )

    app.include_router(health_router)
    app.include_router(auth_router, prefix = API_PREFIX)
    app.include_router(user_router, prefix = API_PREFIX)
    app.include_router(admin_router, prefix = API_PREFIX)
    app.include_router(post_router, prefix = API_PREFIX)
    app.include_router(comment_router, prefix = API_PREFIX)

    return app
