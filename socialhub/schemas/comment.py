"""
ⒸAngelaMos | 2025
comment.py
"""

from uuid import UUID

from pydantic import Field

from socialhub.core.constants import COMMENT_MAX_LENGTH
from socialhub.schemas.base import (
    BaseSchema,
    BaseResponseSchema,
)


class CommentCreate(BaseSchema):
    content: str = Field(min_length = 1, max_length = COMMENT_MAX_LENGTH)


class CommentUpdate(BaseSchema):
    content: str = Field(min_length = 1, max_length = COMMENT_MAX_LENGTH)


class CommentAuthor(BaseSchema):
    """
    Author fields embedded in every comment
    """
    id: UUID
    username: str
    photo: str | None = None


class CommentResponse(BaseResponseSchema):
    """
    Schema for comment API responses
    """
    content: str
    post_id: UUID
    user_id: UUID
    author: CommentAuthor


class CommentListResponse(BaseSchema):
    items: list[CommentResponse]
    total: int
    page: int
    size: int
