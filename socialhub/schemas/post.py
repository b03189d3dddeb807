"""
ⒸAngelaMos | 2025
post.py
"""

from uuid import UUID

from pydantic import Field

from socialhub.core.constants import (
    CAPTION_MAX_LENGTH,
    IMAGE_MAX_LENGTH,
)
from socialhub.schemas.base import (
    BaseSchema,
    BaseResponseSchema,
)


class PostCreate(BaseSchema):
    """
    Schema for a new post
    """
    caption: str = Field(min_length = 1, max_length = CAPTION_MAX_LENGTH)
    image: str = Field(min_length = 1, max_length = IMAGE_MAX_LENGTH)


class PostUpdate(BaseSchema):
    caption: str | None = Field(
        default = None,
        min_length = 1,
        max_length = CAPTION_MAX_LENGTH
    )
    image: str | None = Field(
        default = None,
        min_length = 1,
        max_length = IMAGE_MAX_LENGTH
    )


class PostResponse(BaseResponseSchema):
    """
    Schema for post API responses
    """
    caption: str
    image: str
    user_id: UUID
    likes_count: int


class PostListResponse(BaseSchema):
    items: list[PostResponse]
    total: int
    page: int
    size: int


class LikeResponse(BaseSchema):
    """
    Like state after a toggle
    """
    liked: bool
    post: PostResponse
