"""
ⒸAngelaMos | 2025
Post.py
"""

from uuid import UUID

from sqlalchemy import (
    ForeignKey,
    String,
)
from sqlalchemy.orm import (
    Mapped,
    mapped_column,
    relationship,
)

from socialhub.core.constants import (
    CAPTION_MAX_LENGTH,
    IMAGE_MAX_LENGTH,
)
from socialhub.models.Base import (
    Base,
    TimestampMixin,
    UUIDMixin,
)
from socialhub.models.PostLike import PostLike


class Post(Base, UUIDMixin, TimestampMixin):
    """
    A user's post with its likes eagerly loaded
    """
    __tablename__ = "posts"

    FILTERABLE_FIELDS = ("caption", "user_id", "created_at")

    caption: Mapped[str] = mapped_column(String(CAPTION_MAX_LENGTH))
    image: Mapped[str] = mapped_column(String(IMAGE_MAX_LENGTH))
    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id",
                   ondelete = "CASCADE"),
        index = True,
    )

    likes: Mapped[list[PostLike]] = relationship(
        lazy = "selectin",
        cascade = "all, delete-orphan",
    )

    @property
    def likes_count(self) -> int:
        return len(self.likes)

    def is_liked_by(self, user_id: UUID) -> bool:
        return any(like.user_id == user_id for like in self.likes)
