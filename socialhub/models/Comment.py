"""
ⒸAngelaMos | 2025
Comment.py
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

from socialhub.core.constants import COMMENT_MAX_LENGTH
from socialhub.models.Base import (
    Base,
    TimestampMixin,
    UUIDMixin,
)
from socialhub.models.User import User


class Comment(Base, UUIDMixin, TimestampMixin):
    """
    Comment on a post, loaded together with its author
    """
    __tablename__ = "comments"

    FILTERABLE_FIELDS = ("user_id", "created_at")

    content: Mapped[str] = mapped_column(String(COMMENT_MAX_LENGTH))
    post_id: Mapped[UUID] = mapped_column(
        ForeignKey("posts.id",
                   ondelete = "CASCADE"),
        index = True,
    )
    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id",
                   ondelete = "CASCADE"),
        index = True,
    )

    author: Mapped[User] = relationship(lazy = "selectin")
