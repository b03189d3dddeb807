"""
ⒸAngelaMos | 2025
PostLike.py
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import (
    DateTime,
    ForeignKey,
)
from sqlalchemy.orm import (
    Mapped,
    mapped_column,
)

from socialhub.models.Base import Base


class PostLike(Base):
    """
    One user's like on one post
    """
    __tablename__ = "post_likes"

    post_id: Mapped[UUID] = mapped_column(
        ForeignKey("posts.id",
                   ondelete = "CASCADE"),
        primary_key = True,
    )
    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id",
                   ondelete = "CASCADE"),
        primary_key = True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone = True),
        default = lambda: datetime.now(UTC),
    )
