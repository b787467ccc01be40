"""Comment ORM model. Table: comments."""

from sqlalchemy import Boolean, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from bubbles_search.infrastructure.persistence.database import Base
from bubbles_search.infrastructure.persistence.models.mixins import ContentModel


class Comment(ContentModel, Base):
    """Reader comment on a post; user_id is null for anonymous comments."""

    __tablename__ = "comments"

    content: Mapped[str] = mapped_column(Text, nullable=False)
    post_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("posts.id"), nullable=True, index=True
    )
    parent_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=True, index=True
    )
    is_approved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
