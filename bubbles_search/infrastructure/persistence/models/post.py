"""Post ORM model (stories and pages). Table: posts."""

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from bubbles_search.infrastructure.persistence.database import Base
from bubbles_search.infrastructure.persistence.models.mixins import ContentModel


class Post(ContentModel, Base):
    """Story row. ``is_secret`` posts are also served as standalone pages."""

    __tablename__ = "posts"

    title: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    excerpt: Mapped[str | None] = mapped_column(Text, nullable=True)
    slug: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    author_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True
    )
    is_secret: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    theme_category: Mapped[str | None] = mapped_column(Text, nullable=True, index=True)
