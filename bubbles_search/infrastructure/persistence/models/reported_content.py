"""Moderation report ORM model. Table: reported_content."""

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from bubbles_search.infrastructure.persistence.database import Base
from bubbles_search.infrastructure.persistence.models.mixins import ContentModel


class ReportedContent(ContentModel, Base):
    """Report filed against a post or comment."""

    __tablename__ = "reported_content"

    content_type: Mapped[str] = mapped_column(Text, nullable=False)
    content_id: Mapped[int] = mapped_column(Integer, nullable=False)
    reporter_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False
    )
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False, default="pending")
