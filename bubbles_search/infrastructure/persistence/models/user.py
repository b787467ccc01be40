"""User ORM model. Table: users. Credentials are deliberately not mapped."""

from sqlalchemy import Boolean, Text
from sqlalchemy.orm import Mapped, mapped_column

from bubbles_search.infrastructure.persistence.database import Base
from bubbles_search.infrastructure.persistence.models.mixins import ContentModel


class User(ContentModel, Base):
    """Account row (username, email, admin flag)."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
