"""SQLAlchemy mixins for common model patterns (DRY).

The platform's tables use serial integer keys and a naive ``created_at``.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func


class SerialIdMixin:
    """Mixin for tables keyed by a serial integer ``id``."""

    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(Integer, primary_key=True, autoincrement=True)


class CreatedAtMixin:
    """Mixin for ``created_at`` (server default now, indexed for date filters)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=False),
            server_default=func.now(),
            nullable=False,
            index=True,
        )


class ContentModel(SerialIdMixin, CreatedAtMixin):
    """Serial id + created_at; base for every searchable table."""
