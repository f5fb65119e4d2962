"""SQLAlchemy mixins for common model patterns (DRY).

Provides: IntIdMixin (auto-increment integer primary key) and
ActiveFlagMixin (is_active soft-delete flag).
"""

from sqlalchemy import Boolean, Integer
from sqlalchemy.orm import Mapped, declared_attr, mapped_column


class IntIdMixin:
    """Mixin for models keyed by an auto-incrementing integer id."""

    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(Integer, primary_key=True, autoincrement=True)


class ActiveFlagMixin:
    """Mixin for soft deactivation. False means cancelled/unsubscribed."""

    @declared_attr
    def is_active(cls) -> Mapped[bool]:
        return mapped_column(Boolean, nullable=False, default=True, index=True)
