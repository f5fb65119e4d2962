"""Subscriber ORM model (newsletter). One row per email, active or not."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from bookhaven.infrastructure.persistence.database import Base
from bookhaven.infrastructure.persistence.models.mixins import ActiveFlagMixin, IntIdMixin


class Subscriber(IntIdMixin, ActiveFlagMixin, Base):
    """Newsletter subscriber. Table: subscriber. Unique email; reactivated, never duplicated."""

    __tablename__ = "subscriber"

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    subscribed_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
