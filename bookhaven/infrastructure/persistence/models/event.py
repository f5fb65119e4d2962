"""Event and EventRegistration ORM models.

Invariant 0 <= current_registrations <= capacity is a CHECK constraint;
seat changes go through conditional UPDATEs in EventRepository.
"""

from datetime import datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from bookhaven.infrastructure.persistence.database import Base
from bookhaven.infrastructure.persistence.models.mixins import ActiveFlagMixin, IntIdMixin


class Event(IntIdMixin, ActiveFlagMixin, Base):
    """Store event (signing, reading, workshop). Table: event. Cancel = is_active False."""

    __tablename__ = "event"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    event_type: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    event_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    location: Mapped[str] = mapped_column(String(100), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    current_registrations: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    card_image: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    registrations: Mapped[list["EventRegistration"]] = relationship(
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint(
            "current_registrations >= 0 AND current_registrations <= capacity",
            name="ck_event_registrations_within_capacity",
        ),
    )


class EventRegistration(IntIdMixin, Base):
    """One email signed up for one event. Table: event_registration. Unique (event_id, email)."""

    __tablename__ = "event_registration"

    event_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("event.id", ondelete="CASCADE"), nullable=False, index=True
    )
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    registered_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    is_attended: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    event: Mapped[Event] = relationship(back_populates="registrations")

    __table_args__ = (
        UniqueConstraint("event_id", "email", name="uq_event_registration_event_email"),
    )
