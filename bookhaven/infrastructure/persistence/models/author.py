"""Author ORM model. Referenced by sell_item.author_id without a FK constraint."""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from bookhaven.infrastructure.persistence.database import Base
from bookhaven.infrastructure.persistence.models.mixins import IntIdMixin


class Author(IntIdMixin, Base):
    """Book author. Table: author."""

    __tablename__ = "author"

    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    birth_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    biography: Mapped[str | None] = mapped_column(Text, nullable=True)
    cover_image: Mapped[str | None] = mapped_column(Text, nullable=True)
