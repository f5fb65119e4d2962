"""ItemType ORM model (catalog category, e.g. Books, Magazines, Products)."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from bookhaven.infrastructure.persistence.database import Base
from bookhaven.infrastructure.persistence.models.mixins import IntIdMixin


class ItemType(IntIdMixin, Base):
    """Catalog category. Table: item_type."""

    __tablename__ = "item_type"

    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
