"""SellItem ORM model: a sellable catalog entry (book, magazine, product).

author_id and item_type_id are plain integer columns, not foreign keys:
authors and item types may be deleted while items still reference them.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, DateTime, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from bookhaven.infrastructure.persistence.database import Base
from bookhaven.infrastructure.persistence.models.mixins import IntIdMixin


class SellItem(IntIdMixin, Base):
    """Catalog item. Table: sell_item."""

    __tablename__ = "sell_item"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    item_type_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    published_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2, asdecimal=True), nullable=False, default=Decimal("0")
    )
    isbn: Mapped[str | None] = mapped_column(String(13), nullable=True)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    cover_image: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_sell_item_price_non_negative"),
        CheckConstraint("stock_quantity >= 0", name="ck_sell_item_stock_non_negative"),
    )
