"""Order ORM — one delivery for one customer on one calendar day.

Invariants:
    - Always belongs to a Customer (customer_id FK, ON DELETE CASCADE)
    - item/price/quantity are a snapshot taken when the order was placed
"""

import datetime as dt
import uuid

from sqlalchemy import Date, Float, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tiffin.db.base import Base, TimestampMixin


class Order(TimestampMixin, Base):
    """Order entity — a dated meal delivery."""
    __tablename__ = "orders"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    customer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    item: Mapped[str] = mapped_column(String(20), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
