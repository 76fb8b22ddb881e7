"""Payment ORM — money received from a customer.

Invariants:
    - Always belongs to a Customer (customer_id FK, ON DELETE CASCADE)
    - amount is positive (validated before it reaches the store)
    - updated_at is the field date-range filters apply to
"""

import uuid

from sqlalchemy import Float, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tiffin.db.base import Base, TimestampMixin


class Payment(TimestampMixin, Base):
    """Payment entity."""
    __tablename__ = "payments"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    customer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    note: Mapped[str | None] = mapped_column(String(200), nullable=True)
