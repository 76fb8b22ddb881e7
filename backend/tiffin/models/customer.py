"""Customer ORM — the subscriber who receives deliveries.

Invariants:
    - id is UUID primary key (application-generated)
    - phone is unique (uq_customers_phone); the index is the real uniqueness guarantee
    - access_key_hash holds a SHA-256 hex digest, never the plaintext key
    - default_off_days is a JSON array of off-day codes

Design Decisions:
    - No ORM relationship to orders/payments: deletes cascade at the FK level,
      the service layer never walks children
"""

import uuid
from datetime import datetime

from sqlalchemy import (
    Boolean, DateTime, Float, Integer, JSON, String, UniqueConstraint, Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from tiffin.db.base import Base, TimestampMixin


class Customer(TimestampMixin, Base):
    """Customer entity — subscription defaults plus a self-service access key."""
    __tablename__ = "customers"
    __table_args__ = (UniqueConstraint("phone", name="uq_customers_phone"),)

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String(11), nullable=False)
    address: Mapped[str] = mapped_column(String(100), nullable=False)
    default_item: Mapped[str] = mapped_column(String(20), nullable=False)
    default_price: Mapped[float] = mapped_column(Float, nullable=False)
    default_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    payment_system: Mapped[str] = mapped_column(String(10), nullable=False)
    default_off_days: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, index=True,
    )
    access_key_hash: Mapped[str | None] = mapped_column(
        String(64), nullable=True, index=True,
    )
    access_key_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
