"""SQLAlchemy Declarative Base — shared base class and timestamp columns for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - created_at / updated_at are timezone-aware and set by the application clock
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all tiffin ORM models."""
    pass


class TimestampMixin:
    """createdAt / updatedAt columns shared by every entity."""
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
        onupdate=utc_now, index=True,
    )
