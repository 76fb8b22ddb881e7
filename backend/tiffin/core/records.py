"""Record Snapshots — immutable values for customers, orders and payments.

Invariants:
    - Records are frozen; an update produces a new record via merge_changes()
    - merge_changes() only touches keys that exist on the record and are not
      in its protected set (identity, ownership, timestamps, access key)
    - Sequence-valued fields are stored as tuples so a snapshot never aliases
      a caller's list
    - Timestamps are timezone-aware (UTC)
"""

from dataclasses import dataclass, fields, replace
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, TypeVar

from tiffin.core.domain_types import CustomerId, OrderId, PaymentId


@dataclass(frozen=True)
class CustomerRecord:
    id: CustomerId
    name: str
    phone: str
    address: str
    default_item: str
    default_price: float
    default_quantity: int
    payment_system: str
    default_off_days: tuple[str, ...]
    active: bool = True
    access_key_hash: str | None = None
    access_key_expires_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class OrderRecord:
    id: OrderId
    customer_id: CustomerId
    date: date
    item: str
    price: float
    quantity: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class PaymentRecord:
    id: PaymentId
    customer_id: CustomerId
    amount: float
    note: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


_PROTECTED_FIELDS = frozenset({
    "id", "customer_id", "created_at", "updated_at",
    "access_key_hash", "access_key_expires_at",
})

R = TypeVar("R", CustomerRecord, OrderRecord, PaymentRecord)


def merge_changes(record: R, changes: Mapping[str, Any]) -> R:
    """Return a new record with the provided fields applied. Pure, no IO."""
    names = {f.name for f in fields(record)} - _PROTECTED_FIELDS
    applied = {
        key: tuple(value) if isinstance(value, list) else value
        for key, value in changes.items()
        if key in names
    }
    if not applied:
        return record
    return replace(record, **applied)


def with_access_key(
    record: CustomerRecord, key_hash: str, expires_at: datetime,
) -> CustomerRecord:
    """Return a new customer record holding a fresh access key digest."""
    return replace(record, access_key_hash=key_hash, access_key_expires_at=expires_at)
