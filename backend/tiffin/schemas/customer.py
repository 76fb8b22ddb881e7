"""Customer Schemas — create, update, list query and read models.

Invariants:
    - phone matches ^01[0-9]{9}$ (01 + nine ASCII digits; other scripts rejected)
    - defaultOffDays is a non-empty set drawn from sa su mo tu we th fr,
      returned in week order with no repeats
    - CustomerUpdate keeps every per-field constraint of CustomerCreate, all optional
    - Read models never expose the access key digest; list items also omit its expiry
"""

import re
from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, Field, StringConstraints

from tiffin.core.domain_types import MealItem, OffDay, PaymentSystem
from tiffin.schemas.common import (
    PageNumber, PageSize, PartialUpdateSchema, ReadSchema, RequestSchema,
)

PHONE_PATTERN = re.compile(r"^01[0-9]{9}$")
PHONE_MESSAGE = "Phone number must start with 01 and be exactly 11 digits"

_WEEK_ORDER = [day.value for day in OffDay]


def _check_phone(v: str) -> str:
    if not PHONE_PATTERN.fullmatch(v):
        raise ValueError(PHONE_MESSAGE)
    return v


def _check_off_days(days: list) -> list[str]:
    values = [OffDay(day).value for day in days]
    if len(set(values)) != len(values):
        raise ValueError("Default off days must not repeat")
    return sorted(values, key=_WEEK_ORDER.index)


CustomerName = Annotated[str, StringConstraints(min_length=3, max_length=50)]
Phone = Annotated[str, AfterValidator(_check_phone)]
Address = Annotated[str, StringConstraints(max_length=100)]
Price = Annotated[float, Field(ge=0, strict=True)]
Quantity = Annotated[int, Field(ge=1, strict=True)]
Flag = Annotated[bool, Field(strict=True)]
OffDays = Annotated[
    list[OffDay], Field(min_length=1), AfterValidator(_check_off_days),
]


class CustomerCreate(RequestSchema):
    name: CustomerName
    phone: Phone
    address: Address
    default_item: MealItem
    default_price: Price
    default_quantity: Quantity
    payment_system: PaymentSystem
    default_off_days: OffDays
    active: Flag = True


class CustomerUpdate(PartialUpdateSchema):
    name: CustomerName | None = None
    phone: Phone | None = None
    address: Address | None = None
    default_item: MealItem | None = None
    default_price: Price | None = None
    default_quantity: Quantity | None = None
    payment_system: PaymentSystem | None = None
    default_off_days: OffDays | None = None
    active: Flag | None = None


class CustomerListQuery(RequestSchema):
    page: PageNumber = 1
    limit: PageSize = 10
    search: str | None = None
    sort_by: str | None = None
    sort_type: str | None = None
    active: bool | None = None


class CustomerSummary(ReadSchema):
    id: UUID
    name: str
    phone: str
    address: str
    default_item: str
    default_price: float
    default_quantity: int
    payment_system: str
    default_off_days: list[str]
    active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CustomerRead(CustomerSummary):
    access_key_expires_at: datetime | None = None
