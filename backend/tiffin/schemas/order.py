"""Order Schemas — create, update, list/count query and read models.

Invariants:
    - customerId is a UUID; existence is checked by the service, not here
    - item/price/quantity are optional on create (snapshotted from the customer)
    - The owning customer cannot be changed by an update
"""

import datetime as dt
from uuid import UUID

from tiffin.core.domain_types import MealItem
from tiffin.schemas.common import (
    DateRangeQuery, PageNumber, PageSize, PartialUpdateSchema, ReadSchema,
    RequestSchema,
)
from tiffin.schemas.customer import Price, Quantity


class OrderCreate(RequestSchema):
    customer_id: UUID
    date: dt.date
    item: MealItem | None = None
    price: Price | None = None
    quantity: Quantity | None = None


class OrderUpdate(PartialUpdateSchema):
    date: dt.date | None = None
    item: MealItem | None = None
    price: Price | None = None
    quantity: Quantity | None = None


class OrderListQuery(DateRangeQuery):
    page: PageNumber = 1
    limit: PageSize = 10
    search: str | None = None
    sort_by: str | None = None
    sort_type: str | None = None
    date: dt.date | None = None
    customer: UUID | None = None


class OrderCountQuery(RequestSchema):
    customer_id: UUID | None = None


class OrderRead(ReadSchema):
    id: UUID
    customer_id: UUID
    date: dt.date
    item: str
    price: float
    quantity: int
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
