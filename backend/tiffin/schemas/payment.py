"""Payment Schemas — create, list query and read models."""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import Field, StringConstraints

from tiffin.schemas.common import (
    DateRangeQuery, PageNumber, PageSize, ReadSchema, RequestSchema,
)

Amount = Annotated[float, Field(gt=0, strict=True)]
Note = Annotated[str, StringConstraints(max_length=200)]


class PaymentCreate(RequestSchema):
    customer_id: UUID
    amount: Amount
    note: Note | None = None


class PaymentListQuery(DateRangeQuery):
    page: PageNumber = 1
    limit: PageSize = 10
    sort_by: str | None = None
    sort_type: str | None = None
    customer: UUID | None = None


class PaymentRead(ReadSchema):
    id: UUID
    customer_id: UUID
    amount: float
    note: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
