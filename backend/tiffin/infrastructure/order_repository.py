"""Order Repository — SQLAlchemy implementation of OrderRepository.

Invariants:
    - Search joins the owning customer and matches its name or phone
    - on_date and date_range both apply to the order's calendar date
"""

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from tiffin.core.domain_types import CustomerId, OrderId
from tiffin.core.errors import ResourceNotFoundError
from tiffin.core.filters import OrderFilter, SortSpec
from tiffin.core.pagination import PageRequest
from tiffin.core.records import OrderRecord
from tiffin.db.base import utc_now
from tiffin.infrastructure.query_helpers import (
    as_utc, contains_ci, date_conditions, order_by,
)
from tiffin.models.customer import Customer
from tiffin.models.order import Order

_SORT_COLUMNS = {
    "createdAt": Order.created_at,
    "updatedAt": Order.updated_at,
    "date": Order.date,
}


def _to_record(row: Order) -> OrderRecord:
    return OrderRecord(
        id=OrderId(row.id),
        customer_id=CustomerId(row.customer_id),
        date=row.date,
        item=row.item,
        price=row.price,
        quantity=row.quantity,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


def _apply(row: Order, record: OrderRecord) -> None:
    row.date = record.date
    row.item = record.item
    row.price = record.price
    row.quantity = record.quantity


def _filtered(stmt: Select, flt: OrderFilter) -> Select:
    if flt.customer_id is not None:
        stmt = stmt.where(Order.customer_id == flt.customer_id)
    if flt.on_date is not None:
        stmt = stmt.where(Order.date == flt.on_date)
    conditions = date_conditions(Order.date, flt.date_range)
    if conditions:
        stmt = stmt.where(*conditions)
    if flt.search:
        stmt = stmt.join(Customer, Customer.id == Order.customer_id).where(or_(
            contains_ci(Customer.name, flt.search),
            contains_ci(Customer.phone, flt.search),
        ))
    return stmt


class SqlOrderRepository:
    """Order persistence on an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_page(
        self, flt: OrderFilter, sort: SortSpec, page: PageRequest,
    ) -> list[OrderRecord]:
        stmt = (
            _filtered(select(Order), flt)
            .order_by(*order_by(sort, _SORT_COLUMNS, Order.id))
            .offset(page.offset)
            .limit(page.limit)
        )
        result = await self.db.execute(stmt)
        return [_to_record(row) for row in result.scalars().all()]

    async def count(self, flt: OrderFilter) -> int:
        stmt = _filtered(select(func.count(Order.id)), flt)
        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def get(self, order_id: OrderId) -> OrderRecord | None:
        row = await self.db.get(Order, order_id)
        return _to_record(row) if row else None

    async def add(self, record: OrderRecord) -> OrderRecord:
        now = utc_now()
        row = Order(
            id=record.id, customer_id=record.customer_id,
            created_at=now, updated_at=now,
        )
        _apply(row, record)
        self.db.add(row)
        await self.db.commit()
        return _to_record(row)

    async def save(self, record: OrderRecord) -> OrderRecord:
        row = await self.db.get(Order, record.id)
        if row is None:
            raise ResourceNotFoundError("Order not found with the provided ID")
        _apply(row, record)
        row.updated_at = utc_now()
        await self.db.commit()
        return _to_record(row)

    async def delete(self, order_id: OrderId) -> None:
        row = await self.db.get(Order, order_id)
        if row is None:
            return
        await self.db.delete(row)
        await self.db.commit()
