"""Payment Repository — SQLAlchemy implementation of PaymentRepository."""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tiffin.core.domain_types import CustomerId, PaymentId
from tiffin.core.filters import PaymentFilter, SortSpec
from tiffin.core.pagination import PageRequest
from tiffin.core.records import PaymentRecord
from tiffin.db.base import utc_now
from tiffin.infrastructure.query_helpers import as_utc, order_by, timestamp_conditions
from tiffin.models.payment import Payment

_SORT_COLUMNS = {
    "createdAt": Payment.created_at,
    "updatedAt": Payment.updated_at,
    "amount": Payment.amount,
}


def _to_record(row: Payment) -> PaymentRecord:
    return PaymentRecord(
        id=PaymentId(row.id),
        customer_id=CustomerId(row.customer_id),
        amount=row.amount,
        note=row.note,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


def _filtered(stmt: Select, flt: PaymentFilter) -> Select:
    if flt.customer_id is not None:
        stmt = stmt.where(Payment.customer_id == flt.customer_id)
    conditions = timestamp_conditions(Payment.updated_at, flt.updated_range)
    if conditions:
        stmt = stmt.where(*conditions)
    return stmt


class SqlPaymentRepository:
    """Payment persistence on an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_page(
        self, flt: PaymentFilter, sort: SortSpec, page: PageRequest,
    ) -> list[PaymentRecord]:
        stmt = (
            _filtered(select(Payment), flt)
            .order_by(*order_by(sort, _SORT_COLUMNS, Payment.id))
            .offset(page.offset)
            .limit(page.limit)
        )
        result = await self.db.execute(stmt)
        return [_to_record(row) for row in result.scalars().all()]

    async def count(self, flt: PaymentFilter) -> int:
        stmt = _filtered(select(func.count(Payment.id)), flt)
        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def get(self, payment_id: PaymentId) -> PaymentRecord | None:
        row = await self.db.get(Payment, payment_id)
        return _to_record(row) if row else None

    async def add(self, record: PaymentRecord) -> PaymentRecord:
        now = utc_now()
        row = Payment(
            id=record.id,
            customer_id=record.customer_id,
            amount=record.amount,
            note=record.note,
            created_at=now,
            updated_at=now,
        )
        self.db.add(row)
        await self.db.commit()
        return _to_record(row)

    async def delete(self, payment_id: PaymentId) -> None:
        row = await self.db.get(Payment, payment_id)
        if row is None:
            return
        await self.db.delete(row)
        await self.db.commit()
