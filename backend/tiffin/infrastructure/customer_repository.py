"""Customer Repository — SQLAlchemy implementation of CustomerRepository.

Invariants:
    - Every write commits; each service call performs at most one logical write
    - An IntegrityError on write can only come from uq_customers_phone and is
      reported as DuplicatePhoneError
    - find_by_access_key matches the digest AND requires expiry strictly after now
"""

import logging
from datetime import datetime

from sqlalchemy import Select, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tiffin.core.domain_types import CustomerId
from tiffin.core.errors import DuplicatePhoneError, ResourceNotFoundError
from tiffin.core.filters import CustomerFilter, SortSpec
from tiffin.core.pagination import PageRequest
from tiffin.core.records import CustomerRecord
from tiffin.db.base import utc_now
from tiffin.infrastructure.query_helpers import as_utc, contains_ci, order_by
from tiffin.models.customer import Customer

logger = logging.getLogger(__name__)

_SORT_COLUMNS = {
    "createdAt": Customer.created_at,
    "updatedAt": Customer.updated_at,
    "name": Customer.name,
}


def _to_record(row: Customer) -> CustomerRecord:
    return CustomerRecord(
        id=CustomerId(row.id),
        name=row.name,
        phone=row.phone,
        address=row.address,
        default_item=row.default_item,
        default_price=row.default_price,
        default_quantity=row.default_quantity,
        payment_system=row.payment_system,
        default_off_days=tuple(row.default_off_days or ()),
        active=row.active,
        access_key_hash=row.access_key_hash,
        access_key_expires_at=as_utc(row.access_key_expires_at),
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


def _apply(row: Customer, record: CustomerRecord) -> None:
    row.name = record.name
    row.phone = record.phone
    row.address = record.address
    row.default_item = record.default_item
    row.default_price = record.default_price
    row.default_quantity = record.default_quantity
    row.payment_system = record.payment_system
    row.default_off_days = list(record.default_off_days)
    row.active = record.active
    row.access_key_hash = record.access_key_hash
    row.access_key_expires_at = record.access_key_expires_at


def _filtered(stmt: Select, flt: CustomerFilter) -> Select:
    if flt.active is not None:
        stmt = stmt.where(Customer.active == flt.active)
    if flt.search:
        stmt = stmt.where(or_(
            contains_ci(Customer.name, flt.search),
            contains_ci(Customer.phone, flt.search),
        ))
    return stmt


class SqlCustomerRepository:
    """Customer persistence on an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_page(
        self, flt: CustomerFilter, sort: SortSpec, page: PageRequest,
    ) -> list[CustomerRecord]:
        stmt = (
            _filtered(select(Customer), flt)
            .order_by(*order_by(sort, _SORT_COLUMNS, Customer.id))
            .offset(page.offset)
            .limit(page.limit)
        )
        result = await self.db.execute(stmt)
        return [_to_record(row) for row in result.scalars().all()]

    async def count(self, flt: CustomerFilter) -> int:
        stmt = _filtered(select(func.count()).select_from(Customer), flt)
        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def get(self, customer_id: CustomerId) -> CustomerRecord | None:
        row = await self.db.get(Customer, customer_id)
        return _to_record(row) if row else None

    async def find_by_phone(self, phone: str) -> CustomerRecord | None:
        result = await self.db.execute(
            select(Customer).where(Customer.phone == phone),
        )
        row = result.scalars().first()
        return _to_record(row) if row else None

    async def find_by_access_key(
        self, key_digest: str, now: datetime,
    ) -> CustomerRecord | None:
        result = await self.db.execute(
            select(Customer)
            .where(Customer.access_key_hash == key_digest)
            .where(Customer.access_key_expires_at > now)
        )
        row = result.scalars().first()
        return _to_record(row) if row else None

    async def add(self, record: CustomerRecord) -> CustomerRecord:
        now = utc_now()
        row = Customer(id=record.id, created_at=now, updated_at=now)
        _apply(row, record)
        self.db.add(row)
        await self._commit()
        return _to_record(row)

    async def save(self, record: CustomerRecord) -> CustomerRecord:
        row = await self.db.get(Customer, record.id)
        if row is None:
            raise ResourceNotFoundError("Customer not found with the provided ID")
        _apply(row, record)
        row.updated_at = utc_now()
        await self._commit()
        return _to_record(row)

    async def delete(self, customer_id: CustomerId) -> None:
        row = await self.db.get(Customer, customer_id)
        if row is None:
            return
        await self.db.delete(row)
        await self.db.commit()

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Customer write rejected by unique index: {e.orig}")
            raise DuplicatePhoneError() from e
