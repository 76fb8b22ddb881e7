"""Boundary Protocols — contracts between services and the store.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - All store IO goes through these Protocol types
    - Repositories accept and return frozen records, never ORM rows
    - count(filter) applies exactly the same filter as find_page(filter, ...),
      without offset or limit

Design Decisions:
    - Protocol over ABC: structural subtyping, so tests can pass any object
      with the right async methods
"""

from datetime import datetime
from typing import Protocol

from tiffin.core.domain_types import CustomerId, OrderId, PaymentId
from tiffin.core.filters import CustomerFilter, OrderFilter, PaymentFilter, SortSpec
from tiffin.core.pagination import PageRequest
from tiffin.core.records import CustomerRecord, OrderRecord, PaymentRecord


class CustomerRepository(Protocol):
    """Contract for customer persistence — implemented by infrastructure."""
    async def find_page(
        self, flt: CustomerFilter, sort: SortSpec, page: PageRequest,
    ) -> list[CustomerRecord]: ...
    async def count(self, flt: CustomerFilter) -> int: ...
    async def get(self, customer_id: CustomerId) -> CustomerRecord | None: ...
    async def find_by_phone(self, phone: str) -> CustomerRecord | None: ...
    async def find_by_access_key(
        self, key_digest: str, now: datetime,
    ) -> CustomerRecord | None: ...
    async def add(self, record: CustomerRecord) -> CustomerRecord: ...
    async def save(self, record: CustomerRecord) -> CustomerRecord: ...
    async def delete(self, customer_id: CustomerId) -> None: ...


class OrderRepository(Protocol):
    """Contract for order persistence — implemented by infrastructure."""
    async def find_page(
        self, flt: OrderFilter, sort: SortSpec, page: PageRequest,
    ) -> list[OrderRecord]: ...
    async def count(self, flt: OrderFilter) -> int: ...
    async def get(self, order_id: OrderId) -> OrderRecord | None: ...
    async def add(self, record: OrderRecord) -> OrderRecord: ...
    async def save(self, record: OrderRecord) -> OrderRecord: ...
    async def delete(self, order_id: OrderId) -> None: ...


class PaymentRepository(Protocol):
    """Contract for payment persistence — implemented by infrastructure."""
    async def find_page(
        self, flt: PaymentFilter, sort: SortSpec, page: PageRequest,
    ) -> list[PaymentRecord]: ...
    async def count(self, flt: PaymentFilter) -> int: ...
    async def get(self, payment_id: PaymentId) -> PaymentRecord | None: ...
    async def add(self, record: PaymentRecord) -> PaymentRecord: ...
    async def delete(self, payment_id: PaymentId) -> None: ...
