"""Order Service — list, count, register, get, update and delete daily meal orders.

Invariants:
    - An order always belongs to an existing customer at creation time
    - item/price/quantity omitted on create are copied from the customer's defaults;
      later changes to those defaults never touch existing orders
    - Update checks existence BEFORE validating the body; an empty update is a no-op
"""

import logging
from collections.abc import Mapping
from typing import Any
from uuid import uuid4

from tiffin.core.domain_types import ORDER_SORT_FIELDS, CustomerId, OrderId
from tiffin.core.envelope import Envelope
from tiffin.core.errors import ResourceNotFoundError
from tiffin.core.filters import DateRange, OrderFilter, normalize_search, resolve_sort
from tiffin.core.pagination import ListDefaults, PageRequest, build_pagination
from tiffin.core.records import OrderRecord, merge_changes
from tiffin.core.repository_protocols import CustomerRepository, OrderRepository
from tiffin.schemas.common import dump, parse_identifier, parse_payload
from tiffin.schemas.order import (
    OrderCountQuery, OrderCreate, OrderListQuery, OrderRead, OrderUpdate,
)
from tiffin.services.envelope_guard import enveloped
from tiffin.services.list_params import with_list_defaults

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Order not found with the provided ID"
CUSTOMER_NOT_FOUND_MESSAGE = "Customer not found with the provided ID"


class OrderService:

    def __init__(
        self,
        orders: OrderRepository,
        customers: CustomerRepository,
        defaults: ListDefaults = ListDefaults(),
        *,
        expose_stack: bool = False,
    ):
        self.orders = orders
        self.customers = customers
        self.defaults = defaults
        self.expose_stack = expose_stack

    @enveloped("order", "list_orders")
    async def list_orders(self, query: Mapping[str, Any] | None = None) -> Envelope:
        params = parse_payload(
            OrderListQuery, with_list_defaults(query, self.defaults), "Invalid query params",
        )
        flt = OrderFilter(
            customer_id=CustomerId(params.customer) if params.customer else None,
            on_date=params.date,
            date_range=DateRange(params.from_date, params.to_date),
            search=normalize_search(params.search),
        )
        sort = resolve_sort(
            params.sort_by, params.sort_type or self.defaults.sort_type,
            ORDER_SORT_FIELDS, self.defaults.sort_by,
        )
        page = PageRequest(params.page, params.limit)
        records = await self.orders.find_page(flt, sort, page)
        total = await self.orders.count(flt)
        return Envelope.success(
            "Orders fetched successfully",
            data=[dump(OrderRead, r) for r in records],
            pagination=build_pagination(page.page, page.limit, total),
        )

    @enveloped("order", "count_orders")
    async def count_orders(self, query: Mapping[str, Any] | None = None) -> Envelope:
        supplied = {k: v for k, v in (query or {}).items() if v is not None}
        params = parse_payload(OrderCountQuery, supplied, "Invalid query params")
        customer_id = CustomerId(params.customer_id) if params.customer_id else None
        total = await self.orders.count(OrderFilter(customer_id=customer_id))
        return Envelope.success("Orders counted successfully", data={"count": total})

    @enveloped("order", "register_order")
    async def register_order(self, body: Any) -> Envelope:
        payload = parse_payload(OrderCreate, body, "Invalid request body")
        customer = await self.customers.get(CustomerId(payload.customer_id))
        if customer is None:
            raise ResourceNotFoundError(CUSTOMER_NOT_FOUND_MESSAGE)

        record = OrderRecord(
            id=OrderId(uuid4()),
            customer_id=customer.id,
            date=payload.date,
            item=payload.item if payload.item is not None else customer.default_item,
            price=payload.price if payload.price is not None else customer.default_price,
            quantity=(
                payload.quantity if payload.quantity is not None
                else customer.default_quantity
            ),
        )
        saved = await self.orders.add(record)
        logger.info(
            f"Order registered for {saved.date.isoformat()}",
            extra={"resource": "order", "resource_id": str(saved.id)},
        )
        return Envelope.success("Order created successfully", data=dump(OrderRead, saved))

    @enveloped("order", "get_order")
    async def get_order(self, raw_id: Any) -> Envelope:
        record = await self._require(raw_id)
        return Envelope.success("Order fetched successfully", data=dump(OrderRead, record))

    @enveloped("order", "update_order")
    async def update_order(self, raw_id: Any, body: Any) -> Envelope:
        current = await self._require(raw_id)
        payload = parse_payload(OrderUpdate, body, "Invalid request body")
        changes = payload.changes()
        if not changes:
            return Envelope.success("No changes to apply", data=dump(OrderRead, current))
        updated = await self.orders.save(merge_changes(current, changes))
        logger.info(
            f"Order updated: {sorted(changes)}",
            extra={"resource": "order", "resource_id": str(updated.id)},
        )
        return Envelope.success("Order updated successfully", data=dump(OrderRead, updated))

    @enveloped("order", "delete_order")
    async def delete_order(self, raw_id: Any) -> Envelope:
        record = await self._require(raw_id)
        await self.orders.delete(record.id)
        logger.info(
            "Order deleted",
            extra={"resource": "order", "resource_id": str(record.id)},
        )
        return Envelope.success("Order deleted successfully", data=dump(OrderRead, record))

    async def _require(self, raw_id: Any) -> OrderRecord:
        order_id = OrderId(parse_identifier(raw_id))
        record = await self.orders.get(order_id)
        if record is None:
            raise ResourceNotFoundError(NOT_FOUND_MESSAGE)
        return record
