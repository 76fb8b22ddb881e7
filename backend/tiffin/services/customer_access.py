"""Customer Access Service — the access-key-gated self-service view.

A customer holding a live access key sees their own profile plus independently
paginated orders and payments, without any staff credentials.

Invariants:
    - Key format is checked before the query, and both before any store call
    - Unknown and expired keys produce the SAME error (no key-existence oracle)
    - Only the key's digest is ever compared; the plaintext is never stored
    - orders and payments each carry pagination computed from their own count
"""

import logging
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from tiffin.core.access_keys import digest_access_key, is_key_live
from tiffin.core.domain_types import ACCESS_VIEW_SORT_FIELDS
from tiffin.core.envelope import Envelope
from tiffin.core.errors import InvalidAccessKeyError
from tiffin.core.filters import DateRange, OrderFilter, PaymentFilter, resolve_sort
from tiffin.core.pagination import ListDefaults, PageRequest, build_pagination
from tiffin.core.repository_protocols import (
    CustomerRepository, OrderRepository, PaymentRepository,
)
from tiffin.db.base import utc_now
from tiffin.schemas.access import KEY_FORMAT_MESSAGE, AccessKeyInput, AccessViewQuery
from tiffin.schemas.common import dump, parse_payload
from tiffin.schemas.customer import CustomerRead
from tiffin.schemas.order import OrderRead
from tiffin.schemas.payment import PaymentRead
from tiffin.services.envelope_guard import enveloped
from tiffin.services.list_params import with_list_defaults

logger = logging.getLogger(__name__)


class CustomerAccessService:

    def __init__(
        self,
        customers: CustomerRepository,
        orders: OrderRepository,
        payments: PaymentRepository,
        defaults: ListDefaults = ListDefaults(),
        *,
        expose_stack: bool = False,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.customers = customers
        self.orders = orders
        self.payments = payments
        self.defaults = defaults
        self.expose_stack = expose_stack
        self.clock = clock

    @enveloped("customer_access", "view_customer")
    async def view_customer(
        self, key: Any, query: Mapping[str, Any] | None = None,
    ) -> Envelope:
        key_input = parse_payload(AccessKeyInput, {"key": key}, KEY_FORMAT_MESSAGE)
        params = parse_payload(
            AccessViewQuery,
            with_list_defaults(query, self.defaults, page_keys=("oPage", "pPage")),
            "Invalid query params",
        )

        now = self.clock()
        customer = await self.customers.find_by_access_key(
            digest_access_key(key_input.key), now,
        )
        if customer is None or not is_key_live(customer.access_key_expires_at, now):
            raise InvalidAccessKeyError()

        sort = resolve_sort(
            params.sort_by, params.sort_type or self.defaults.sort_type,
            ACCESS_VIEW_SORT_FIELDS, self.defaults.sort_by,
        )
        window = DateRange(params.from_date, params.to_date)
        order_filter = OrderFilter(customer_id=customer.id, date_range=window)
        payment_filter = PaymentFilter(customer_id=customer.id, updated_range=window)
        order_page = PageRequest(params.o_page, params.limit)
        payment_page = PageRequest(params.p_page, params.limit)

        orders = await self.orders.find_page(order_filter, sort, order_page)
        order_total = await self.orders.count(order_filter)
        payments = await self.payments.find_page(payment_filter, sort, payment_page)
        payment_total = await self.payments.count(payment_filter)

        logger.info(
            "Self-service view served",
            extra={"resource": "customer", "resource_id": str(customer.id)},
        )
        return Envelope.success(
            "Customer fetched successfully",
            data={
                "self": dump(CustomerRead, customer),
                "orders": {
                    "data": [dump(OrderRead, r) for r in orders],
                    "pagination": build_pagination(order_page.page, order_page.limit, order_total),
                },
                "payments": {
                    "data": [dump(PaymentRead, r) for r in payments],
                    "pagination": build_pagination(
                        payment_page.page, payment_page.limit, payment_total,
                    ),
                },
            },
        )
