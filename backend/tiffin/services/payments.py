"""Payment Service — list, register, get and delete customer payments.

Invariants:
    - A payment always references an existing customer at creation time
    - amount is strictly positive (enforced by PaymentCreate)
    - Payments are never updated; corrections are delete + re-register
"""

import logging
from collections.abc import Mapping
from typing import Any
from uuid import uuid4

from tiffin.core.domain_types import PAYMENT_SORT_FIELDS, CustomerId, PaymentId
from tiffin.core.envelope import Envelope
from tiffin.core.errors import ResourceNotFoundError
from tiffin.core.filters import DateRange, PaymentFilter, resolve_sort
from tiffin.core.pagination import ListDefaults, PageRequest, build_pagination
from tiffin.core.records import PaymentRecord
from tiffin.core.repository_protocols import CustomerRepository, PaymentRepository
from tiffin.schemas.common import dump, parse_identifier, parse_payload
from tiffin.schemas.payment import PaymentCreate, PaymentListQuery, PaymentRead
from tiffin.services.envelope_guard import enveloped
from tiffin.services.list_params import with_list_defaults

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Payment not found with the provided ID"
CUSTOMER_NOT_FOUND_MESSAGE = "Customer not found with the provided ID"


class PaymentService:

    def __init__(
        self,
        payments: PaymentRepository,
        customers: CustomerRepository,
        defaults: ListDefaults = ListDefaults(),
        *,
        expose_stack: bool = False,
    ):
        self.payments = payments
        self.customers = customers
        self.defaults = defaults
        self.expose_stack = expose_stack

    @enveloped("payment", "list_payments")
    async def list_payments(self, query: Mapping[str, Any] | None = None) -> Envelope:
        params = parse_payload(
            PaymentListQuery, with_list_defaults(query, self.defaults), "Invalid query params",
        )
        flt = PaymentFilter(
            customer_id=CustomerId(params.customer) if params.customer else None,
            updated_range=DateRange(params.from_date, params.to_date),
        )
        sort = resolve_sort(
            params.sort_by, params.sort_type or self.defaults.sort_type,
            PAYMENT_SORT_FIELDS, self.defaults.sort_by,
        )
        page = PageRequest(params.page, params.limit)
        records = await self.payments.find_page(flt, sort, page)
        total = await self.payments.count(flt)
        return Envelope.success(
            "Payments fetched successfully",
            data=[dump(PaymentRead, r) for r in records],
            pagination=build_pagination(page.page, page.limit, total),
        )

    @enveloped("payment", "register_payment")
    async def register_payment(self, body: Any) -> Envelope:
        payload = parse_payload(PaymentCreate, body, "Invalid request body")
        customer = await self.customers.get(CustomerId(payload.customer_id))
        if customer is None:
            raise ResourceNotFoundError(CUSTOMER_NOT_FOUND_MESSAGE)

        saved = await self.payments.add(PaymentRecord(
            id=PaymentId(uuid4()),
            customer_id=customer.id,
            amount=payload.amount,
            note=payload.note,
        ))
        logger.info(
            f"Payment of {saved.amount} registered",
            extra={"resource": "payment", "resource_id": str(saved.id)},
        )
        return Envelope.success("Payment created successfully", data=dump(PaymentRead, saved))

    @enveloped("payment", "get_payment")
    async def get_payment(self, raw_id: Any) -> Envelope:
        record = await self._require(raw_id)
        return Envelope.success("Payment fetched successfully", data=dump(PaymentRead, record))

    @enveloped("payment", "delete_payment")
    async def delete_payment(self, raw_id: Any) -> Envelope:
        record = await self._require(raw_id)
        await self.payments.delete(record.id)
        logger.info(
            "Payment deleted",
            extra={"resource": "payment", "resource_id": str(record.id)},
        )
        return Envelope.success("Payment deleted successfully", data=dump(PaymentRead, record))

    async def _require(self, raw_id: Any) -> PaymentRecord:
        payment_id = PaymentId(parse_identifier(raw_id))
        record = await self.payments.get(payment_id)
        if record is None:
            raise ResourceNotFoundError(NOT_FOUND_MESSAGE)
        return record
