"""Customer Service — list, register, get, update, delete and access-key regeneration.

Invariants:
    - Every public method returns an Envelope; nothing raises to the caller
    - Identifier format is checked before any store call
    - Update checks existence BEFORE validating the body
    - An empty validated update is a no-op success carrying the current record
    - A plaintext access key appears in exactly one response (register or regenerate);
      only its SHA-256 digest is persisted

Design Decisions:
    - Phone uniqueness is checked up front for a friendly error, and the store's
      unique index backs it up (race between two registrations → same error)
    - Clock is injectable so key expiry can be exercised without sleeping
"""

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timedelta
from typing import Any
from uuid import uuid4

from tiffin.core.access_keys import issue_access_key
from tiffin.core.domain_types import CUSTOMER_SORT_FIELDS, CustomerId
from tiffin.core.envelope import Envelope
from tiffin.core.errors import DuplicatePhoneError, ResourceNotFoundError
from tiffin.core.filters import CustomerFilter, normalize_search, resolve_sort
from tiffin.core.pagination import ListDefaults, PageRequest, build_pagination
from tiffin.core.records import CustomerRecord, merge_changes, with_access_key
from tiffin.core.repository_protocols import CustomerRepository
from tiffin.db.base import utc_now
from tiffin.schemas.common import dump, parse_identifier, parse_payload
from tiffin.schemas.customer import (
    CustomerCreate, CustomerListQuery, CustomerRead, CustomerSummary, CustomerUpdate,
)
from tiffin.services.envelope_guard import enveloped
from tiffin.services.list_params import with_list_defaults

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Customer not found with the provided ID"
KEY_TARGET_NOT_FOUND_MESSAGE = "Customer not found with the provided ID/Key"


class CustomerService:

    def __init__(
        self,
        customers: CustomerRepository,
        defaults: ListDefaults = ListDefaults(),
        *,
        initial_key_ttl: timedelta = timedelta(days=60),
        key_ttl: timedelta = timedelta(days=30),
        expose_stack: bool = False,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.customers = customers
        self.defaults = defaults
        self.initial_key_ttl = initial_key_ttl
        self.key_ttl = key_ttl
        self.expose_stack = expose_stack
        self.clock = clock

    @enveloped("customer", "list_customers")
    async def list_customers(self, query: Mapping[str, Any] | None = None) -> Envelope:
        params = parse_payload(
            CustomerListQuery, with_list_defaults(query, self.defaults), "Invalid query params",
        )
        flt = CustomerFilter(active=params.active, search=normalize_search(params.search))
        sort = resolve_sort(
            params.sort_by, params.sort_type or self.defaults.sort_type,
            CUSTOMER_SORT_FIELDS, self.defaults.sort_by,
        )
        page = PageRequest(params.page, params.limit)
        records = await self.customers.find_page(flt, sort, page)
        total = await self.customers.count(flt)
        return Envelope.success(
            "Customers fetched successfully",
            data=[dump(CustomerSummary, r) for r in records],
            pagination=build_pagination(page.page, page.limit, total),
        )

    @enveloped("customer", "register_customer")
    async def register_customer(self, body: Any) -> Envelope:
        payload = parse_payload(CustomerCreate, body, "Invalid request body")
        if await self.customers.find_by_phone(payload.phone) is not None:
            raise DuplicatePhoneError()

        key = issue_access_key(self.clock(), self.initial_key_ttl)
        fields = payload.model_dump()
        fields["default_off_days"] = tuple(fields["default_off_days"])
        record = CustomerRecord(
            id=CustomerId(uuid4()),
            access_key_hash=key.digest,
            access_key_expires_at=key.expires_at,
            **fields,
        )
        saved = await self.customers.add(record)
        logger.info(
            "Customer registered",
            extra={"resource": "customer", "resource_id": str(saved.id)},
        )
        return Envelope.success(
            "Customer created successfully",
            data=dump(CustomerRead, saved),
            accessKey=key.plaintext,
        )

    @enveloped("customer", "get_customer")
    async def get_customer(self, raw_id: Any) -> Envelope:
        record = await self._require(raw_id, NOT_FOUND_MESSAGE)
        return Envelope.success("Customer fetched successfully", data=dump(CustomerRead, record))

    @enveloped("customer", "update_customer")
    async def update_customer(self, raw_id: Any, body: Any) -> Envelope:
        current = await self._require(raw_id, NOT_FOUND_MESSAGE)
        payload = parse_payload(CustomerUpdate, body, "Invalid request body")
        changes = payload.changes()
        if not changes:
            return Envelope.success("No changes to apply", data=dump(CustomerRead, current))

        new_phone = changes.get("phone")
        if new_phone is not None and new_phone != current.phone:
            holder = await self.customers.find_by_phone(new_phone)
            if holder is not None and holder.id != current.id:
                raise DuplicatePhoneError()

        updated = await self.customers.save(merge_changes(current, changes))
        logger.info(
            f"Customer updated: {sorted(changes)}",
            extra={"resource": "customer", "resource_id": str(updated.id)},
        )
        return Envelope.success("Customer updated successfully", data=dump(CustomerRead, updated))

    @enveloped("customer", "delete_customer")
    async def delete_customer(self, raw_id: Any) -> Envelope:
        record = await self._require(raw_id, NOT_FOUND_MESSAGE)
        await self.customers.delete(record.id)
        logger.info(
            "Customer deleted",
            extra={"resource": "customer", "resource_id": str(record.id)},
        )
        return Envelope.success("Customer deleted successfully", data=dump(CustomerRead, record))

    @enveloped("customer", "regenerate_access_key")
    async def regenerate_access_key(self, raw_id: Any) -> Envelope:
        current = await self._require(raw_id, KEY_TARGET_NOT_FOUND_MESSAGE)
        key = issue_access_key(self.clock(), self.key_ttl)
        await self.customers.save(with_access_key(current, key.digest, key.expires_at))
        logger.info(
            "Access key regenerated",
            extra={"resource": "customer", "resource_id": str(current.id)},
        )
        return Envelope.success(
            "Access key regenerated successfully",
            accessKey=key.plaintext,
            expiresAt=key.expires_at.isoformat(),
        )

    async def _require(self, raw_id: Any, not_found_message: str) -> CustomerRecord:
        customer_id = CustomerId(parse_identifier(raw_id))
        record = await self.customers.get(customer_id)
        if record is None:
            raise ResourceNotFoundError(not_found_message)
        return record
