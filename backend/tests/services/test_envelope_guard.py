"""Envelope Guard — verifies that store failures become serverError envelopes."""

import logging
from uuid import uuid4

from tiffin.core.envelope import EnvelopeKind
from tiffin.core.errors import DatabaseError, ResourceNotFoundError
from tiffin.services.customers import CustomerService

from tests.services.factories import customer_body


class BrokenCustomerRepository:
    """Every call fails the way an unreachable store would."""

    async def _fail(self, *args, **kwargs):
        raise DatabaseError("connection refused", "execute")

    find_page = count = get = find_by_phone = find_by_access_key = _fail
    add = save = delete = _fail


class ExplodingCustomerRepository(BrokenCustomerRepository):

    async def _fail(self, *args, **kwargs):
        raise RuntimeError("driver crashed")

    find_page = count = get = find_by_phone = find_by_access_key = _fail
    add = save = delete = _fail


async def test_store_failure_is_server_error_without_stack():
    service = CustomerService(BrokenCustomerRepository(), expose_stack=False)
    envelope = await service.list_customers()

    assert envelope.kind is EnvelopeKind.SERVER_ERROR
    assert envelope.body["success"] is False
    assert envelope.body["message"] == "Database execute failed: connection refused"
    assert envelope.body["stack"] is None


async def test_unexpected_exception_exposes_stack_in_development():
    service = CustomerService(ExplodingCustomerRepository(), expose_stack=True)
    envelope = await service.register_customer(customer_body())

    assert envelope.kind is EnvelopeKind.SERVER_ERROR
    assert envelope.body["message"] == "driver crashed"
    assert "RuntimeError: driver crashed" in envelope.body["stack"]


async def test_validation_runs_before_store_is_touched():
    service = CustomerService(BrokenCustomerRepository())
    envelope = await service.get_customer("not-an-id")
    assert envelope.kind is EnvelopeKind.ERROR
    assert envelope.body["error"]["message"] == "Invalid ID"


class MissingCustomerRepository(BrokenCustomerRepository):
    """get() raises a prepared not-found error so its context can be inspected."""

    def __init__(self, error):
        self.error = error

    async def get(self, customer_id):
        raise self.error


async def test_client_error_context_is_stamped(caplog):
    error = ResourceNotFoundError("Customer not found with the provided ID")
    service = CustomerService(MissingCustomerRepository(error))

    with caplog.at_level(logging.WARNING, logger="tiffin.services.envelope_guard"):
        envelope = await service.get_customer(str(uuid4()))

    assert envelope.kind is EnvelopeKind.ERROR
    assert error.context.resource == "customer"
    assert error.context.operation == "get_customer"
    record = [r for r in caplog.records if r.name == "tiffin.services.envelope_guard"][-1]
    assert record.operation == "get_customer"
    assert record.error_code == "RESOURCE_NOT_FOUND"
