"""Order Service — verifies order registration snapshots, filters, count and CRUD envelopes."""

import logging
from uuid import uuid4

import pytest

from tiffin.core.envelope import EnvelopeKind


@pytest.fixture
async def customer(register_customer):
    created = await register_customer(defaultItem="lunch&dinner", defaultPrice=200.0, defaultQuantity=2)
    return created["data"]


async def _order(order_service, customer_id, day, **extra) -> dict:
    envelope = await order_service.register_order({"customerId": customer_id, "date": day, **extra})
    assert envelope.is_success, envelope.body
    return envelope.body["data"]


async def test_register_snapshots_customer_defaults(order_service, customer):
    order = await _order(order_service, customer["id"], "2026-03-01")
    assert order["item"] == "lunch&dinner"
    assert order["price"] == 200.0
    assert order["quantity"] == 2
    assert order["date"] == "2026-03-01"


async def test_register_explicit_values_override_defaults(order_service, customer):
    order = await _order(order_service, customer["id"], "2026-03-01", item="dinner", quantity=1)
    assert order["item"] == "dinner"
    assert order["quantity"] == 1
    assert order["price"] == 200.0


async def test_register_for_unknown_customer_is_not_found(order_service):
    envelope = await order_service.register_order({"customerId": str(uuid4()), "date": "2026-03-01"})
    assert envelope.kind is EnvelopeKind.ERROR
    assert envelope.body["error"]["message"] == "Customer not found with the provided ID"


async def test_register_rejects_missing_date(order_service, customer):
    envelope = await order_service.register_order({"customerId": customer["id"]})
    assert envelope.body["error"]["message"] == "Invalid request body"
    assert envelope.body["error"]["fields"][0]["field"] == "date"


async def test_later_default_change_leaves_order_untouched(
    order_service, customer_service, customer,
):
    order = await _order(order_service, customer["id"], "2026-03-01")
    await customer_service.update_customer(customer["id"], {"defaultPrice": 250.0})

    envelope = await order_service.get_order(order["id"])
    assert envelope.body["data"]["price"] == 200.0


async def test_update_and_empty_update(order_service, customer):
    order = await _order(order_service, customer["id"], "2026-03-01")

    unchanged = await order_service.update_order(order["id"], {})
    assert unchanged.is_success
    assert unchanged.body["data"] == order

    updated = await order_service.update_order(order["id"], {"quantity": 3})
    assert updated.body["data"]["quantity"] == 3
    assert updated.body["data"]["customerId"] == customer["id"]


async def test_update_malformed_id(order_service):
    envelope = await order_service.update_order("nope", {"quantity": 3})
    assert envelope.body["error"]["message"] == "Invalid ID"


async def test_delete_then_get_is_not_found(order_service, customer):
    order = await _order(order_service, customer["id"], "2026-03-01")
    assert (await order_service.delete_order(order["id"])).is_success

    envelope = await order_service.get_order(order["id"])
    assert envelope.body["error"]["message"] == "Order not found with the provided ID"


async def test_list_filters_by_date_range(order_service, customer):
    for day in ("2026-03-01", "2026-03-05", "2026-03-10"):
        await _order(order_service, customer["id"], day)

    envelope = await order_service.list_orders({
        "fromDate": "2026-03-02", "toDate": "2026-03-10", "sortBy": "date", "sortType": "asc",
    })
    assert [o["date"] for o in envelope.body["data"]] == ["2026-03-05", "2026-03-10"]
    assert envelope.body["pagination"]["total"] == 2


async def test_list_open_ended_range(order_service, customer):
    for day in ("2026-03-01", "2026-03-05"):
        await _order(order_service, customer["id"], day)

    envelope = await order_service.list_orders({"toDate": "2026-03-01"})
    assert [o["date"] for o in envelope.body["data"]] == ["2026-03-01"]


async def test_list_inverted_range_is_validation_error(order_service):
    envelope = await order_service.list_orders({"fromDate": "2026-03-10", "toDate": "2026-03-01"})
    assert envelope.body["error"]["message"] == "Invalid query params"


async def test_list_filters_by_exact_date_and_customer(order_service, register_customer, customer):
    other = (await register_customer(phone="01800000000", name="Karim Mia"))["data"]
    await _order(order_service, customer["id"], "2026-03-01")
    await _order(order_service, other["id"], "2026-03-01")
    await _order(order_service, other["id"], "2026-03-02")

    envelope = await order_service.list_orders({"date": "2026-03-01", "customer": other["id"]})
    assert len(envelope.body["data"]) == 1
    assert envelope.body["data"][0]["customerId"] == other["id"]


async def test_list_search_matches_owning_customer(order_service, register_customer, customer):
    other = (await register_customer(phone="01800000000", name="Karim Mia"))["data"]
    await _order(order_service, customer["id"], "2026-03-01")
    await _order(order_service, other["id"], "2026-03-01")

    envelope = await order_service.list_orders({"search": "karim"})
    assert [o["customerId"] for o in envelope.body["data"]] == [other["id"]]
    assert envelope.body["pagination"]["total"] == 1


async def test_count_all_and_per_customer(order_service, register_customer, customer):
    other = (await register_customer(phone="01800000000", name="Karim Mia"))["data"]
    await _order(order_service, customer["id"], "2026-03-01")
    await _order(order_service, other["id"], "2026-03-01")
    await _order(order_service, other["id"], "2026-03-02")

    total = await order_service.count_orders({})
    mine = await order_service.count_orders({"customerId": other["id"]})

    assert total.body["data"] == {"count": 3}
    assert mine.body["data"] == {"count": 2}


async def test_count_rejects_malformed_customer_id(order_service):
    envelope = await order_service.count_orders({"customerId": "abc"})
    assert envelope.body["error"]["message"] == "Invalid query params"


async def test_update_logs_changed_fields(order_service, customer, caplog):
    order = await _order(order_service, customer["id"], "2026-03-01")

    with caplog.at_level(logging.INFO, logger="tiffin.services.orders"):
        await order_service.update_order(order["id"], {"quantity": 3})

    record = [r for r in caplog.records if r.name == "tiffin.services.orders"][-1]
    assert record.getMessage() == "Order updated: ['quantity']"
    assert record.resource == "order"
    assert record.resource_id == order["id"]
