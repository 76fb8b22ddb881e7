"""Domain Types — verifies identity types, enum values and sort whitelists.

Tests:
    - NewType wrappers exist and are callable
    - Enums serialize to the wire values clients send
    - Every whitelist contains the default sort field
"""

from uuid import uuid4

from tiffin.core.domain_types import (
    ACCESS_VIEW_SORT_FIELDS, CUSTOMER_SORT_FIELDS, DEFAULT_SORT_FIELD,
    ORDER_SORT_FIELDS, PAYMENT_SORT_FIELDS,
    CustomerId, MealItem, OffDay, OrderId, PaymentId, PaymentSystem,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert CustomerId(uid) == uid
    assert OrderId(uid) == uid
    assert PaymentId(uid) == uid


def test_meal_items_match_wire_values():
    assert {m.value for m in MealItem} == {"lunch", "dinner", "lunch&dinner"}


def test_payment_system_has_two_cadences():
    assert {p.value for p in PaymentSystem} == {"weekly", "monthly"}


def test_off_days_are_in_week_order_starting_saturday():
    assert [d.value for d in OffDay] == ["sa", "su", "mo", "tu", "we", "th", "fr"]


def test_default_sort_field_in_every_whitelist():
    for allowed in (
        CUSTOMER_SORT_FIELDS, ORDER_SORT_FIELDS,
        PAYMENT_SORT_FIELDS, ACCESS_VIEW_SORT_FIELDS,
    ):
        assert DEFAULT_SORT_FIELD in allowed
