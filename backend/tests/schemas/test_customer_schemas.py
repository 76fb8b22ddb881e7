"""Customer Schemas — verifies create/update validation rules and field naming.

Tests:
    - Phone pattern, name length, strict numeric types
    - Off-days: non-empty, from the 7-value set, no repeats, returned in week order
    - Update: every field optional, explicit null rejected
"""

import pytest

from tiffin.core.errors import InputValidationError
from tiffin.schemas.common import parse_payload
from tiffin.schemas.customer import CustomerCreate, CustomerUpdate, PHONE_MESSAGE


def _valid_body(**overrides) -> dict:
    body = {
        "name": "Rahim Uddin",
        "phone": "01712345678",
        "address": "House 4, Road 2, Dhanmondi",
        "defaultItem": "lunch",
        "defaultPrice": 120.0,
        "defaultQuantity": 1,
        "paymentSystem": "monthly",
        "defaultOffDays": ["fr"],
    }
    body.update(overrides)
    return body


def _issues(body, schema=CustomerCreate) -> dict[str, str]:
    with pytest.raises(InputValidationError) as exc_info:
        parse_payload(schema, body, "Invalid request body")
    assert exc_info.value.message == "Invalid request body"
    return {issue.field: issue.message for issue in exc_info.value.fields}


def test_valid_body_parses_with_camel_case_names():
    payload = parse_payload(CustomerCreate, _valid_body(), "Invalid request body")
    assert payload.default_item == "lunch"
    assert payload.active is True


@pytest.mark.parametrize("phone", [
    "0171234567", "017123456789", "02712345678", "01a12345678",
    "01" + "\u09e7" * 9, "01" + "\uff11" * 9,
])
def test_phone_must_be_01_plus_nine_digits(phone):
    assert _issues(_valid_body(phone=phone))["phone"] == PHONE_MESSAGE


def test_name_too_short():
    assert "name" in _issues(_valid_body(name="Al"))


def test_price_must_not_be_a_string():
    assert "defaultPrice" in _issues(_valid_body(defaultPrice="120"))


def test_quantity_must_be_positive():
    assert "defaultQuantity" in _issues(_valid_body(defaultQuantity=0))


def test_unknown_item_rejected():
    assert "defaultItem" in _issues(_valid_body(defaultItem="breakfast"))


def test_off_days_must_not_be_empty():
    assert "defaultOffDays" in _issues(_valid_body(defaultOffDays=[]))


def test_off_days_must_come_from_the_week():
    issues = _issues(_valid_body(defaultOffDays=["fr", "xx"]))
    assert any(field.startswith("defaultOffDays") for field in issues)


def test_repeated_off_days_rejected():
    issues = _issues(_valid_body(defaultOffDays=["fr", "fr"]))
    assert issues["defaultOffDays"] == "Default off days must not repeat"


def test_off_days_returned_in_week_order():
    payload = parse_payload(
        CustomerCreate, _valid_body(defaultOffDays=["fr", "mo", "sa"]), "Invalid request body",
    )
    assert payload.default_off_days == ["sa", "mo", "fr"]


def test_every_violation_is_reported():
    issues = _issues(_valid_body(name="Al", phone="123"))
    assert {"name", "phone"} <= set(issues)


def test_non_object_body_reported_on_body():
    assert "body" in _issues(None)


def test_update_accepts_empty_body():
    payload = parse_payload(CustomerUpdate, {}, "Invalid request body")
    assert payload.changes() == {}


def test_update_keeps_only_sent_fields():
    payload = parse_payload(CustomerUpdate, {"address": "New address"}, "Invalid request body")
    assert payload.changes() == {"address": "New address"}


def test_update_keeps_field_constraints():
    assert _issues({"phone": "999"}, CustomerUpdate)["phone"] == PHONE_MESSAGE


def test_update_rejects_explicit_null():
    assert _issues({"name": None}, CustomerUpdate)["name"] == "Field cannot be null"
