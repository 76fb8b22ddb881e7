"""Errors — verifies codes, statuses and the response shape of the error hierarchy."""

from tiffin.core.errors import (
    DatabaseError, DuplicatePhoneError, ErrorCategory, FieldIssue,
    InputValidationError, InvalidAccessKeyError, InvalidIdentifierError,
    ResourceNotFoundError,
)


def test_validation_error_lists_field_issues():
    err = InputValidationError("Invalid request body", [FieldIssue("phone", "bad")])
    body = err.to_response()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["message"] == "Invalid request body"
    assert body["error"]["fields"] == [{"field": "phone", "message": "bad"}]


def test_invalid_identifier_names_the_field():
    err = InvalidIdentifierError("customerId")
    assert err.message == "Invalid ID"
    assert err.fields[0].field == "customerId"
    assert isinstance(err, InputValidationError)


def test_duplicate_phone_is_a_validation_style_400():
    err = DuplicatePhoneError()
    assert err.http_status == 400
    assert err.message == "Customer already exists"
    assert err.to_response()["error"]["fields"] == [
        {"field": "phone", "message": "Phone number must be unique"},
    ]


def test_not_found_is_a_client_error():
    err = ResourceNotFoundError("Order not found with the provided ID")
    assert err.is_client_error
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND


def test_access_key_error_has_fixed_message():
    assert InvalidAccessKeyError().message == (
        "Access key is not valid. Please request for a new key."
    )


def test_database_error_is_server_side():
    err = DatabaseError("timeout", "commit")
    assert not err.is_client_error
    assert err.operation == "commit"
