"""Access Schemas — verifies access key format and the view query."""

import pytest

from tiffin.core.errors import InputValidationError
from tiffin.schemas.access import KEY_FORMAT_MESSAGE, AccessKeyInput, AccessViewQuery
from tiffin.schemas.common import parse_payload


def test_key_of_64_characters_accepted():
    payload = parse_payload(AccessKeyInput, {"key": "a" * 64}, KEY_FORMAT_MESSAGE)
    assert payload.key == "a" * 64


@pytest.mark.parametrize("key", ["", "a" * 63, "a" * 65])
def test_key_of_other_length_rejected(key):
    with pytest.raises(InputValidationError) as exc_info:
        parse_payload(AccessKeyInput, {"key": key}, KEY_FORMAT_MESSAGE)
    assert exc_info.value.message == "Invalid access key format"


def test_view_query_pages_are_independent():
    params = parse_payload(AccessViewQuery, {"oPage": 2, "pPage": 5}, "Invalid query params")
    assert params.o_page == 2
    assert params.p_page == 5
    assert params.limit == 10
