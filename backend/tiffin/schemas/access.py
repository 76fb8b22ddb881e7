"""Self-Service Schemas — access key format and the two-collection view query.

Invariants:
    - key is exactly ACCESS_KEY_LENGTH characters; anything else fails with
      "Invalid access key format" before the store is touched
    - oPage and pPage paginate orders and payments independently; limit is shared
"""

from typing import Annotated

from pydantic import AfterValidator

from tiffin.core.access_keys import ACCESS_KEY_LENGTH
from tiffin.schemas.common import DateRangeQuery, PageNumber, PageSize, RequestSchema

KEY_FORMAT_MESSAGE = "Invalid access key format"


def _check_key_length(v: str) -> str:
    if len(v) != ACCESS_KEY_LENGTH:
        raise ValueError(KEY_FORMAT_MESSAGE)
    return v


class AccessKeyInput(RequestSchema):
    key: Annotated[str, AfterValidator(_check_key_length)]


class AccessViewQuery(DateRangeQuery):
    o_page: PageNumber = 1
    p_page: PageNumber = 1
    limit: PageSize = 10
    sort_by: str | None = None
    sort_type: str | None = None
