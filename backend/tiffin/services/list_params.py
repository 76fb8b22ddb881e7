"""List Parameters — merge configured defaults under caller-supplied query values."""

from collections.abc import Iterable, Mapping
from typing import Any

from tiffin.core.pagination import ListDefaults


def with_list_defaults(
    query: Mapping[str, Any] | None,
    defaults: ListDefaults,
    page_keys: Iterable[str] = ("page",),
) -> dict[str, Any]:
    """Caller values win; None counts as "not supplied"."""
    merged: dict[str, Any] = {key: defaults.page for key in page_keys}
    merged["limit"] = defaults.limit
    merged.update({k: v for k, v in (query or {}).items() if v is not None})
    return merged
