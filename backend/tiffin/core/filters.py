"""Typed Filters — per-resource query values built from validated fields only.

Invariants:
    - Filters are frozen; repositories translate them to SQL, nothing else reads them
    - None means "no constraint" for every filter field
    - resolve_sort never fails: an unknown field falls back to the default,
      anything but "asc" (case-insensitive) sorts descending
"""

from collections.abc import Collection
from dataclasses import dataclass
from datetime import date

from tiffin.core.domain_types import (
    CustomerId, DEFAULT_SORT_FIELD, SortDirection,
)


@dataclass(frozen=True)
class SortSpec:
    field: str
    direction: SortDirection

    @property
    def ascending(self) -> bool:
        return self.direction is SortDirection.ASC


def resolve_sort(
    sort_by: str | None,
    sort_type: str | None,
    allowed: Collection[str],
    default: str = DEFAULT_SORT_FIELD,
) -> SortSpec:
    """Resolve a requested sort against a whitelist."""
    if sort_by in allowed:
        field = sort_by
    elif default in allowed:
        field = default
    else:
        field = DEFAULT_SORT_FIELD
    direction = (
        SortDirection.ASC
        if (sort_type or "").strip().lower() == SortDirection.ASC.value
        else SortDirection.DESC
    )
    return SortSpec(field=field, direction=direction)


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar-day range; either bound may be open."""
    start: date | None = None
    end: date | None = None


@dataclass(frozen=True)
class CustomerFilter:
    active: bool | None = None
    search: str | None = None


@dataclass(frozen=True)
class OrderFilter:
    customer_id: CustomerId | None = None
    on_date: date | None = None
    date_range: DateRange = DateRange()
    search: str | None = None


@dataclass(frozen=True)
class PaymentFilter:
    customer_id: CustomerId | None = None
    updated_range: DateRange = DateRange()


def normalize_search(search: str | None) -> str | None:
    """Blank search strings mean no search."""
    if search is None:
        return None
    cleaned = search.strip()
    return cleaned or None
