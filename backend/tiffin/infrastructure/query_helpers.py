"""Query Helpers — shared translation of typed filters and sort specs into SQL.

Invariants:
    - Sorting always ends with the primary key so pages are stable between requests
    - Search is a case-insensitive literal substring match (LIKE wildcards escaped)
    - A DateRange on a DateTime column covers whole UTC days, end day inclusive
"""

from collections.abc import Mapping
from datetime import date, datetime, time, timedelta, timezone

from sqlalchemy import ColumnElement, func

from tiffin.core.domain_types import DEFAULT_SORT_FIELD
from tiffin.core.filters import DateRange, SortSpec


def as_utc(value: datetime | None) -> datetime | None:
    """SQLite hands back naive datetimes; every stored timestamp is UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def order_by(sort: SortSpec, columns: Mapping[str, ColumnElement], tiebreak: ColumnElement) -> list:
    column = columns.get(sort.field, columns[DEFAULT_SORT_FIELD])
    if sort.ascending:
        return [column.asc(), tiebreak.asc()]
    return [column.desc(), tiebreak.desc()]


def contains_ci(column: ColumnElement, term: str) -> ColumnElement:
    return func.lower(column).contains(term.lower(), autoescape=True)


def date_conditions(column: ColumnElement, rng: DateRange) -> list:
    """Conditions for a Date column."""
    conditions = []
    if rng.start is not None:
        conditions.append(column >= rng.start)
    if rng.end is not None:
        conditions.append(column <= rng.end)
    return conditions


def _start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def timestamp_conditions(column: ColumnElement, rng: DateRange) -> list:
    """Conditions for a DateTime column."""
    conditions = []
    if rng.start is not None:
        conditions.append(column >= _start_of_day(rng.start))
    if rng.end is not None:
        conditions.append(column < _start_of_day(rng.end + timedelta(days=1)))
    return conditions
