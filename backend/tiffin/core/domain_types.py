"""Domain Types — identity types and the closed value sets of the tiffin business.

Invariants:
    - CustomerId, OrderId, PaymentId wrap UUIDs
    - Every enumerated field (item, payment cadence, off-day) is a str Enum
    - Sort whitelists are fixed per resource; the default sort field is in every whitelist
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

CustomerId = NewType("CustomerId", UUID)
OrderId = NewType("OrderId", UUID)
PaymentId = NewType("PaymentId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class MealItem(str, Enum):
    """What gets delivered on a given day."""
    LUNCH = "lunch"
    DINNER = "dinner"
    LUNCH_AND_DINNER = "lunch&dinner"


class PaymentSystem(str, Enum):
    """How often a customer settles their bill."""
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class OffDay(str, Enum):
    """Weekly non-delivery days, in the business's week order (Saturday first)."""
    SATURDAY = "sa"
    SUNDAY = "su"
    MONDAY = "mo"
    TUESDAY = "tu"
    WEDNESDAY = "we"
    THURSDAY = "th"
    FRIDAY = "fr"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


# ─── Sort Whitelists ─────────────────────────────────────────────

DEFAULT_SORT_FIELD = "updatedAt"

CUSTOMER_SORT_FIELDS: frozenset[str] = frozenset({"createdAt", "updatedAt", "name"})
ORDER_SORT_FIELDS: frozenset[str] = frozenset({"createdAt", "updatedAt", "date"})
PAYMENT_SORT_FIELDS: frozenset[str] = frozenset({"createdAt", "updatedAt", "amount"})
ACCESS_VIEW_SORT_FIELDS: frozenset[str] = frozenset({"createdAt", "updatedAt"})
