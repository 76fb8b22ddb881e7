"""Pagination — offset/limit arithmetic and the metadata block returned with every page.

Invariants:
    - page >= 1 and limit >= 1 (enforced by the query schemas before we get here)
    - totalPages == ceil(total / limit); 0 when there are no records
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PageRequest:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def build_pagination(page: int, limit: int, total: int) -> dict:
    """Pagination metadata for one page of a filtered collection. Pure, no IO."""
    total_pages = math.ceil(total / limit) if limit > 0 else 0
    return {
        "page": page,
        "limit": limit,
        "total": total,
        "totalPages": total_pages,
        "hasNextPage": page < total_pages,
        "hasPrevPage": page > 1,
    }


@dataclass(frozen=True)
class ListDefaults:
    """Fallbacks for list queries, read from Settings once at startup."""
    page: int = 1
    limit: int = 10
    sort_by: str = "updatedAt"
    sort_type: str = "desc"
