"""Application search – QueryResult generic container."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from mp_query.application.pagination.page import Page

T = TypeVar("T")

__all__ = ["QueryResult"]


@dataclass
class QueryResult(Page[T]):
    """One page of a filtered and sorted collection.

    ``total`` counts every record that survived filtering, across all pages.
    """

    def to_dict(self) -> dict[str, Any]:
        """Response body in the shape a list endpoint returns.

        ``data`` is an alias of ``items`` kept for older list screens.
        """
        return {
            "items": self.items,
            "data": self.items,
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
        }
