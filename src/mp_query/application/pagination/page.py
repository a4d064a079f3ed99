"""Application pagination – Page."""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Sequence
from typing import Any, Callable, Generic, TypeVar

from mp_query.application.pagination.page_request import PageRequest

T = TypeVar("T")


@dataclasses.dataclass
class Page(Generic[T]):
    """Offset-based page of results with computed navigation properties."""

    items: list[T]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        if self.limit <= 0 or self.total <= 0:
            return 0
        return math.ceil(self.total / self.limit)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def map(self, fn: Callable[[T], Any]) -> "Page[Any]":
        """Return a new page of the same type with each item transformed by *fn*."""
        return type(self)(
            items=[fn(item) for item in self.items],
            total=self.total,
            page=self.page,
            limit=self.limit,
        )

    @classmethod
    def of(cls, all_items: Sequence[T], request: PageRequest) -> "Page[T]":
        """Build a page by slicing *all_items* with *request*.

        Pages past the end are empty rather than an error.
        """
        start = request.offset
        return cls(
            items=list(all_items[start:start + request.limit]),
            total=len(all_items),
            page=request.page,
            limit=request.limit,
        )


__all__ = ["Page"]
