"""Application pagination – PageRequest."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from mp_query.kernel.types.values import MISSING, parse_int

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Offset-based pagination parameters."""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.limit < 1:
            raise ValueError("limit must be >= 1")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def from_params(
        cls,
        params: Mapping[str, Any],
        *,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int | None = None,
    ) -> "PageRequest":
        """Build a request from a loosely-typed parameter bag.

        Never raises: unparseable or non-positive values fall back to page 1
        and *default_limit*. *max_limit* (when set) caps the page size.
        """
        page = max(DEFAULT_PAGE, parse_int(params.get("page", MISSING)) or DEFAULT_PAGE)
        limit = parse_int(params.get("limit", MISSING)) or default_limit
        if limit < 1:
            limit = default_limit
        if max_limit:
            limit = min(limit, max_limit)
        return cls(page=page, limit=limit)


__all__ = ["DEFAULT_LIMIT", "DEFAULT_PAGE", "PageRequest"]
