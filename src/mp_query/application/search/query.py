"""Application search – EngineConfig, SortSpec and reserved parameter keys."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from mp_query.kernel.types.values import MISSING

__all__ = ["ALL", "RESERVED_KEYS", "EngineConfig", "SortSpec", "is_no_filter"]

# Control keys that never address a record field.
RESERVED_KEYS: frozenset[str] = frozenset(
    {"q", "page", "limit", "sort", "date_from", "date_to", "total"}
)

ALL = "ALL"


def is_no_filter(value: Any) -> bool:
    """``True`` when a field-filter value means "do not filter"."""
    return value is MISSING or (isinstance(value, str) and value in ("", ALL))


@dataclass(frozen=True)
class EngineConfig:
    """Per-dataset configuration supplied with every query call.

    *searchable_fields* may be any iterable of names; it is stored as a tuple.
    """
    searchable_fields: tuple[str, ...] = ()
    date_field: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "searchable_fields", tuple(self.searchable_fields))


@dataclass(frozen=True)
class SortSpec:
    field: str
    direction: Literal["asc", "desc"] = "asc"

    @property
    def descending(self) -> bool:
        return self.direction == "desc"

    @classmethod
    def parse(cls, value: Any) -> "SortSpec | None":
        """Parse ``"<field>[:<direction>]"``; anything but ``"desc"`` is ascending.

        Returns ``None`` when *value* is not a string.
        """
        if not isinstance(value, str):
            return None
        field, _, direction = value.partition(":")
        direction = direction.split(":", 1)[0]
        return cls(field=field, direction="desc" if direction == "desc" else "asc")
