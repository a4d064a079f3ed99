"""Kernel value types — public re-export surface.

Modules:
  values.py — MISSING, FilterValue, QueryParams and scalar coercions
  ids.py    — normalize_id, normalize_id_fields
"""

from mp_query.kernel.types.ids import normalize_id, normalize_id_fields
from mp_query.kernel.types.values import (
    MISSING,
    FilterValue,
    QueryParams,
    get_field,
    is_missing,
    is_nullish,
    parse_int,
    parse_timestamp,
    to_js_string,
)

__all__ = [
    "MISSING",
    "FilterValue",
    "QueryParams",
    "get_field",
    "is_missing",
    "is_nullish",
    "normalize_id",
    "normalize_id_fields",
    "parse_int",
    "parse_timestamp",
    "to_js_string",
]
