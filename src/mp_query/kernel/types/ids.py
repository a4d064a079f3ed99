"""Canonical identifier strings.

Datasets mix numeric and string keys (``1`` vs ``"1"``). Every place that
stores, compares or looks up an identifier goes through :func:`normalize_id`
so that equality is independent of the original representation.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

from mp_query.kernel.types.values import MISSING, to_js_string


def normalize_id(value: Any, *, keep_zero: bool = False) -> str:
    """Return the canonical string form of *value*.

    Falsy inputs (``None``, :data:`MISSING`, ``""``, ``0``, ``nan``) become ``""``.
    The numeric id ``0`` is therefore indistinguishable from "no id";
    pass ``keep_zero=True`` to get ``"0"`` instead.

    Examples::

        normalize_id(5) == normalize_id("5") == "5"
        normalize_id(None) == normalize_id("") == ""
        normalize_id(0, keep_zero=True) == "0"
    """
    if keep_zero and value == 0 and not isinstance(value, bool):
        return "0"
    if value is MISSING or not value:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return to_js_string(value)


def normalize_id_fields(
    record: Mapping[str, Any],
    fields: Iterable[str],
    *,
    keep_zero: bool = False,
) -> dict[str, Any]:
    """Return a shallow copy of *record* with each of *fields* normalized.

    Fields that are not present on the record stay absent.
    """
    out = dict(record)
    for name in fields:
        if name in out:
            out[name] = normalize_id(out[name], keep_zero=keep_zero)
    return out


__all__ = ["normalize_id", "normalize_id_fields"]
