"""Application search – matching and ordering rules for scalar values."""
from __future__ import annotations

import unicodedata
from typing import Any

from mp_query.kernel.types.values import get_field, is_missing, is_nullish, to_js_string

__all__ = [
    "collation_key",
    "compare_values",
    "locale_compare",
    "matches_field_filter",
    "matches_text",
]


def collation_key(text: str) -> tuple[str, str, tuple[bool, ...], str]:
    """Sort key approximating the root-locale collation of a browser.

    Levels, in order: base letters without accents or case, accents,
    case (lowercase before uppercase), then raw code points as a tiebreak.
    """
    folded = text.casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base, decomposed, tuple(ch.isupper() for ch in text), text


def locale_compare(a: str, b: str) -> int:
    ka, kb = collation_key(a), collation_key(b)
    return (ka > kb) - (ka < kb)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _same(a: Any, b: Any) -> bool:
    if is_nullish(a) and is_nullish(b):
        return True
    if _is_number(a) and _is_number(b):
        return a == b
    return type(a) is type(b) and a == b


def _compare_defined(a: Any, b: Any) -> int:
    if isinstance(a, str) and isinstance(b, str):
        return locale_compare(a, b)
    if _is_number(a) and _is_number(b):
        # NaN makes both comparisons false, so it ties with everything
        return (a > b) - (a < b)
    if isinstance(a, bool) and isinstance(b, bool):
        return int(a) - int(b)
    return locale_compare(to_js_string(a), to_js_string(b))


def compare_values(a: Any, b: Any, *, descending: bool = False) -> int:
    """Three-way comparison used by the sort stage.

    ``None`` / missing values sort after every defined value in both
    directions; only the comparison between defined values is reversed.
    """
    if _same(a, b):
        return 0
    if is_nullish(a):
        return 1
    if is_nullish(b):
        return -1
    result = _compare_defined(a, b)
    return -result if descending else result


def matches_text(record: Any, fields: tuple[str, ...], term: str) -> bool:
    """``True`` when any of *fields* contains *term*, ignoring case."""
    needle = term.lower()
    for name in fields:
        value = get_field(record, name)
        text = "" if is_nullish(value) else to_js_string(value)
        if needle in text.lower():
            return True
    return False


def matches_field_filter(record: Any, name: str, expected: Any) -> bool:
    """Apply one field filter to *record*.

    A record without the field passes. Two strings match by case-insensitive
    substring; anything else must have an identical string form, so ``1``
    matches ``"1"``.
    """
    actual = get_field(record, name)
    if is_missing(actual):
        return True
    if isinstance(actual, str) and isinstance(expected, str):
        return expected.lower() in actual.lower()
    return to_js_string(actual) == to_js_string(expected)
