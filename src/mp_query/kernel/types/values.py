"""Scalar filter values and the coercions the query engine applies to them.

Records and parameter bags arrive from loosely-typed sources (query strings,
JSON bodies, seeded fixtures), so every comparison the engine makes goes
through the pure functions in this module:

* :data:`MISSING`       — the "absent" value (a key that is not present).
* :func:`to_js_string`  — string form used for equality and fallback ordering.
* :func:`parse_int`     — lenient integer parsing for ``page`` / ``limit``.
* :func:`parse_timestamp` — date parsing to epoch milliseconds (``nan`` on failure).
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import UTC, date, datetime
from typing import Any, Final, TypeAlias


class _Missing:
    """Singleton marking a field or parameter that is not present at all."""

    __slots__ = ()
    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()

FilterValue: TypeAlias = str | int | float | bool | None | _Missing
QueryParams: TypeAlias = Mapping[str, FilterValue]

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_EXPONENT = re.compile(r"e([+-])0*(\d)")
_EXACT_INT_LIMIT: Final = 10**21
# CPython default for sys.get_int_max_str_digits()
_MAX_INT_DIGITS: Final = 4300


def is_missing(value: Any) -> bool:
    return value is MISSING


def is_nullish(value: Any) -> bool:
    """``True`` for ``None`` and :data:`MISSING`."""
    return value is None or value is MISSING


def get_field(record: Any, name: str) -> Any:
    """Read *name* from *record*, returning :data:`MISSING` when absent.

    Mappings are read by key; any other object through its ``__dict__``.
    """
    if isinstance(record, Mapping):
        return record[name] if name in record else MISSING
    attrs = getattr(record, "__dict__", None)
    if attrs is None:
        return MISSING
    return attrs.get(name, MISSING)


def _number_to_string(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return _EXPONENT.sub(r"e\1\2", repr(value))


def to_js_string(value: Any) -> str:
    """Return the string form of a scalar, matching browser ``String(x)``.

    ``1`` and ``1.0`` both become ``"1"``, booleans become ``"true"`` /
    ``"false"``, ``None`` becomes ``"null"``. Integers from ``1e21`` up use
    exponent notation, and integers beyond the float range become
    ``"Infinity"``.
    """
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        if abs(value) < _EXACT_INT_LIMIT:
            return str(value)
        try:
            return _number_to_string(float(value))
        except OverflowError:
            return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, float):
        return _number_to_string(value)
    return str(value)


def parse_int(value: Any) -> int | None:
    """Parse a leading integer the way ``parseInt`` does; ``None`` on failure.

    >>> parse_int("2"), parse_int(" 3rd"), parse_int(4.9), parse_int("x")
    (2, 3, 4, None)

    Digit runs too long for :func:`int` to convert are treated as unparseable.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        if match is None or len(match.group(1)) > _MAX_INT_DIGITS:
            return None
        try:
            return int(match.group(1))
        except ValueError:
            # interpreter configured with a lower digit limit
            return None
    return None


def _to_millis(moment: datetime) -> float:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.timestamp() * 1000


def parse_timestamp(value: Any) -> float:
    """Return *value* as epoch milliseconds, or ``nan`` when it is not a date.

    Accepts ISO-8601 strings (date-only or date-time, with or without an
    offset), :class:`~datetime.datetime` / :class:`~datetime.date` objects and
    numbers (already epoch milliseconds). Naive values are read as UTC.
    """
    if is_nullish(value) or isinstance(value, bool):
        return math.nan
    if isinstance(value, datetime):
        return _to_millis(value)
    if isinstance(value, date):
        return _to_millis(datetime(value.year, value.month, value.day))
    if isinstance(value, (int, float)):
        try:
            millis = float(value)
        except OverflowError:
            return math.nan
        return millis if math.isfinite(millis) else math.nan
    if not isinstance(value, str) or not value.strip():
        return math.nan
    try:
        return _to_millis(datetime.fromisoformat(value.strip()))
    except ValueError:
        return math.nan


__all__ = [
    "MISSING",
    "FilterValue",
    "QueryParams",
    "get_field",
    "is_missing",
    "is_nullish",
    "parse_int",
    "parse_timestamp",
    "to_js_string",
]
