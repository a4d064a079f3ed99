"""Application search – QueryEngine.

Turns an unfiltered in-memory collection and a loosely-typed parameter bag
into one page of results, shaped like a backend list endpoint response.
Stages run in a fixed order, each consuming the previous stage's output:

1. free-text search (``q`` over ``EngineConfig.searchable_fields``)
2. per-field filters (every non-reserved key)
3. date range (``date_from`` / ``date_to`` over ``EngineConfig.date_field``)
4. sort (``sort = "<field>:<asc|desc>"``, stable, missing values last)
5. pagination (``page`` / ``limit``)

The engine is total: malformed parameters degrade to defaults or to
exclusion, never to an exception. Inputs are never mutated.
"""
from __future__ import annotations

import functools
import math
from collections.abc import Mapping, Sequence
from typing import Any, Generic, TypeVar

from mp_query.application.pagination.page_request import PageRequest
from mp_query.application.search.compare import compare_values, matches_field_filter, matches_text
from mp_query.application.search.query import RESERVED_KEYS, EngineConfig, SortSpec, is_no_filter
from mp_query.application.search.result import QueryResult
from mp_query.application.search.settings import QueryEngineSettings
from mp_query.kernel.types.values import MISSING, get_field, parse_timestamp
from mp_query.observability.logging import get_logger

T = TypeVar("T")

__all__ = ["QueryEngine", "query"]

logger = get_logger(__name__)

_EMPTY_CONFIG = EngineConfig()


def _search(items: list[T], params: Mapping[str, Any], config: EngineConfig) -> list[T]:
    term = params.get("q", MISSING)
    if not isinstance(term, str) or not term or not config.searchable_fields:
        return items
    return [r for r in items if matches_text(r, config.searchable_fields, term)]


def _field_filters(params: Mapping[str, Any]) -> list[tuple[str, Any]]:
    return [
        (key, value)
        for key, value in params.items()
        if key not in RESERVED_KEYS and not is_no_filter(value)
    ]


def _filter_fields(items: list[T], filters: list[tuple[str, Any]]) -> list[T]:
    if not filters:
        return items
    return [
        r for r in items
        if all(matches_field_filter(r, key, value) for key, value in filters)
    ]


def _filter_dates(items: list[T], params: Mapping[str, Any], config: EngineConfig) -> list[T]:
    if not config.date_field:
        return items
    raw_from = params.get("date_from", MISSING)
    raw_to = params.get("date_to", MISSING)
    has_from = isinstance(raw_from, str) and bool(raw_from)
    has_to = isinstance(raw_to, str) and bool(raw_to)
    if not (has_from or has_to):
        return items

    lower = parse_timestamp(raw_from) if has_from else -math.inf
    upper = parse_timestamp(raw_to) if has_to else math.inf
    field = config.date_field
    # nan never satisfies either comparison, so unparseable dates drop out
    return [r for r in items if lower <= parse_timestamp(get_field(r, field)) <= upper]


def _sort(items: list[T], spec: SortSpec | None) -> list[T]:
    if spec is None:
        return items

    def _cmp(a: T, b: T) -> int:
        return compare_values(
            get_field(a, spec.field),
            get_field(b, spec.field),
            descending=spec.descending,
        )

    return sorted(items, key=functools.cmp_to_key(_cmp))


class QueryEngine(Generic[T]):
    """In-memory list-endpoint engine.

    Stateless apart from its settings; a single instance may serve any
    number of datasets and concurrent callers.

    Example::

        engine = QueryEngine()
        result = engine.query(
            customers,
            {"q": "acme", "status": "ACTIVE", "sort": "name:asc", "page": "2"},
            EngineConfig(searchable_fields=("code", "name")),
        )
        result.items, result.total
    """

    def __init__(self, settings: QueryEngineSettings | None = None) -> None:
        self._settings = settings or QueryEngineSettings()

    @property
    def settings(self) -> QueryEngineSettings:
        return self._settings

    def query(
        self,
        data: Sequence[T],
        params: Mapping[str, Any] | None = None,
        config: EngineConfig | None = None,
    ) -> QueryResult[T]:
        params = params or {}
        config = config or _EMPTY_CONFIG

        items = list(data)
        searched = _search(items, params, config)
        filters = _field_filters(params)
        filtered = _filter_fields(searched, filters)
        dated = _filter_dates(filtered, params, config)
        spec = SortSpec.parse(params.get("sort", MISSING))
        ordered = _sort(dated, spec)

        request = PageRequest.from_params(
            params,
            default_limit=self._settings.default_limit,
            max_limit=self._settings.max_limit or None,
        )
        result: QueryResult[T] = QueryResult.of(ordered, request)  # type: ignore[assignment]

        if self._settings.debug_log:
            logger.debug(
                "query.executed",
                received=len(items),
                after_search=len(searched),
                field_filters=[key for key, _ in filters],
                after_filters=len(filtered),
                date_field=config.date_field,
                after_dates=len(dated),
                sort=f"{spec.field}:{spec.direction}" if spec else None,
                total=result.total,
                page=result.page,
                limit=result.limit,
                returned=len(result.items),
            )
        return result


_default_engine: QueryEngine[Any] = QueryEngine()


def query(
    data: Sequence[T],
    params: Mapping[str, Any] | None = None,
    config: EngineConfig | None = None,
) -> QueryResult[T]:
    """Run *data* through the engine with default settings."""
    return _default_engine.query(data, params, config)
