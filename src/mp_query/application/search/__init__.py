"""Application search – in-memory list-endpoint query engine."""
from mp_query.application.search.compare import compare_values, locale_compare
from mp_query.application.search.query import ALL, RESERVED_KEYS, EngineConfig, SortSpec, is_no_filter
from mp_query.application.search.result import QueryResult
from mp_query.application.search.service import QueryEngine, query
from mp_query.application.search.settings import QueryEngineSettings

__all__ = [
    "ALL",
    "RESERVED_KEYS",
    "EngineConfig",
    "QueryEngine",
    "QueryEngineSettings",
    "QueryResult",
    "SortSpec",
    "compare_values",
    "is_no_filter",
    "locale_compare",
    "query",
]
