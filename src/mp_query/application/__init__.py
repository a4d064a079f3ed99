"""Application – query engine, pagination and simulated endpoints (framework-agnostic)."""

from mp_query.application.mocks import InMemoryStore, ListEndpoint, MockResponse, MockRouter
from mp_query.application.pagination import Page, PageRequest
from mp_query.application.search import (
    EngineConfig,
    QueryEngine,
    QueryEngineSettings,
    QueryResult,
    SortSpec,
    query,
)

__all__ = [
    "EngineConfig",
    "InMemoryStore",
    "ListEndpoint",
    "MockResponse",
    "MockRouter",
    "Page",
    "PageRequest",
    "QueryEngine",
    "QueryEngineSettings",
    "QueryResult",
    "SortSpec",
    "query",
]
