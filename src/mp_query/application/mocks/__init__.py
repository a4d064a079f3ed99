"""Application mocks – simulated list endpoints over injected in-memory stores."""
from mp_query.application.mocks.endpoint import Action, Enricher, ListEndpoint, set_fields
from mp_query.application.mocks.querystring import parse_query_string, split_url
from mp_query.application.mocks.router import MockResponse, MockRouter
from mp_query.application.mocks.store import InMemoryStore, Record

__all__ = [
    "Action",
    "Enricher",
    "InMemoryStore",
    "ListEndpoint",
    "MockResponse",
    "MockRouter",
    "Record",
    "parse_query_string",
    "set_fields",
    "split_url",
]
