"""
mp_query – In-memory list-endpoint query engine.

Import path convention::

    from mp_query.application.search import EngineConfig, query
    from mp_query.kernel.types import normalize_id
    from mp_query.application.mocks import InMemoryStore, ListEndpoint, MockRouter
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
