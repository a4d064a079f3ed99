"""Testing support – hypothesis strategies for query-engine property tests."""

from mp_query.testing.generators import (
    limit_strategy,
    record_strategy,
    records_strategy,
    scalar_strategy,
    sort_param_strategy,
)

__all__ = [
    "limit_strategy",
    "record_strategy",
    "records_strategy",
    "scalar_strategy",
    "sort_param_strategy",
]
