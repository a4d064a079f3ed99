"""Testing generators – property-based strategies for records and query params."""
from mp_query.testing.generators.strategies import (
    DEFAULT_FIELDS,
    limit_strategy,
    record_strategy,
    records_strategy,
    scalar_strategy,
    sort_param_strategy,
)

__all__ = [
    "DEFAULT_FIELDS",
    "limit_strategy",
    "record_strategy",
    "records_strategy",
    "scalar_strategy",
    "sort_param_strategy",
]
