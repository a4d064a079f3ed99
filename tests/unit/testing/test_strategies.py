"""Unit tests for Hypothesis strategies."""
from __future__ import annotations

import sys
from unittest.mock import patch

import pytest
from hypothesis import given

from mp_query.kernel.types import MISSING
from mp_query.testing.generators import (
    DEFAULT_FIELDS,
    limit_strategy,
    record_strategy,
    records_strategy,
    scalar_strategy,
    sort_param_strategy,
)
from mp_query.testing.generators.strategies import _require_hypothesis


class TestRequireHypothesis:
    def test_returns_strategies_module(self) -> None:
        st = _require_hypothesis()
        assert hasattr(st, "integers")

    def test_raises_import_error_without_hypothesis(self) -> None:
        with patch.dict(sys.modules, {"hypothesis.strategies": None}):
            with pytest.raises(ImportError, match="hypothesis"):
                _require_hypothesis()


class TestGeneratedData:
    @given(scalar_strategy())
    def test_scalars_are_filter_values(self, value: object) -> None:
        assert value is None or isinstance(value, (str, int, float, bool))
        assert value is not MISSING

    @given(scalar_strategy(allow_none=False))
    def test_scalars_without_none(self, value: object) -> None:
        assert value is not None

    @given(record_strategy())
    def test_records_use_known_fields(self, record: dict) -> None:
        assert set(record) <= set(DEFAULT_FIELDS)

    @given(records_strategy(max_size=10))
    def test_records_have_sequence_numbers(self, records: list[dict]) -> None:
        assert [r["_seq"] for r in records] == list(range(len(records)))

    @given(sort_param_strategy(("name",)))
    def test_sort_params_name_field(self, sort: str) -> None:
        assert sort.split(":")[0] == "name"

    @given(limit_strategy())
    def test_limits_positive(self, limit: int) -> None:
        assert 1 <= limit <= 12
