"""Unit tests for canonical identifier normalization."""

from __future__ import annotations

import math

import pytest

from mp_query.kernel.types import MISSING, normalize_id, normalize_id_fields


class TestNormalizeId:
    def test_number_and_string_agree(self) -> None:
        assert normalize_id(5) == normalize_id("5") == "5"

    def test_absent_and_empty_agree(self) -> None:
        assert normalize_id(None) == normalize_id("") == normalize_id(MISSING) == ""

    def test_float_with_integral_value(self) -> None:
        assert normalize_id(12.0) == "12"

    def test_string_passthrough(self) -> None:
        assert normalize_id("pr-001") == "pr-001"

    def test_zero_conflated_with_absent_by_default(self) -> None:
        assert normalize_id(0) == ""

    def test_zero_kept_on_request(self) -> None:
        assert normalize_id(0, keep_zero=True) == "0"
        assert normalize_id(0.0, keep_zero=True) == "0"

    def test_keep_zero_does_not_affect_false(self) -> None:
        assert normalize_id(False, keep_zero=True) == ""

    def test_nan_is_absent(self) -> None:
        assert normalize_id(math.nan) == ""

    @pytest.mark.parametrize("value", [1, "1", 1.0])
    def test_representations_collapse(self, value: object) -> None:
        assert normalize_id(value) == "1"


class TestNormalizeIdFields:
    def test_normalizes_listed_fields_only(self) -> None:
        record = {"id": 1, "branch_id": 7, "code": 99}
        out = normalize_id_fields(record, ("id", "branch_id"))
        assert out == {"id": "1", "branch_id": "7", "code": 99}

    def test_absent_fields_stay_absent(self) -> None:
        out = normalize_id_fields({"id": 3}, ("id", "parent_id"))
        assert "parent_id" not in out

    def test_input_not_mutated(self) -> None:
        record = {"id": 3}
        normalize_id_fields(record, ("id",))
        assert record == {"id": 3}

    def test_none_becomes_empty_string(self) -> None:
        assert normalize_id_fields({"id": None}, ("id",)) == {"id": ""}
