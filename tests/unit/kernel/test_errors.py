"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from mp_query.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    MethodNotAllowedError,
    NotFoundError,
    RouteNotFoundError,
    ValidationError,
)


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("boom").code == "base_error"

    def test_custom_code_and_detail(self) -> None:
        err = BaseError("boom", code="x", detail={"k": 1})
        assert err.to_dict() == {"code": "x", "message": "boom", "detail": {"k": 1}}

    def test_cause_chained(self) -> None:
        cause = ValueError("inner")
        err = BaseError("outer", cause=cause)
        assert err.__cause__ is cause
        assert "cause" in err.to_dict()

    def test_str_is_json(self) -> None:
        payload = json.loads(str(BaseError("boom")))
        assert payload["message"] == "boom"

    def test_repr(self) -> None:
        assert repr(ConflictError("dup")) == "ConflictError(code='conflict', message='dup')"


class TestHierarchy:
    @pytest.mark.parametrize("cls", [ValidationError, ConflictError])
    def test_domain_subclasses(self, cls: type[BaseError]) -> None:
        assert issubclass(cls, DomainError)

    def test_not_found_is_domain(self) -> None:
        assert issubclass(NotFoundError, DomainError)

    @pytest.mark.parametrize("cls", [RouteNotFoundError, MethodNotAllowedError])
    def test_application_subclasses(self, cls: type[BaseError]) -> None:
        assert issubclass(cls, ApplicationError)


class TestSpecificErrors:
    def test_not_found_message_with_id(self) -> None:
        err = NotFoundError("customer", "42")
        assert err.message == "customer '42' not found"
        assert err.resource == "customer"
        assert err.identifier == "42"

    def test_not_found_message_without_id(self) -> None:
        assert NotFoundError("customer").message == "customer not found"

    def test_validation_errors_serialised(self) -> None:
        err = ValidationError("bad", errors=[{"field": "id"}])
        assert err.to_dict()["errors"] == [{"field": "id"}]

    def test_route_not_found(self) -> None:
        err = RouteNotFoundError("/nope")
        assert err.path == "/nope"
        assert err.code == "route_not_found"

    def test_method_not_allowed(self) -> None:
        err = MethodNotAllowedError("PATCH", "/pr")
        assert err.method == "PATCH"
        assert "PATCH" in err.message
