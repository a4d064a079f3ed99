"""Application mocks – MockRouter.

Dispatches ``(method, url, body)`` requests to registered
:class:`ListEndpoint` instances and returns ``(status, body)`` responses
shaped like a real backend's, so list screens and service code can run
against seeded data.

Routes per registered prefix::

    GET    /prefix?<query>        200  {"items", "data", "total", "page", "limit"}
    GET    /prefix/<id>           200  record            | 404
    POST   /prefix                201  created record    | 400 / 409
    PUT    /prefix/<id>           200  updated record    | 404
    DELETE /prefix/<id>           200  {"success": true} | 404
    POST   /prefix/<id>/<action>  200  {"success": true, "message", ...} | 404
"""
from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from typing import Any

from mp_query.application.mocks.endpoint import ListEndpoint
from mp_query.application.mocks.querystring import split_url
from mp_query.kernel.errors import (
    BaseError,
    ConflictError,
    MethodNotAllowedError,
    NotFoundError,
    RouteNotFoundError,
    ValidationError,
)
from mp_query.observability.logging import get_logger

logger = get_logger(__name__)

_STATUS_BY_ERROR: tuple[tuple[type[BaseError], int], ...] = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (RouteNotFoundError, 404),
    (MethodNotAllowedError, 405),
    (ConflictError, 409),
)


@dataclasses.dataclass(frozen=True)
class MockResponse:
    status: int
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def _status_for(exc: BaseError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 500


def _decode_body(body: str | bytes | Mapping[str, Any] | None) -> dict[str, Any]:
    if body is None:
        return {}
    if isinstance(body, Mapping):
        return dict(body)
    try:
        decoded = json.loads(body or "{}")
    except ValueError as exc:
        raise ValidationError("Request body is not valid JSON", cause=exc) from exc
    if not isinstance(decoded, dict):
        raise ValidationError("Request body must be a JSON object")
    return decoded


class MockRouter:
    """Route table of simulated endpoints keyed by path prefix."""

    def __init__(self) -> None:
        self._routes: dict[str, ListEndpoint] = {}

    def register(self, prefix: str, endpoint: ListEndpoint) -> None:
        self._routes["/" + prefix.strip("/")] = endpoint

    def routes(self) -> list[str]:
        return sorted(self._routes)

    def _resolve(self, path: str) -> tuple[ListEndpoint, str | None, str | None]:
        """Return the endpoint, record id and action name for *path*."""
        # longest prefix first so "/customer/type" wins over "/customer"
        for prefix in sorted(self._routes, key=len, reverse=True):
            if path == prefix:
                return self._routes[prefix], None, None
            if path.startswith(prefix + "/"):
                segments = path[len(prefix) + 1:].split("/")
                if len(segments) <= 2 and all(segments):
                    record_id, *action = segments
                    return self._routes[prefix], record_id, action[0] if action else None
        raise RouteNotFoundError(path)

    def handle(
        self,
        method: str,
        url: str,
        body: str | bytes | Mapping[str, Any] | None = None,
    ) -> MockResponse:
        method = method.upper()
        path, params = split_url(url)
        try:
            response = self._dispatch(method, path, params, body)
        except BaseError as exc:
            status = _status_for(exc)
            logger.info("mock.error", method=method, path=path, status=status, code=exc.code)
            return MockResponse(status, {"message": exc.message, "code": exc.code})
        logger.debug("mock.request", method=method, path=path, status=response.status)
        return response

    def _dispatch(
        self,
        method: str,
        path: str,
        params: dict[str, str],
        body: str | bytes | Mapping[str, Any] | None,
    ) -> MockResponse:
        endpoint, record_id, action = self._resolve(path)

        if record_id is None:
            if method == "GET":
                return MockResponse(200, endpoint.list(params).to_dict())
            if method == "POST":
                return MockResponse(201, endpoint.create(_decode_body(body)))
            raise MethodNotAllowedError(method, path)

        if action is not None:
            if method != "POST":
                raise MethodNotAllowedError(method, path)
            return MockResponse(200, endpoint.run_action(record_id, action, _decode_body(body)))

        if method == "GET":
            return MockResponse(200, endpoint.detail(record_id))
        if method == "PUT":
            return MockResponse(200, endpoint.update(record_id, _decode_body(body)))
        if method == "DELETE":
            endpoint.delete(record_id)
            return MockResponse(200, {"success": True})
        raise MethodNotAllowedError(method, path)


__all__ = ["MockResponse", "MockRouter"]
