"""Application-layer errors — cross-cutting concerns at use-case level."""

from __future__ import annotations

from typing import Any

from mp_query.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class RouteNotFoundError(ApplicationError):
    """No endpoint is registered for the requested path."""

    default_code = "route_not_found"

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(f"No endpoint registered for '{path}'", **kwargs)
        self.path = path


class MethodNotAllowedError(ApplicationError):
    """The endpoint exists but does not support the HTTP method."""

    default_code = "method_not_allowed"

    def __init__(self, method: str, path: str, **kwargs: Any) -> None:
        super().__init__(f"Method {method} not allowed on '{path}'", **kwargs)
        self.method = method
        self.path = path


__all__ = [
    "ApplicationError",
    "MethodNotAllowedError",
    "RouteNotFoundError",
]
