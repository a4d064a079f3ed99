"""Kernel – framework-agnostic building blocks."""

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
from mp_query.kernel.types import MISSING, normalize_id

__all__ = [
    "MISSING",
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "MethodNotAllowedError",
    "NotFoundError",
    "RouteNotFoundError",
    "ValidationError",
    "normalize_id",
]
