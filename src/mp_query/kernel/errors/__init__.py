"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   ├── NotFoundError
    │   └── ConflictError
    └── ApplicationError     (application.py)
        ├── RouteNotFoundError
        ├── MethodNotAllowedError
        └── ConfigError      (mp_query.config.validation)

The query engine itself raises none of these; it is total over its input.
"""

from mp_query.kernel.errors.application import (
    ApplicationError,
    MethodNotAllowedError,
    RouteNotFoundError,
)
from mp_query.kernel.errors.base import BaseError
from mp_query.kernel.errors.domain import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "MethodNotAllowedError",
    "NotFoundError",
    "RouteNotFoundError",
    "ValidationError",
]
