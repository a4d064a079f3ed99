"""Observability – structured logging."""
from mp_query.observability.logging import DropEmptyProcessor, JsonLoggerFactory, get_logger

__all__ = ["DropEmptyProcessor", "JsonLoggerFactory", "get_logger"]
