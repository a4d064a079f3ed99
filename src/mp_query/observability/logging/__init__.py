"""Observability – structured logging helpers."""
from mp_query.observability.logging.factory import JsonLoggerFactory
from mp_query.observability.logging.processors import DropEmptyProcessor, get_logger

__all__ = [
    "DropEmptyProcessor",
    "JsonLoggerFactory",
    "get_logger",
]
