"""Application pagination – offset page primitives."""
from mp_query.application.pagination.page_request import DEFAULT_LIMIT, DEFAULT_PAGE, PageRequest
from mp_query.application.pagination.page import Page

__all__ = ["DEFAULT_LIMIT", "DEFAULT_PAGE", "Page", "PageRequest"]
