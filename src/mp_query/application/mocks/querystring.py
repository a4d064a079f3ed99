"""Application mocks – query-string translation into QueryParams."""
from __future__ import annotations

from urllib.parse import parse_qsl, urlsplit


def parse_query_string(query: str) -> dict[str, str]:
    """Translate ``"a=1&b=&a=2"`` into ``{"a": "2", "b": ""}``.

    Blank values are kept (they mean "no filter" to the engine) and the last
    occurrence of a repeated key wins.
    """
    return dict(parse_qsl(query.lstrip("?"), keep_blank_values=True))


def split_url(url: str) -> tuple[str, dict[str, str]]:
    """Split a request URL into its normalized path and parsed query."""
    parts = urlsplit(url)
    path = "/" + parts.path.strip("/")
    return path, parse_query_string(parts.query)


__all__ = ["parse_query_string", "split_url"]
