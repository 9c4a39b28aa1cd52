"""URL query-string protocol for sharing an assessment."""

from .query import (
    QueryParameters,
    build_query_string,
    build_share_url,
    parse_query,
    profile_query_string,
    resolve_query,
)

__all__ = [
    "QueryParameters",
    "build_query_string",
    "build_share_url",
    "parse_query",
    "profile_query_string",
    "resolve_query",
]
