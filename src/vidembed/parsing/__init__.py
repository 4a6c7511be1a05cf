"""
URL parsing utilities.
"""

from vidembed.parsing.urls import (
    host_matches,
    host_of,
    is_host_label,
    is_hostname,
    normalize_host,
    parse_url,
    path_segments,
    query_param,
    with_query,
)

__all__ = [
    "parse_url",
    "normalize_host",
    "host_of",
    "host_matches",
    "is_host_label",
    "is_hostname",
    "query_param",
    "path_segments",
    "with_query",
]
