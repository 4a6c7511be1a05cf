"""
URL parsing helpers shared by the domain matcher and provider grammars.

Every helper here is total: inputs that are not strings, or that the
standard library refuses to split, come back as None instead of raising.
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult, parse_qs, unquote, urlencode, urlsplit

_HOST_LABEL_RE = re.compile(r"^[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?$")


def parse_url(url: object) -> SplitResult | None:
    """Split a URL, returning None unless it has a scheme and a hostname.

    Args:
        url: Arbitrary input. Non-strings are rejected.

    Returns:
        The SplitResult, or None for malformed input
        (e.g. "not-a-url", "youtube.com/watch?v=x", "http://[::1").
    """
    if not isinstance(url, str):
        return None
    url = url.strip()
    if not url:
        return None
    try:
        parsed = urlsplit(url)
        hostname = parsed.hostname
    except ValueError:
        return None
    if not parsed.scheme or not hostname:
        return None
    return parsed


def normalize_host(hostname: str) -> str:
    """Lower-case a hostname and strip one leading ``www.``."""
    return hostname.lower().removeprefix("www.")


def host_of(parsed: SplitResult) -> str:
    """Normalized hostname of an already-parsed URL."""
    return normalize_host(parsed.hostname or "")


def host_matches(host: str, domain: str) -> bool:
    """True when host is the domain itself or one of its subdomains."""
    return host == domain or host.endswith(f".{domain}")


def query_param(parsed: SplitResult, *names: str) -> str | None:
    """First non-empty value among the given query parameter names.

    Example:
        >>> query_param(urlsplit("https://x.com/?entryId=1_ab"), "entry_id", "entryId")
        '1_ab'
    """
    qs = parse_qs(parsed.query, keep_blank_values=True)
    for name in names:
        for value in qs.get(name, []):
            if value:
                return value
    return None


def path_segments(parsed: SplitResult) -> list[str]:
    """Non-empty, percent-decoded path segments, e.g. "/a//b%20c/" -> ["a", "b c"]."""
    return [unquote(part) for part in parsed.path.split("/") if part]


def with_query(base: str, params: dict[str, str]) -> str:
    """Append URL-encoded params to base, using ``&`` if base has a query.

    Params are emitted in insertion order; an empty dict returns base as-is.
    """
    if not params:
        return base
    separator = "&" if "?" in base else "?"
    return f"{base}{separator}{urlencode(params)}"


def is_host_label(value: str) -> bool:
    """True for a single DNS label such as "demo" or "abc-123"."""
    return bool(_HOST_LABEL_RE.match(value))


def is_hostname(value: str) -> bool:
    """True for a dotted hostname made only of valid DNS labels."""
    return bool(value) and all(is_host_label(label) for label in value.split("."))
