"""
URI construction.
"""

import re
from typing import List, Mapping, Optional, Tuple
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from .exceptions import UriSyntaxError

MULTI_VALUE_DELIMITER = "&"

# RFC 3986 pchar plus "/"; "%" is kept so encoded input is not escaped twice
_PATH_SAFE = "/%:@!$&'()*+,;=-._~"

_STRAY_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _escape_stray_percent(text: str) -> str:
    """Escape "%" unless it already starts a percent-encoded octet."""
    return _STRAY_PERCENT.sub("%25", text)


def split_multi_value(value: str) -> List[str]:
    """
    Split a query value on the multi-value delimiter.

    Trailing empty tokens are dropped, so ``"3&4&"`` gives ``["3", "4"]``.
    """
    tokens = value.split(MULTI_VALUE_DELIMITER)
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def _check_host(host: Optional[str]) -> str:
    if not isinstance(host, str) or not host:
        raise UriSyntaxError("Host is required")
    if any(ch.isspace() for ch in host):
        raise UriSyntaxError(f"Invalid host: {host!r}")

    try:
        parts = urlsplit(f"//{host}")
        parts.port
    except ValueError as e:
        raise UriSyntaxError(f"Invalid host {host!r}: {e}") from e

    if parts.netloc != host or parts.path or parts.query or parts.fragment:
        raise UriSyntaxError(f"Invalid host: {host!r}")
    if "@" in parts.netloc or not parts.hostname:
        raise UriSyntaxError(f"Invalid host: {host!r}")
    return host


def _query_pairs(query_params: Optional[Mapping[str, str]]) -> List[Tuple[str, str]]:
    pairs: List[Tuple[str, str]] = []
    if not query_params:
        return pairs

    for key, value in query_params.items():
        if not isinstance(key, str):
            raise UriSyntaxError(f"Query parameter name must be a string, got {key!r}")
        if not isinstance(value, str):
            raise UriSyntaxError(f"Query parameter {key!r} must have a string value, got {value!r}")

        if MULTI_VALUE_DELIMITER in value:
            tokens = split_multi_value(value)
        else:
            tokens = [value]
        key = _escape_stray_percent(key)
        pairs.extend((key, _escape_stray_percent(token)) for token in tokens)
    return pairs


def build_uri(
    host: str,
    path: Optional[str],
    query_params: Optional[Mapping[str, str]] = None,
    scheme: str = "https",
) -> str:
    """
    Compose host, path and query parameters into a URI.

    A query value containing ``&`` becomes one occurrence of its key per
    token, in order. ``None`` or empty ``query_params`` gives no query string.

    Args:
        host: Host, optionally with port (e.g. "api.example.com")
        path: Endpoint path (e.g. "/your/endpoint/path")
        query_params: Mapping of query parameter names to values
        scheme: "https" or "http"

    Returns:
        The URI as a string

    Raises:
        UriSyntaxError: On a malformed host or query parameter

    Examples:
        >>> build_uri("api.test.com", "/endpoint", {"test3": "3&4&5"})
        'https://api.test.com/endpoint?test3=3&test3=4&test3=5'
    """
    host = _check_host(host)

    path = quote(_escape_stray_percent(path or ""), safe=_PATH_SAFE)
    if path and not path.startswith("/"):
        path = "/" + path

    query = urlencode(_query_pairs(query_params), safe="%", quote_via=quote)
    return urlunsplit((scheme, host, path, query, ""))
