"""
Small URL string transforms: credential stripping, query helpers and
display strings.
"""

import logging
from typing import Optional
from urllib.parse import SplitResult, unquote, urlencode, urlsplit, urlunsplit

logger = logging.getLogger(__name__)


def split_url(url: str) -> Optional[SplitResult]:
    """urlsplit() that returns None for unparseable URLs (e.g. unbalanced `[`)."""
    try:
        return urlsplit(url)
    except ValueError as e:
        logger.debug(f"Unparseable URL {url!r}: {e}")
        return None


def query_items(url: str) -> list[tuple[str, Optional[str]]]:
    """
    Split a URL's query into (name, value) items in order.

    Names and values are percent-decoded; `+` is kept as-is. An item
    without `=` has the value None.
    """
    parts = split_url(url)
    if parts is None or not parts.query:
        return []

    items: list[tuple[str, Optional[str]]] = []
    for pair in parts.query.split("&"):
        name, sep, value = pair.partition("=")
        items.append((unquote(name), unquote(value) if sep else None))
    return items


def strip_credentials(url: str) -> str:
    """
    Remove the user and password components of a URL.

    Scheme, host, port, path, query and fragment are left untouched; a URL
    without credentials, or one that cannot be parsed, is returned as-is.
    """
    parts = split_url(url)
    if parts is None or "@" not in parts.netloc:
        return url

    hostinfo = parts.netloc.rpartition("@")[2]
    return urlunsplit((parts.scheme, hostinfo, parts.path, parts.query, parts.fragment))


def with_query_params(url: str, params: list[tuple[str, str]]) -> str:
    """Append query items to a URL, keeping the existing query as written."""
    parts = split_url(url)
    if parts is None:
        return url

    extra = urlencode(params)
    query = f"{parts.query}&{extra}" if parts.query else extra
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def with_query_param(url: str, name: str, value: str) -> str:
    """Append a single query item to a URL."""
    return with_query_params(url, [(name, value)])


def get_query(url: str) -> dict[str, str]:
    """
    Split a URL's query into a dict of raw (still percent-encoded) values.

    Items without `=` are skipped; repeated keys keep the last value.
    """
    results: dict[str, str] = {}
    parts = split_url(url)
    if parts is None or not parts.query:
        return results

    for pair in parts.query.split("&"):
        kv = pair.split("=")
        if len(kv) > 1:
            results[kv[0]] = kv[1]

    return results


def absolute_display_string(url: str) -> str:
    """
    Shorten a URL for display.

    Drops the trailing slash of an empty http(s) path and the `http://`
    prefix; other schemes are shown in full.
    """
    parts = split_url(url)
    if parts is not None and parts.scheme in ("http", "https") and parts.path in ("", "/") and url.endswith("/"):
        url = url[:-1]

    if url.startswith("http://"):
        return url[len("http://") :]
    return url
