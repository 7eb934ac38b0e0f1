"""
Internal wrapper URLs served from http://localhost.

Reader mode pages, error pages and about pages wrap or stand in for a real
URL. These helpers recognize them and recover the wrapped URL:

    is_reader_mode_url("http://localhost:6571/reader-mode/page?url=...")
    original_url_from_error_url("http://localhost/errors/error.html?url=...")
    about_component("http://localhost:1234/about/home/#panel=0")  # home
"""

import logging
from typing import Optional
from urllib.parse import unquote

from url_suffix.wrappers.urls import get_query, query_items, split_url, strip_credentials

logger = logging.getLogger(__name__)

INTERNAL_SCHEME = "http"
INTERNAL_HOST = "localhost"
READER_MODE_PATH = "/reader-mode/page"
ERROR_PAGE_PATH = "/errors/error.html"
ABOUT_PATH_PREFIX = "/about/"


def _internal_path(url: str) -> Optional[str]:
    """Path of an http://localhost URL (trailing slash dropped), else None."""
    parts = split_url(url)
    if parts is None or parts.scheme != INTERNAL_SCHEME or parts.hostname != INTERNAL_HOST:
        return None

    path = parts.path
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


def _encode_alphanumeric(value: str) -> str:
    """Percent-encode everything except ASCII letters and digits."""
    return "".join(
        ch if ch.isascii() and ch.isalnum() else "".join(f"%{b:02X}" for b in ch.encode("utf-8"))
        for ch in value
    )


# Reader mode


def is_reader_mode_url(url: str) -> bool:
    return _internal_path(url) == READER_MODE_PATH


def decode_reader_mode_url(url: str) -> Optional[str]:
    """
    Recover the page URL wrapped by a reader mode URL.

    The wrapper must carry exactly one query item; its value is the page URL.
    `+` is kept literally, as in any other URL query value.
    """
    if not is_reader_mode_url(url):
        return None

    items = query_items(url)
    if len(items) != 1:
        logger.debug(f"Reader mode URL with {len(items)} query items: {url}")
        return None

    return items[0][1]


def encode_reader_mode_url(url: str, base_reader_mode_url: str) -> str:
    """Wrap url as `base_reader_mode_url?url=<encoded url>`."""
    return f"{base_reader_mode_url}?url={_encode_alphanumeric(url)}"


# Error pages


def is_error_page_url(url: str) -> bool:
    return _internal_path(url) == ERROR_PAGE_PATH


def original_url_from_error_url(url: str) -> Optional[str]:
    """Value of the first `url` query item, if any (None for a bare `url`)."""
    for name, value in query_items(url):
        if name == "url":
            return value
    return None


# About pages


def about_component(url: str) -> Optional[str]:
    """
    Path after `/about/` for an about page URL.

    E.g. `home` for `http://localhost:1234/about/home/#panel=0`.
    """
    path = _internal_path(url)
    if path is None or not path.startswith(ABOUT_PATH_PREFIX):
        return None
    return path[len(ABOUT_PATH_PREFIX) :]


def is_about_url(url: str) -> bool:
    return about_component(url) is not None


def is_about_home_url(url: str) -> bool:
    """Whether url is about:home, directly or wrapped in an error page."""
    wrapped = get_query(url).get("url")
    if wrapped is not None and is_error_page_url(url):
        return about_component(unquote(wrapped)) == "home"
    return about_component(url) == "home"


def display_url(url: str) -> Optional[str]:
    """
    The URL to show the user for url.

    Reader mode and error pages show the page they wrap, credentials are
    never shown, and about pages have no display URL.
    """
    if is_reader_mode_url(url):
        decoded = decode_reader_mode_url(url)
        return strip_credentials(decoded) if decoded is not None else None

    if is_error_page_url(url):
        original = original_url_from_error_url(url)
        return display_url(original) if original is not None else None

    if not is_about_url(url):
        return strip_credentials(url)

    return None
