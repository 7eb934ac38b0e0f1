"""
Wrapper URL helpers.

Recognizes reader mode, error page and about page URLs, and strips
credentials for display.
"""

from url_suffix.wrappers.internal_pages import (
    about_component,
    decode_reader_mode_url,
    display_url,
    encode_reader_mode_url,
    is_about_home_url,
    is_about_url,
    is_error_page_url,
    is_reader_mode_url,
    original_url_from_error_url,
)
from url_suffix.wrappers.urls import (
    absolute_display_string,
    get_query,
    strip_credentials,
    with_query_param,
    with_query_params,
)

__all__ = [
    "about_component",
    "decode_reader_mode_url",
    "display_url",
    "encode_reader_mode_url",
    "is_about_home_url",
    "is_about_url",
    "is_error_page_url",
    "is_reader_mode_url",
    "original_url_from_error_url",
    "absolute_display_string",
    "get_query",
    "strip_credentials",
    "with_query_param",
    "with_query_params",
]
