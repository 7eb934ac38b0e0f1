"""
Host and URL normalization utilities.

Handles IPv6 detection, base/second level domains and canonical origins.
"""

from url_suffix.normalization.host import (
    HostNormalizer,
    is_ipv6_literal,
    strip_subdomain_prefix,
)
from url_suffix.normalization.url_normalizer import URLDescription, URLNormalizer

__all__ = [
    "HostNormalizer",
    "is_ipv6_literal",
    "strip_subdomain_prefix",
    "URLDescription",
    "URLNormalizer",
]
