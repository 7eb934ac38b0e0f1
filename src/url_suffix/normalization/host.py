"""
Host normalization helpers built on the domain matcher.

Implements:
- IPv6 literal detection (literals never enter suffix resolution)
- base (registrable) domain and second level domain extraction
- common mobile/www prefix stripping
- canonical `scheme://host/` origins
"""

import logging
import re
from typing import Optional

from url_suffix.matching import DomainMatcher

logger = logging.getLogger(__name__)

# One leading www./mobile./m. label, case-sensitive
SUBDOMAIN_PREFIX_RE = re.compile(r"^(www|mobile|m)\.")


def is_ipv6_literal(host: Optional[str]) -> bool:
    """Whether host is an IPv6 literal (bracketed or not)."""
    return host is not None and ":" in host


def strip_subdomain_prefix(host: str) -> str:
    """Remove a single leading `www.`, `mobile.` or `m.` label."""
    return SUBDOMAIN_PREFIX_RE.sub("", host, count=1)


class HostNormalizer:
    """
    Derive display and grouping forms of a hostname.

    Usage:
        normalizer = HostNormalizer(DomainMatcher(table))
        normalizer.base_domain("www.bbc.co.uk")       # bbc.co.uk
        normalizer.second_level_domain("m.foo.com")   # foo
        normalizer.canonical_origin("https", "m.foo.com")  # https://foo.com/
    """

    def __init__(self, matcher: Optional[DomainMatcher] = None):
        """
        Initialize host normalizer.

        Args:
            matcher: Domain matcher (defaults to one over the process-wide rules)
        """
        self.matcher = matcher if matcher is not None else DomainMatcher.from_default()

    def public_suffix(self, host: Optional[str]) -> Optional[str]:
        """Public suffix of host, or None for IPv6 literals and unknown hosts."""
        if not host or is_ipv6_literal(host):
            return None
        return self.matcher.public_suffix(host)

    def base_domain(self, host: Optional[str], additional_parts: int = 1) -> Optional[str]:
        """
        Registrable domain of host: the public suffix plus one label.

        Bare hostnames (no dot) are their own base domain. IPv6 literals
        have none.

        Args:
            host: Hostname
            additional_parts: Labels to keep in front of the suffix

        Returns:
            Base domain, or None
        """
        if not host or is_ipv6_literal(host):
            return None

        if "." not in host:
            return host

        return self.matcher.public_suffix(host, additional_parts=additional_parts)

    def normalized_host(self, host: Optional[str]) -> Optional[str]:
        """Host with one leading www./mobile./m. label removed; None if empty."""
        if not host:
            return None
        return strip_subdomain_prefix(host)

    def second_level_domain(self, host: str) -> str:
        """
        Second level domain of host, without subdomains or public suffix.

        E.g. `m.foo.com` -> `foo`. Falls back to the normalized host, then to
        the raw host, when the suffix or base domain cannot be resolved.
        """
        public_suffix = self.public_suffix(host)
        base_domain = self.base_domain(host)

        if public_suffix is None or base_domain is None:
            return self.normalized_host(host) or host

        return base_domain.replace(f".{public_suffix}", "")

    def canonical_origin(self, scheme: str, host: str) -> str:
        """
        Build `scheme://normalized_host/`.

        Returns host unchanged if it normalizes to nothing.
        """
        normalized = self.normalized_host(host)
        if normalized is None:
            return host

        if is_ipv6_literal(normalized) and not normalized.startswith("["):
            normalized = f"[{normalized}]"

        return f"{scheme}://{normalized}/"
