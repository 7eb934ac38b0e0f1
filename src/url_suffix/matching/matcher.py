"""
Public suffix matching.

Resolves the public suffix of a hostname against a RuleTable, and
optionally extends it by N labels to get the registrable base domain:

    matcher = DomainMatcher(table)
    matcher.public_suffix("www.bbc.co.uk")                      # co.uk
    matcher.public_suffix("www.bbc.co.uk", additional_parts=1)  # bbc.co.uk
"""

import logging
from functools import lru_cache
from typing import Optional

from url_suffix.config import get_config
from url_suffix.rules import RuleTable, get_rule_table

logger = logging.getLogger(__name__)


class DomainMatcher:
    """
    Public suffix resolver over an immutable RuleTable.

    Holds no state besides the table and a memo of resolved hosts, so one
    instance may be shared freely between threads.
    """

    def __init__(self, table: Optional[RuleTable], cache_size: Optional[int] = None):
        """
        Initialize matcher.

        Args:
            table: Rule table, or None if the rules could not be loaded
            cache_size: LRU cache size for resolved hosts (defaults to config)
        """
        self.table = table
        if cache_size is None:
            cache_size = get_config().rules.cache_size
        self._resolve = lru_cache(maxsize=cache_size)(self._resolve_uncached)

        if table is None:
            logger.warning("DomainMatcher created without suffix rules; all lookups return None")

    @classmethod
    def from_default(cls) -> "DomainMatcher":
        """Create a matcher over the process-wide rule table."""
        return cls(get_rule_table())

    @property
    def available(self) -> bool:
        """Whether suffix rules are loaded."""
        return self.table is not None

    def public_suffix(self, host: str, additional_parts: int = 0) -> Optional[str]:
        """
        Resolve the public suffix of a host.

        Args:
            host: Hostname, e.g. `www.bbc.co.uk`
            additional_parts: Number of labels to keep in front of the suffix

        Returns:
            The suffix (additional_parts=0), the suffix extended by up to
            additional_parts labels, or None if nothing matched

        Raises:
            ValueError: If additional_parts is negative
        """
        if additional_parts < 0:
            raise ValueError(f"additional_parts must be >= 0, got {additional_parts}")
        if not isinstance(host, str):
            return None
        return self._resolve(host, additional_parts)

    def base_domain(self, host: str, additional_parts: int = 1) -> Optional[str]:
        """Resolve the registrable domain (suffix plus additional_parts labels)."""
        return self.public_suffix(host, additional_parts=additional_parts)

    def cache_info(self):
        """Expose the resolver's LRU cache statistics."""
        return self._resolve.cache_info()

    def _resolve_uncached(self, host: str, additional_parts: int) -> Optional[str]:
        if not host:
            return None

        # Degenerate `.` host
        if host.rstrip("/") == ".":
            return ""

        suffix = self._match_suffix(host)
        logger.debug(f"Suffix of {host!r}: {suffix!r}")

        if additional_parts == 0:
            return suffix

        if suffix is None:
            return None

        return self._extend(host, suffix, additional_parts)

    def _match_suffix(self, host: str) -> Optional[str]:
        """
        Walk from the full host toward the root, stopping at the first
        decisive rule.

        For `test.bbc.co.uk` the candidates are `test.bbc.co.uk`,
        `bbc.co.uk`, `co.uk` and `uk`. On a hit:
        - a wildcard with a previous candidate matches that candidate
        - a normal rule (or any rule on the last label) matches the candidate
        - an exception matches the remainder after the candidate's first label
        """
        if self.table is None:
            return None

        labels = host.split(".")
        previous: Optional[str] = None
        current = host

        for offset in range(len(labels)):
            next_dot = ".".join(labels[offset + 1 :]) if offset + 1 < len(labels) else None

            entry = self.table.get(current)
            if entry is not None:
                if entry.is_wildcard and previous is not None:
                    return previous
                if entry.is_normal or next_dot is None:
                    return current
                if entry.is_exception:
                    return next_dot

            previous = current
            if next_dot is None:
                break
            current = next_dot

        return None

    @staticmethod
    def _extend(host: str, suffix: str, additional_parts: int) -> str:
        """Prefix suffix with the last additional_parts labels of the rest of host."""
        remainder = host[: -len(suffix)] if suffix and host.endswith(suffix) else host
        labels = [label for label in remainder.split(".") if label]
        parts = ".".join(labels[max(0, len(labels) - additional_parts) :])
        return ".".join([parts, suffix])
