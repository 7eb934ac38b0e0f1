"""
url-suffix: public-suffix-aware host resolution.

Resolves public suffixes and registrable domains from public suffix list
rules, normalizes hosts, and decodes internal wrapper URLs.
"""

from url_suffix.matching import DomainMatcher
from url_suffix.normalization import (
    HostNormalizer,
    URLDescription,
    URLNormalizer,
    is_ipv6_literal,
)
from url_suffix.rules import (
    RuleEntry,
    RuleKind,
    RuleTable,
    RuleTableError,
    RuleTableUnavailableError,
    get_rule_table,
    init_rule_table,
    load_rule_table,
    parse_rules,
)

__version__ = "0.1.0"

__all__ = [
    "DomainMatcher",
    "HostNormalizer",
    "URLDescription",
    "URLNormalizer",
    "is_ipv6_literal",
    "RuleEntry",
    "RuleKind",
    "RuleTable",
    "RuleTableError",
    "RuleTableUnavailableError",
    "get_rule_table",
    "init_rule_table",
    "load_rule_table",
    "parse_rules",
]
