"""
Suffix rule table.

Parses public suffix list data and holds it for the process lifetime.
"""

from url_suffix.rules.loader import (
    RuleTableLoader,
    default_suffix_list_path,
    get_rule_table,
    init_rule_table,
    load_rule_table,
    read_suffix_list,
    reset_rule_table,
)
from url_suffix.rules.table import (
    RuleEntry,
    RuleKind,
    RuleTable,
    RuleTableError,
    RuleTableUnavailableError,
    parse_rules,
)

__all__ = [
    "RuleEntry",
    "RuleKind",
    "RuleTable",
    "RuleTableError",
    "RuleTableUnavailableError",
    "parse_rules",
    "RuleTableLoader",
    "default_suffix_list_path",
    "get_rule_table",
    "init_rule_table",
    "load_rule_table",
    "read_suffix_list",
    "reset_rule_table",
]
