"""Shared fixtures for unit tests."""

import pytest

from url_suffix.config import reset_config
from url_suffix.matching import DomainMatcher
from url_suffix.normalization import HostNormalizer
from url_suffix.rules import parse_rules, reset_rule_table

SAMPLE_RULES = """\
// ===BEGIN ICANN DOMAINS===

// com : https://en.wikipedia.org/wiki/.com
com

// uk : https://en.wikipedia.org/wiki/.uk
uk
co.uk
org.uk

// ck : https://en.wikipedia.org/wiki/.ck
*.ck
!www.ck

// jp
jp
co.jp
*.kawasaki.jp
!city.kawasaki.jp

// test-only wildcard tree
*.x
!a.x
*.nested
plain.nested

// ===END ICANN DOMAINS===
"""


@pytest.fixture(autouse=True)
def clean_globals():
    """Reset process-wide config and rule table around each test."""
    reset_config()
    reset_rule_table()
    yield
    reset_config()
    reset_rule_table()


@pytest.fixture
def sample_rules_text():
    return SAMPLE_RULES


@pytest.fixture
def rule_table():
    """Rule table parsed from the sample list."""
    return parse_rules(SAMPLE_RULES, source="sample")


@pytest.fixture
def matcher(rule_table):
    return DomainMatcher(rule_table, cache_size=128)


@pytest.fixture
def hosts(matcher):
    return HostNormalizer(matcher)
