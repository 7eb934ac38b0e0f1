"""Unit tests for suffix rule parsing."""

import pytest

from url_suffix.rules import RuleEntry, RuleKind, RuleTable, parse_rules


class TestRuleEntry:
    """Test suite for RuleEntry."""

    def test_plain_line(self):
        entry = RuleEntry.from_line("co.uk")
        assert entry.label == "co.uk"
        assert entry.kind is RuleKind.NORMAL
        assert entry.is_normal
        assert not entry.is_wildcard
        assert not entry.is_exception

    def test_wildcard_line(self):
        """Test `*.` is stripped and the rule still counts as normal."""
        entry = RuleEntry.from_line("*.ck")
        assert entry.label == "ck"
        assert entry.is_wildcard
        assert entry.is_normal
        assert not entry.is_exception

    def test_exception_line(self):
        entry = RuleEntry.from_line("!www.ck")
        assert entry.label == "www.ck"
        assert entry.is_exception
        assert not entry.is_normal
        assert not entry.is_wildcard

    def test_exception_wins_over_wildcard(self):
        """Test a line carrying both markers is an exception."""
        entry = RuleEntry.from_line("!*.ck")
        assert entry.kind is RuleKind.EXCEPTION
        assert entry.label == "*.ck"

    def test_immutability(self):
        entry = RuleEntry.from_line("com")
        with pytest.raises(Exception):  # FrozenInstanceError
            entry.label = "org"


class TestParseRules:
    """Test suite for parse_rules."""

    def test_comments_and_blank_lines_skipped(self, rule_table):
        assert all(not label.startswith("//") for label in rule_table)
        assert "" not in rule_table

    def test_keys_have_markers_removed(self, rule_table):
        assert rule_table["ck"].is_wildcard
        assert rule_table["www.ck"].is_exception
        assert rule_table["co.uk"].kind is RuleKind.NORMAL
        assert "*.ck" not in rule_table
        assert "!www.ck" not in rule_table

    def test_entry_count(self, rule_table):
        # com uk co.uk org.uk ck www.ck jp co.jp kawasaki.jp city.kawasaki.jp
        # x a.x nested plain.nested
        assert len(rule_table) == 14

    def test_count_by_kind(self, rule_table):
        counts = rule_table.count_by_kind()
        assert counts[RuleKind.WILDCARD] == 4
        assert counts[RuleKind.EXCEPTION] == 3
        assert counts[RuleKind.NORMAL] == 7

    def test_last_duplicate_wins(self):
        table = parse_rules("ck\n*.ck\n")
        assert len(table) == 1
        assert table["ck"].is_wildcard

    def test_crlf_lines(self):
        """Test Windows line endings do not leak into keys."""
        table = parse_rules("// comment\r\ncom\r\n*.ck\r\n")
        assert set(table) == {"com", "ck"}

    def test_case_kept_as_loaded(self):
        table = parse_rules("Example.COM\n")
        assert "Example.COM" in table
        assert "example.com" not in table

    def test_empty_text(self):
        table = parse_rules("")
        assert len(table) == 0

    def test_checksum_and_source(self, sample_rules_text):
        table = parse_rules(sample_rules_text, source="sample")
        again = parse_rules(sample_rules_text)

        assert table.source == "sample"
        assert len(table.checksum) == 16
        assert table.checksum == again.checksum
        assert parse_rules("com\n").checksum != table.checksum

    def test_table_is_read_only(self, rule_table):
        with pytest.raises(TypeError):
            rule_table["example"] = RuleEntry.from_line("example")

    def test_table_copies_input(self):
        entries = {"com": RuleEntry.from_line("com")}
        table = RuleTable(entries)
        entries["org"] = RuleEntry.from_line("org")

        assert "org" not in table
