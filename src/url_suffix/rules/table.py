"""
Suffix rule table.

Parses public-suffix-list formatted text into an immutable mapping from
domain label to rule entry:
- `//` comment lines and blank lines are skipped
- `*.example` lines are wildcard rules keyed by `example`
- `!www.example` lines are exception rules keyed by `www.example`
- everything else is a plain rule keyed by the line itself
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

import xxhash

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "//"
WILDCARD_PREFIX = "*."
EXCEPTION_PREFIX = "!"


class RuleTableError(Exception):
    """Base error for rule table problems."""


class RuleTableUnavailableError(RuleTableError):
    """The suffix list resource could not be read."""


class RuleKind(Enum):
    """Precedence class of a suffix rule."""

    NORMAL = "normal"
    WILDCARD = "wildcard"
    EXCEPTION = "exception"


@dataclass(frozen=True)
class RuleEntry:
    """
    One rule from the suffix list.

    Attributes:
        label: Domain string with the `*.` / `!` marker removed
        kind: Rule precedence class
    """

    label: str
    kind: RuleKind

    @property
    def is_wildcard(self) -> bool:
        return self.kind is RuleKind.WILDCARD

    @property
    def is_exception(self) -> bool:
        return self.kind is RuleKind.EXCEPTION

    @property
    def is_normal(self) -> bool:
        """True for plain rules and for wildcards (a wildcard base is itself a suffix)."""
        return self.kind is not RuleKind.EXCEPTION

    @classmethod
    def from_line(cls, line: str) -> "RuleEntry":
        """
        Build an entry from a single (non-comment) list line.

        Args:
            line: Stripped rule line, e.g. `*.ck`, `!www.ck`, `co.uk`

        Returns:
            RuleEntry keyed by the unmarked label
        """
        # `!` takes precedence over `*.`
        if line.startswith(EXCEPTION_PREFIX):
            return cls(label=line[len(EXCEPTION_PREFIX) :], kind=RuleKind.EXCEPTION)
        if line.startswith(WILDCARD_PREFIX):
            return cls(label=line[len(WILDCARD_PREFIX) :], kind=RuleKind.WILDCARD)
        return cls(label=line, kind=RuleKind.NORMAL)


class RuleTable(Mapping):
    """
    Read-only mapping of label -> RuleEntry.

    Built once by parse_rules() and never mutated afterwards, so a single
    instance can be shared between threads without locking.
    """

    def __init__(
        self,
        entries: dict[str, RuleEntry],
        checksum: str = "",
        source: str = "<memory>",
    ):
        """
        Initialize rule table.

        Args:
            entries: Mapping of label to entry (copied)
            checksum: xxh3_64 hex digest of the source text
            source: Human-readable origin of the rules (path or `<memory>`)
        """
        self._entries = MappingProxyType(dict(entries))
        self.checksum = checksum
        self.source = source

    def __getitem__(self, label: str) -> RuleEntry:
        return self._entries[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"RuleTable(source={self.source!r}, entries={len(self)}, "
            f"checksum={self.checksum!r})"
        )

    def count_by_kind(self) -> dict[RuleKind, int]:
        """Count entries per rule kind."""
        counts = {kind: 0 for kind in RuleKind}
        for entry in self._entries.values():
            counts[entry.kind] += 1
        return counts


def iter_rule_lines(raw_text: str) -> Iterator[str]:
    """Yield rule lines, skipping blanks and `//` comments."""
    for raw in raw_text.splitlines():
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        yield line


def parse_rules(raw_text: str, source: str = "<memory>") -> RuleTable:
    """
    Parse public suffix list text into a RuleTable.

    Later duplicate labels overwrite earlier ones.

    Args:
        raw_text: Contents of a public suffix list file
        source: Origin of the text, kept for diagnostics

    Returns:
        Immutable RuleTable
    """
    entries: dict[str, RuleEntry] = {}
    for line in iter_rule_lines(raw_text):
        entry = RuleEntry.from_line(line)
        entries[entry.label] = entry

    checksum = f"{xxhash.xxh3_64(raw_text.encode('utf-8')).intdigest():016x}"
    table = RuleTable(entries, checksum=checksum, source=source)

    logger.debug(f"Parsed {len(table)} suffix rules from {source}")

    return table
