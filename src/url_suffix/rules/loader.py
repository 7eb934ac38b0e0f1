"""
Suffix list loading with lazy, once-only construction.

The rule table is read from a public suffix list file the first time it is
needed and shared for the rest of the process. If the resource cannot be
read the table is treated as absent and lookups degrade to "no suffix".
"""

import logging
import threading
from importlib import resources
from pathlib import Path
from typing import Optional

import zstandard as zstd

from url_suffix.config import get_config
from url_suffix.rules.table import RuleTable, RuleTableUnavailableError, parse_rules

logger = logging.getLogger(__name__)

BUNDLED_PACKAGE = "publicsuffixlist"
BUNDLED_FILENAME = "public_suffix_list.dat"


def default_suffix_list_path() -> Path:
    """
    Resolve the suffix list to use when no path is given.

    The configured `RULES_SUFFIX_LIST_PATH` wins; otherwise the list bundled
    with the publicsuffixlist distribution is used.
    """
    configured = get_config().rules.suffix_list_path
    if configured is not None:
        return Path(configured)

    try:
        return Path(str(resources.files(BUNDLED_PACKAGE) / BUNDLED_FILENAME))
    except ModuleNotFoundError as e:
        raise RuleTableUnavailableError(
            f"No suffix list configured and {BUNDLED_PACKAGE} is not installed"
        ) from e


def read_suffix_list(path: Path | str) -> str:
    """
    Read a suffix list file as text.

    Files ending in `.zst` are zstd-decompressed first.

    Args:
        path: Path to the suffix list

    Returns:
        Decoded UTF-8 text

    Raises:
        RuleTableUnavailableError: If the file is missing, unreadable or undecodable
    """
    path = Path(path)

    try:
        data = path.read_bytes()
        if path.suffix == ".zst":
            decompressor = zstd.ZstdDecompressor()
            data = decompressor.decompress(data)
        return data.decode("utf-8")
    except FileNotFoundError as e:
        raise RuleTableUnavailableError(f"Suffix list not found: {path}") from e
    except (OSError, zstd.ZstdError, UnicodeDecodeError) as e:
        raise RuleTableUnavailableError(f"Failed to read suffix list {path}: {e}") from e


def load_rule_table(path: Optional[Path | str] = None) -> RuleTable:
    """
    Load and parse a suffix list into a RuleTable.

    Args:
        path: Suffix list path (defaults to default_suffix_list_path())

    Returns:
        Parsed RuleTable

    Raises:
        RuleTableUnavailableError: If the resource cannot be read
    """
    if path is None:
        path = default_suffix_list_path()

    logger.info(f"Loading suffix rules from {path}")

    table = parse_rules(read_suffix_list(path), source=str(path))
    counts = table.count_by_kind()

    logger.info(
        f"Loaded {len(table)} suffix rules "
        f"({', '.join(f'{kind.value}={n}' for kind, n in counts.items())}), "
        f"checksum={table.checksum}"
    )

    return table


class RuleTableLoader:
    """
    Lazily loaded, thread-safe handle to a RuleTable.

    The first call to get() parses the resource under a lock; every later
    call returns the cached result without locking. A failed load is cached
    too, as None.
    """

    def __init__(self, path: Optional[Path | str] = None):
        """
        Initialize the loader.

        Args:
            path: Suffix list path (defaults to default_suffix_list_path())
        """
        self.path = Path(path) if path is not None else None
        self._lock = threading.Lock()
        self._loaded = False
        self._table: Optional[RuleTable] = None

    @property
    def loaded(self) -> bool:
        """Whether a load has been attempted."""
        return self._loaded

    def get(self) -> Optional[RuleTable]:
        """
        Get the rule table, loading it on first use.

        Returns:
            RuleTable, or None if the resource could not be loaded
        """
        if self._loaded:
            return self._table

        with self._lock:
            if not self._loaded:
                try:
                    self._table = load_rule_table(self.path)
                except RuleTableUnavailableError as e:
                    logger.error(f"Suffix rules unavailable, resolution disabled: {e}")
                    self._table = None
                self._loaded = True

        return self._table

    def require(self) -> RuleTable:
        """
        Get the rule table, raising if it could not be loaded.

        Raises:
            RuleTableUnavailableError: If the table is absent
        """
        table = self.get()
        if table is None:
            raise RuleTableUnavailableError(
                f"Suffix rules could not be loaded from {self.path or 'default location'}"
            )
        return table


# Global singleton instance
_loader: Optional[RuleTableLoader] = None
_loader_lock = threading.Lock()


def get_rule_table() -> Optional[RuleTable]:
    """
    Get the process-wide rule table, loading it on first use.

    Returns:
        RuleTable, or None if the resource could not be loaded
    """
    global _loader
    if _loader is None:
        with _loader_lock:
            if _loader is None:
                _loader = RuleTableLoader()
    return _loader.get()


def init_rule_table(path: Optional[Path | str] = None) -> Optional[RuleTable]:
    """
    Initialize the process-wide rule table eagerly.

    Args:
        path: Suffix list path (defaults to default_suffix_list_path())

    Returns:
        Loaded RuleTable, or None if the resource could not be loaded
    """
    global _loader
    with _loader_lock:
        _loader = RuleTableLoader(path)
    return _loader.get()


def reset_rule_table() -> None:
    """Reset the process-wide rule table (mainly for testing)."""
    global _loader
    with _loader_lock:
        _loader = None
