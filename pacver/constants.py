"""
Centralized constants for pacver.

This module defines immutable values used across pacver, including the
version grammar delimiters, comparator tokens, configuration file names,
and logging formats. All values are intended to be treated as read-only.
"""

from typing import Final, FrozenSet, Sequence

# ---------------------------------------------------------------------------
# Version grammar
# ---------------------------------------------------------------------------

#: Delimiter between the epoch and the pkgver.
EPOCH_DELIMITER: Final[str] = ":"

#: Delimiter between the pkgver and the pkgrel (the last occurrence wins).
PKGREL_DELIMITER: Final[str] = "-"

#: Characters allowed between segments of a pkgver or pkgrel.
SEGMENT_SEPARATORS: Final[FrozenSet[str]] = frozenset("._")

#: Comparator tokens, ordered so two-character tokens match first.
COMPARATOR_TOKENS: Final[Sequence[str]] = ("<=", ">=", "<", "=", ">")

#: Characters that may start a comparator token.
COMPARATOR_CHARS: Final[FrozenSet[str]] = frozenset("<=>")

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

#: Dedicated configuration file name, settings under ``[pacver]``.
CONFIG_FILE_NAME: Final[str] = "pacver.toml"

#: Shared project file, settings under ``[tool.pacver]``.
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

#: Environment variable naming an explicit configuration file.
CONFIG_ENV_VAR: Final[str] = "PACVER_CONFIG"

#: Default for requiring a pkgrel on versions given to the CLI.
DEFAULT_REQUIRE_PKGREL: Final[bool] = False

#: Default sort order of ``pacver sort``.
DEFAULT_DESCENDING: Final[bool] = False

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
