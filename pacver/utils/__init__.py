"""
Utility helpers for pacver.

This package provides reusable utilities used across pacver, including:

- Console output helpers (Rich-based)
- Logging configuration and retrieval
- Version set helpers (upgrade classification, sorting)

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from pacver.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from pacver.utils.console import (
    colorize_update_type,
    print_error,
    print_success,
    print_table,
    print_warning,
    reconfigure_console,
)

# ---------------------------------------------------------------------------
# Version utilities
# ---------------------------------------------------------------------------

from pacver.utils.version_utils import (
    get_update_type,
    is_newer,
    max_satisfying,
    sort_versions,
)

__all__ = [
    # Console
    "print_error",
    "print_table",
    "print_success",
    "print_warning",
    "reconfigure_console",
    "colorize_update_type",
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "is_logging_configured",
    # Version utilities
    "get_update_type",
    "is_newer",
    "sort_versions",
    "max_satisfying",
]
