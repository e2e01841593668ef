"""
pacver version information.

This module provides a single source of truth for the package version.
"""

from __future__ import annotations

__version__ = "0.1.0"

#: Human-readable version for the CLI.
VERSION_STRING = f"pacver {__version__}"
