"""
Unified data model exports for pacver.

This module re-exports all core data models to provide a stable and
convenient public API. Users can import models directly from
``pacver.models`` instead of individual submodules.

Example:
    >>> from pacver.models import Version, VersionRequirement
"""

from __future__ import annotations

from pacver.models.comparison import VersionComparison
from pacver.models.version import (
    Epoch,
    PackageRelease,
    PackageVersion,
    Version,
    compare_versions,
    parse_version,
    vercmp,
)
from pacver.models.requirement import VersionRequirement, parse_requirement
from pacver.models.relation import PackageRelation, parse_relation

__all__ = [
    "Epoch",
    "PackageVersion",
    "PackageRelease",
    "Version",
    "VersionComparison",
    "VersionRequirement",
    "PackageRelation",
    "parse_version",
    "parse_requirement",
    "parse_relation",
    "compare_versions",
    "vercmp",
]
