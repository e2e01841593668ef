"""
pacver: Arch Linux package version model and ``vercmp``.

pacver parses package versions of the form ``[epoch:]pkgver[-pkgrel]``,
orders them with the segment-wise ``vercmp`` algorithm used by pacman and
makepkg, and evaluates dependency requirements such as ``>=1.2.3-1``.

Example:
    >>> from pacver import parse_version, parse_requirement
    >>> parse_requirement(">=1.2-1").is_satisfied_by(parse_version("1.3-1"))
    True
"""

from __future__ import annotations

from pacver.__version__ import __version__
from pacver.exceptions import (
    EmptyVersionError,
    InvalidCharacterError,
    InvalidEpochError,
    InvalidPkgrelError,
    InvalidRelationError,
    MalformedVersionError,
    MissingVersionError,
    PacverError,
    UnknownComparatorError,
    VersionError,
)
from pacver.models import (
    Epoch,
    PackageRelation,
    PackageRelease,
    PackageVersion,
    Version,
    VersionComparison,
    VersionRequirement,
    compare_versions,
    parse_relation,
    parse_requirement,
    parse_version,
    vercmp,
)

__license__ = "Apache-2.0"

__all__ = [
    "__version__",
    # Models
    "Epoch",
    "PackageVersion",
    "PackageRelease",
    "Version",
    "VersionComparison",
    "VersionRequirement",
    "PackageRelation",
    # Operations
    "parse_version",
    "parse_requirement",
    "parse_relation",
    "compare_versions",
    "vercmp",
    # Errors
    "PacverError",
    "VersionError",
    "EmptyVersionError",
    "InvalidEpochError",
    "MalformedVersionError",
    "InvalidCharacterError",
    "InvalidPkgrelError",
    "UnknownComparatorError",
    "MissingVersionError",
    "InvalidRelationError",
]
