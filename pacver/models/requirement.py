"""
Version requirement data model for pacver.

A requirement is a comparator token immediately followed by a version,
e.g. ``>=1.2.3-1``. It is built once from a dependency string and then
queried repeatedly with :meth:`VersionRequirement.is_satisfied_by`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pacver.constants import COMPARATOR_TOKENS
from pacver.exceptions import MissingVersionError, UnknownComparatorError
from pacver.models.comparison import VersionComparison
from pacver.models.version import Version, _parse_version


@dataclass(frozen=True)
class VersionRequirement:
    """A single comparator and version pair.

    Attributes:
        comparison: Relation the candidate must have to ``version``.
        version: Reference version.

    Examples:
        >>> req = VersionRequirement.parse(">=1.2-1")
        >>> req.is_satisfied_by(Version.parse("1.3-1"))
        True
    """

    comparison: VersionComparison
    version: Version

    def __post_init__(self) -> None:
        if isinstance(self.comparison, str) and not isinstance(
            self.comparison, VersionComparison
        ):
            object.__setattr__(
                self, "comparison", VersionComparison.from_token(self.comparison)
            )
        if isinstance(self.version, str):
            object.__setattr__(self, "version", _parse_version(self.version))

    @classmethod
    def parse(cls, text: str) -> "VersionRequirement":
        """Parse ``<comparator><version>``.

        Two-character tokens (``<=``, ``>=``) are tried before single
        characters so that ``<=1.0`` is never read as ``<`` and ``=1.0``.

        Args:
            text: Requirement text.

        Raises:
            UnknownComparatorError: ``text`` is empty or starts with no token.
            MissingVersionError: Nothing follows the comparator.
            VersionError: The version part is invalid; character positions
                refer to ``text``.
        """
        return _parse_requirement(text)

    def is_satisfied_by(self, candidate: Version) -> bool:
        """Return whether ``candidate`` meets this requirement.

        The candidate is compared against the stored version with
        :meth:`Version.compare`, so a pkgrel missing on either side is
        ignored.
        """
        return self.comparison.holds_for(candidate.compare(self.version))

    def __str__(self) -> str:
        return f"{self.comparison.token}{self.version}"

    def __repr__(self) -> str:
        return f"VersionRequirement({str(self)!r})"


def _parse_requirement(
    text: str,
    *,
    offset: int = 0,
    source: Optional[str] = None,
) -> VersionRequirement:
    """Parse a requirement, reporting positions relative to ``source``."""
    if source is None:
        source = text

    if not text:
        raise UnknownComparatorError("Requirement string is empty", text=source)

    token = next((t for t in COMPARATOR_TOKENS if text.startswith(t)), None)
    if token is None:
        raise UnknownComparatorError(
            f"Requirement must start with one of {', '.join(COMPARATOR_TOKENS)}",
            text=source,
        )

    remainder = text[len(token):]
    if not remainder:
        raise MissingVersionError(token, text=source)

    version = _parse_version(remainder, offset=offset + len(token), source=source)
    return VersionRequirement(VersionComparison(token), version)


def parse_requirement(text: str) -> VersionRequirement:
    """Parse ``<comparator><version>``; see :meth:`VersionRequirement.parse`."""
    return _parse_requirement(text)
