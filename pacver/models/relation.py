"""
Package relation data model for pacver.

A relation names a package and optionally constrains its version, as found
in ``depends``, ``provides`` or ``conflicts`` entries: ``glibc``,
``python>=3.11``, ``linux=6.9.1.arch1-1``.

The package name is treated as pre-validated text; only the version part is
parsed and checked here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pacver.constants import COMPARATOR_CHARS
from pacver.exceptions import InvalidRelationError
from pacver.models.requirement import VersionRequirement, _parse_requirement
from pacver.models.version import Version


@dataclass(frozen=True)
class PackageRelation:
    """A package name with an optional version requirement.

    Attributes:
        name: Package name.
        requirement: Version constraint, or ``None`` for any version.
    """

    name: str
    requirement: Optional[VersionRequirement] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidRelationError("Package relation has no name", text=self.name)

    @classmethod
    def parse(cls, text: str) -> "PackageRelation":
        """Parse ``name[<comparator><version>]``.

        The name ends at the first ``<``, ``=`` or ``>``.

        Raises:
            InvalidRelationError: The name part is empty.
            VersionError: The requirement part is invalid; character
                positions refer to ``text``.
        """
        split = next(
            (index for index, char in enumerate(text) if char in COMPARATOR_CHARS),
            None,
        )
        if split is None:
            return cls(text)

        name = text[:split]
        if not name:
            raise InvalidRelationError("Package relation has no name", text=text)

        requirement = _parse_requirement(text[split:], offset=split, source=text)
        return cls(name, requirement)

    def is_satisfied_by(self, name: str, version: Version) -> bool:
        """Return whether package ``name`` at ``version`` fulfills this relation."""
        if name != self.name:
            return False
        if self.requirement is None:
            return True
        return self.requirement.is_satisfied_by(version)

    def __str__(self) -> str:
        if self.requirement is None:
            return self.name
        return f"{self.name}{self.requirement}"


def parse_relation(text: str) -> PackageRelation:
    """Parse ``name[<comparator><version>]``; see :meth:`PackageRelation.parse`."""
    return PackageRelation.parse(text)
