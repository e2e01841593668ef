"""
Comparison operators for pacver.

:class:`VersionComparison` is used both as the collapsed outcome of a
three-way compare (``LESS``/``EQUAL``/``GREATER``) and as the operator of a
:class:`~pacver.models.requirement.VersionRequirement`.
"""

from __future__ import annotations

from enum import Enum

from pacver.constants import COMPARATOR_TOKENS
from pacver.exceptions import UnknownComparatorError


class VersionComparison(str, Enum):
    """A version comparator, valued by its textual token."""

    LESS = "<"
    LESS_OR_EQUAL = "<="
    EQUAL = "="
    GREATER_OR_EQUAL = ">="
    GREATER = ">"

    @property
    def token(self) -> str:
        """Return the comparator as written in a requirement (e.g. ``>=``)."""
        return self.value

    @classmethod
    def from_ordering(cls, ordering: int) -> "VersionComparison":
        """Collapse a three-way compare result to ``LESS``/``EQUAL``/``GREATER``.

        Args:
            ordering: Any integer; only its sign is considered.

        Returns:
            The matching comparison.
        """
        if ordering < 0:
            return cls.LESS
        if ordering > 0:
            return cls.GREATER
        return cls.EQUAL

    @classmethod
    def from_token(cls, token: str) -> "VersionComparison":
        """Look up a comparator by its token.

        Raises:
            UnknownComparatorError: ``token`` is not one of the five tokens.
        """
        if token not in COMPARATOR_TOKENS:
            raise UnknownComparatorError(f"Unknown comparator {token!r}", text=token)
        return cls(token)

    def holds_for(self, ordering: int) -> bool:
        """Return whether this relation holds for a three-way compare result.

        Args:
            ordering: Result of comparing a candidate against a reference
                version (negative, zero, or positive).

        Examples:
            >>> VersionComparison.GREATER_OR_EQUAL.holds_for(0)
            True
            >>> VersionComparison.LESS.holds_for(0)
            False
        """
        if self is VersionComparison.LESS:
            return ordering < 0
        if self is VersionComparison.LESS_OR_EQUAL:
            return ordering <= 0
        if self is VersionComparison.EQUAL:
            return ordering == 0
        if self is VersionComparison.GREATER_OR_EQUAL:
            return ordering >= 0
        return ordering > 0

    def __str__(self) -> str:
        return self.value
