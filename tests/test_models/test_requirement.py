"""Unit tests for pacver.models.requirement module.

Test Coverage:
- Parsing of the five comparator tokens, two-character tokens first
- Error kinds for unknown comparators and missing versions
- Error positions relative to the requirement text
- Requirement evaluation, including the pkgrel-absence rule
- Rendering and construction
"""

from __future__ import annotations

import pytest

from pacver.exceptions import (
    InvalidCharacterError,
    InvalidEpochError,
    MissingVersionError,
    UnknownComparatorError,
)
from pacver.models.comparison import VersionComparison
from pacver.models.requirement import VersionRequirement, parse_requirement
from pacver.models.version import Version, parse_version


def _satisfied(requirement: str, candidate: str) -> bool:
    return parse_requirement(requirement).is_satisfied_by(parse_version(candidate))


@pytest.mark.unit
class TestParseRequirement:
    """Tests for parsing requirement strings."""

    @pytest.mark.parametrize(
        "text,comparison,version",
        [
            ("<1.0", VersionComparison.LESS, "1.0"),
            ("<=1.0", VersionComparison.LESS_OR_EQUAL, "1.0"),
            ("=1.0-1", VersionComparison.EQUAL, "1.0-1"),
            (">=1.2-1", VersionComparison.GREATER_OR_EQUAL, "1.2-1"),
            (">1:2.0", VersionComparison.GREATER, "1:2.0"),
        ],
    )
    def test_tokens(
        self,
        text: str,
        comparison: VersionComparison,
        version: str,
    ) -> None:
        """Test each comparator token is recognized.

        Two-character tokens are matched before one-character ones.
        """
        requirement = parse_requirement(text)

        assert requirement.comparison is comparison
        assert str(requirement.version) == version

    def test_classmethod_matches_function(self) -> None:
        """Test VersionRequirement.parse is equivalent to parse_requirement."""
        assert VersionRequirement.parse(">=1.0") == parse_requirement(">=1.0")

    @pytest.mark.parametrize("text", ["", "1.0", "!1.0", "~=1.0", " >=1.0"])
    def test_unknown_comparator(self, text: str) -> None:
        """Test requirements must start with a comparator."""
        with pytest.raises(UnknownComparatorError) as exc_info:
            parse_requirement(text)

        assert exc_info.value.text == text

    @pytest.mark.parametrize("token", ["<", "<=", "=", ">=", ">"])
    def test_missing_version(self, token: str) -> None:
        """Test a comparator with nothing after it."""
        with pytest.raises(MissingVersionError) as exc_info:
            parse_requirement(token)

        assert exc_info.value.comparator == token

    @pytest.mark.parametrize(
        "text,char,position",
        [
            ("==1.0", "=", 1),
            ("=>1.0", ">", 1),
            (">=1.0$", "$", 5),
            ("<1:1.0-1$", "$", 8),
        ],
    )
    def test_invalid_version_positions(
        self,
        text: str,
        char: str,
        position: int,
    ) -> None:
        """Test version errors report positions within the requirement."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            parse_requirement(text)

        assert exc_info.value.char == char
        assert exc_info.value.position == position
        assert exc_info.value.text == text

    def test_invalid_epoch_propagates(self) -> None:
        """Test version parse errors surface unchanged."""
        with pytest.raises(InvalidEpochError):
            parse_requirement(">=:1.0")


@pytest.mark.unit
class TestIsSatisfiedBy:
    """Tests for requirement evaluation."""

    @pytest.mark.parametrize(
        "requirement,candidate,expected",
        [
            (">=1.2-1", "1.3-1", True),
            (">=1.2-1", "1.2-1", True),
            (">=1.2-1", "1.1-5", False),
            ("<1.0", "1.0", False),
            ("<1.0", "0.9", True),
            ("<1.0", "1.0rc1", True),
            ("<=1.0-1", "1.0", True),
            (">1.0", "1.0-5", False),
            (">1.0-1", "1.0-2", True),
            ("<1:0.1", "5.0", True),
            (">=1:1.0", "2.0", False),
            ("=1.01", "1.1", True),
        ],
    )
    def test_evaluation(self, requirement: str, candidate: str, expected: bool) -> None:
        """Test requirement evaluation across comparators."""
        assert _satisfied(requirement, candidate) is expected

    def test_equal_with_both_pkgrels_compares_pkgrel(self) -> None:
        """Test '=1.0-1' is not satisfied by '1.0-2'.

        Both sides carry a pkgrel, so 1.0-2 compares greater than 1.0-1.
        """
        assert _satisfied("=1.0-1", "1.0-2") is False
        assert _satisfied("=1.0-1", "1.0-1") is True

    def test_equal_without_pkgrel_ignores_pkgrel(self) -> None:
        """Test '=1.0' is satisfied by any pkgrel of 1.0."""
        assert _satisfied("=1.0", "1.0-2") is True
        assert _satisfied("=1.0", "1.0-77") is True

    def test_candidate_without_pkgrel(self) -> None:
        """Test a candidate without pkgrel matches on epoch and pkgver only."""
        assert _satisfied("=1.0-3", "1.0") is True
        assert _satisfied(">1.0-3", "1.0") is False

    def test_repeated_queries(self) -> None:
        """Test a requirement can be evaluated many times."""
        requirement = parse_requirement(">=2.0")
        candidates = [parse_version(v) for v in ("1.0", "2.0", "3.0", "2.0-1")]

        assert [requirement.is_satisfied_by(c) for c in candidates] == [
            False,
            True,
            True,
            True,
        ]


@pytest.mark.unit
class TestRequirementModel:
    """Tests for construction and rendering."""

    @pytest.mark.parametrize("text", ["<1.0", "<=1:1.0-1", "=2.0", ">=1.2-1", ">0.1a"])
    def test_str(self, text: str) -> None:
        """Test rendering reproduces the requirement text."""
        assert str(parse_requirement(text)) == text

    def test_repr(self) -> None:
        """Test debug representation."""
        assert repr(parse_requirement(">=1.0")) == "VersionRequirement('>=1.0')"

    def test_constructor_coerces_strings(self) -> None:
        """Test tokens and version strings are accepted on construction."""
        requirement = VersionRequirement(">=", "1.0-1")  # type: ignore[arg-type]

        assert requirement.comparison is VersionComparison.GREATER_OR_EQUAL
        assert isinstance(requirement.version, Version)
        assert requirement == parse_requirement(">=1.0-1")

    def test_constructor_rejects_unknown_token(self) -> None:
        """Test unknown tokens are rejected on construction."""
        with pytest.raises(UnknownComparatorError):
            VersionRequirement("~", "1.0")  # type: ignore[arg-type]

    def test_hashable(self) -> None:
        """Test requirements can be stored in sets."""
        assert len({parse_requirement(">=1.0"), parse_requirement(">=1.0")}) == 1
