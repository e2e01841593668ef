"""
Composite version data model for pacver.

A package version is written ``[epoch:]pkgver[-pkgrel]``:

- the *epoch* is an optional run of digits before the first ``:`` and
  defaults to ``0`` when the delimiter is absent;
- the *pkgver* is the upstream version, made of ASCII letters, digits,
  ``.`` and ``_``, starting with a letter or digit;
- the *pkgrel* is the optional text after the last ``-``, with the same
  character class.

Versions compare by epoch, then pkgver, then pkgrel. The pkgrel step only
runs when both sides carry one: a missing pkgrel means "do not compare
this field" rather than "lowest possible release". Because of that rule
``1.0 == 1.0-2`` and ``1.0 == 1.0-3`` while ``1.0-2 < 1.0-3``, so equality
is not transitive across pkgrel absence. :meth:`Version.sort_key` gives a
total order that never contradicts :meth:`Version.compare`.

All values are immutable. Comparison is always computed from the stored
text; nothing is cached.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from pacver.constants import EPOCH_DELIMITER, PKGREL_DELIMITER, SEGMENT_SEPARATORS
from pacver.core.vercmp import SegmentKey, compare_pkgver, segments_key
from pacver.exceptions import (
    EmptyVersionError,
    InvalidCharacterError,
    InvalidEpochError,
    InvalidPkgrelError,
    MalformedVersionError,
)
from pacver.models.comparison import VersionComparison


def _is_allowed(char: str) -> bool:
    """Return True for ASCII letters, digits, and segment separators."""
    return (char.isascii() and char.isalnum()) or char in SEGMENT_SEPARATORS


def _check_component(
    text: str,
    component: str,
    *,
    offset: int = 0,
    source: Optional[str] = None,
) -> None:
    """Validate the character class of a pkgver or pkgrel.

    The first character must be a letter or digit; the rest may also be
    separators.

    Args:
        text: Non-empty component text.
        component: ``"pkgver"`` or ``"pkgrel"``, used in the error.
        offset: Position of ``text`` within ``source``.
        source: Full input text for error reporting.

    Raises:
        InvalidCharacterError: On the first character outside the class.
    """
    for index, char in enumerate(text):
        if not _is_allowed(char) or (index == 0 and char in SEGMENT_SEPARATORS):
            raise InvalidCharacterError(
                char,
                offset + index,
                component=component,
                text=source if source is not None else text,
            )


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Epoch:
    """Non-negative integer that forces one version lineage above another.

    Attributes:
        value: The epoch number.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidEpochError(repr(self.value))
        if self.value < 0:
            raise InvalidEpochError(str(self.value))

    @classmethod
    def parse(cls, text: str, *, source: Optional[str] = None) -> "Epoch":
        """Parse the text found before ``:``.

        Args:
            text: Epoch text.
            source: Full version text for error reporting.

        Raises:
            InvalidEpochError: ``text`` is empty, not all ASCII digits, or
                too long to convert to an integer.
        """
        if source is None:
            source = text
        if not text or not (text.isascii() and text.isdigit()):
            raise InvalidEpochError(text, text=source)
        try:
            value = int(text)
        except ValueError as exc:
            # int() refuses very long digit strings (sys.get_int_max_str_digits).
            raise InvalidEpochError(text, text=source) from exc
        return cls(value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, eq=False)
class PackageVersion:
    """Validated pkgver text (e.g. ``1.2.3`` or ``2.0rc1``).

    Equality and ordering follow :func:`~pacver.core.vercmp.compare_pkgver`,
    so ``PackageVersion("1.01") == PackageVersion("1.1")``.

    Attributes:
        text: The pkgver as written.
    """

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise MalformedVersionError("Missing pkgver", text=self.text)
        _check_component(self.text, "pkgver")

    def compare(self, other: "PackageVersion") -> int:
        """Return -1, 0, or 1 comparing this pkgver with ``other``."""
        return compare_pkgver(self.text, other.text)

    def key(self) -> SegmentKey:
        """Return a sort key consistent with :meth:`compare`."""
        return segments_key(self.text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackageVersion):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: "PackageVersion") -> bool:
        if not isinstance(other, PackageVersion):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "PackageVersion") -> bool:
        if not isinstance(other, PackageVersion):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "PackageVersion") -> bool:
        if not isinstance(other, PackageVersion):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "PackageVersion") -> bool:
        if not isinstance(other, PackageVersion):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash(self.key())

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, eq=False)
class PackageRelease(PackageVersion):
    """Validated pkgrel text (e.g. ``1`` or ``2.1``).

    A pkgrel has the same character class as a pkgver and compares with the
    same segment algorithm.
    """

    def __post_init__(self) -> None:
        if not self.text:
            raise InvalidPkgrelError("Missing pkgrel", text=self.text)
        _check_component(self.text, "pkgrel")


# ---------------------------------------------------------------------------
# Composite version
# ---------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class Version:
    """A full ``[epoch:]pkgver[-pkgrel]`` package version.

    Components may be given as strings (or an int for the epoch); they are
    validated and converted on construction. Any other type raises
    :class:`TypeError`.

    Attributes:
        pkgver: Upstream version.
        pkgrel: Package release, or ``None`` when not specified.
        epoch: Epoch, or ``None`` when the ``:`` delimiter was absent.

    Examples:
        >>> Version.parse("1:2.0-3") > Version.parse("5.0-1")
        True
        >>> Version.parse("1.0") == Version.parse("1.0-2")
        True
    """

    pkgver: PackageVersion
    pkgrel: Optional[PackageRelease] = None
    epoch: Optional[Epoch] = None

    def __post_init__(self) -> None:
        if isinstance(self.pkgver, str):
            object.__setattr__(self, "pkgver", PackageVersion(self.pkgver))
        if isinstance(self.pkgrel, str):
            object.__setattr__(self, "pkgrel", PackageRelease(self.pkgrel))
        if isinstance(self.epoch, str):
            object.__setattr__(self, "epoch", Epoch.parse(self.epoch))
        elif isinstance(self.epoch, int):
            object.__setattr__(self, "epoch", Epoch(self.epoch))

        if not isinstance(self.pkgver, PackageVersion):
            raise TypeError(
                "pkgver must be a str or PackageVersion, "
                f"got {type(self.pkgver).__name__}"
            )
        if self.pkgrel is not None and not isinstance(self.pkgrel, PackageRelease):
            raise TypeError(
                "pkgrel must be a str or PackageRelease, "
                f"got {type(self.pkgrel).__name__}"
            )
        if self.epoch is not None and not isinstance(self.epoch, Epoch):
            raise TypeError(
                f"epoch must be an int, str or Epoch, got {type(self.epoch).__name__}"
            )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse ``[epoch:]pkgver[-pkgrel]``.

        Args:
            text: Version text.

        Returns:
            The parsed version.

        Raises:
            EmptyVersionError: ``text`` is empty.
            InvalidEpochError: ``:`` is present but the epoch is not digits.
            MalformedVersionError: The pkgver is empty.
            InvalidCharacterError: A character is outside the allowed class.
            InvalidPkgrelError: ``-`` is present but nothing follows it.
        """
        return _parse_version(text)

    @classmethod
    def with_pkgrel(cls, text: str) -> "Version":
        """Parse a version that must carry a pkgrel (e.g. an installed package).

        Raises:
            InvalidPkgrelError: The version has no pkgrel.
            VersionError: Any error raised by :meth:`parse`.
        """
        version = _parse_version(text)
        if version.pkgrel is None:
            raise InvalidPkgrelError("Version has no pkgrel", text=text)
        return version

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    @property
    def epoch_value(self) -> int:
        """Epoch as an integer; ``0`` when absent."""
        return self.epoch.value if self.epoch is not None else 0

    def compare(self, other: "Version") -> int:
        """Compare with ``other`` by epoch, then pkgver, then pkgrel.

        The pkgrel is only compared when both versions have one.

        Returns:
            ``-1`` if this version is older, ``0`` if equal, ``1`` if newer.
        """
        result = _sign(self.epoch_value - other.epoch_value)
        if result:
            return result

        result = self.pkgver.compare(other.pkgver)
        if result:
            return result

        if self.pkgrel is None or other.pkgrel is None:
            return 0

        return self.pkgrel.compare(other.pkgrel)

    def sort_key(self) -> Tuple[Any, ...]:
        """Return a key for sorting large sets of versions.

        The key orders versions the same way :meth:`compare` does whenever
        :meth:`compare` reports a difference. Ties caused by a missing pkgrel
        are broken by placing the version without a pkgrel first. Each
        component is tokenized once per call.
        """
        release: Tuple[Any, ...] = (
            (0,) if self.pkgrel is None else (1, self.pkgrel.key())
        )
        return (self.epoch_value, self.pkgver.key(), release)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        # pkgrel is left out: versions that differ only there may be equal.
        return hash((self.epoch_value, self.pkgver.key()))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        text = self.pkgver.text
        if self.epoch is not None:
            text = f"{self.epoch}{EPOCH_DELIMITER}{text}"
        if self.pkgrel is not None:
            text = f"{text}{PKGREL_DELIMITER}{self.pkgrel}"
        return text

    def __repr__(self) -> str:
        return f"Version({str(self)!r})"


def _parse_version(
    text: str,
    *,
    offset: int = 0,
    source: Optional[str] = None,
) -> Version:
    """Parse a version, reporting character positions relative to ``source``.

    Args:
        text: Version text.
        offset: Position of ``text`` within ``source``.
        source: Enclosing input (e.g. a requirement); defaults to ``text``.
    """
    if source is None:
        source = text

    if not text:
        raise EmptyVersionError(source)

    epoch: Optional[Epoch] = None
    rest = text
    rest_offset = offset

    if EPOCH_DELIMITER in text:
        epoch_text, rest = text.split(EPOCH_DELIMITER, 1)
        epoch = Epoch.parse(epoch_text, source=source)
        rest_offset += len(epoch_text) + 1

    pkgver_text = rest
    pkgrel_text: Optional[str] = None
    if PKGREL_DELIMITER in rest:
        pkgver_text, pkgrel_text = rest.rsplit(PKGREL_DELIMITER, 1)

    if not pkgver_text:
        raise MalformedVersionError("Missing pkgver", text=source)
    _check_component(pkgver_text, "pkgver", offset=rest_offset, source=source)

    pkgrel: Optional[PackageRelease] = None
    if pkgrel_text is not None:
        if not pkgrel_text:
            raise InvalidPkgrelError("Missing pkgrel after '-'", text=source)
        _check_component(
            pkgrel_text,
            "pkgrel",
            offset=rest_offset + len(pkgver_text) + 1,
            source=source,
        )
        pkgrel = PackageRelease(pkgrel_text)

    return Version(PackageVersion(pkgver_text), pkgrel, epoch)


# ---------------------------------------------------------------------------
# Functional API
# ---------------------------------------------------------------------------


def parse_version(text: str) -> Version:
    """Parse ``[epoch:]pkgver[-pkgrel]``; see :meth:`Version.parse`."""
    return _parse_version(text)


def compare_versions(a: Version, b: Version) -> VersionComparison:
    """Compare two versions.

    Returns:
        ``VersionComparison.LESS``, ``EQUAL`` or ``GREATER``.
    """
    return VersionComparison.from_ordering(a.compare(b))


def vercmp(a: Union[str, Version], b: Union[str, Version]) -> int:
    """Compare two version strings the way the ``vercmp`` tool reports it.

    Args:
        a: Left version (text or parsed).
        b: Right version (text or parsed).

    Returns:
        ``-1``, ``0`` or ``1``.

    Raises:
        VersionError: Either string is not a valid version.

    Examples:
        >>> vercmp("1:1.0-1", "2.0-1")
        1
        >>> vercmp("1.0", "1.0.1")
        -1
    """
    left = a if isinstance(a, Version) else _parse_version(a)
    right = b if isinstance(b, Version) else _parse_version(b)
    return left.compare(right)
