"""
Segment-wise version comparison ("vercmp") for pacver.

This module is format-agnostic: it knows nothing about epochs or pkgrels.
It orders two pkgver-shaped strings by walking their segments pairwise.

At each position the rules are:

- two numeric segments compare by value (``01`` equals ``1``); the digits
  are compared as text, shorter run first after leading zeros are dropped,
  so runs of any length are supported;
- two alphabetic segments compare byte-lexicographically;
- a numeric segment is greater than an alphabetic one;
- when one side has run out, it is greater than a remaining alphabetic
  segment (``1.0`` > ``1.0a``) and less than a remaining numeric segment
  (``1.0`` < ``1.0.1``);
- when both sides have run out, the strings are equal.

Equivalently, every position holds an alphabetic segment, the end marker,
or a numeric segment, ordered in that sequence. :func:`segments_key`
encodes exactly this ordering as a tuple so that sorting can tokenize each
value once instead of once per pairwise comparison.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Tuple

from pacver.core.segments import Segment, iter_segments

# Ranks used by segments_key; alpha < end of sequence < numeric.
_ALPHA_RANK = 0
_END_RANK = 1
_NUMERIC_RANK = 2

SegmentKey = Tuple[Tuple[int, int, str], ...]


def _cmp_text(a: str, b: str) -> int:
    return (a > b) - (a < b)


def _compare_digits(a: str, b: str) -> int:
    """Compare two normalized digit runs without converting them to int."""
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    return _cmp_text(a, b)


def compare_segments(a: Optional[Segment], b: Optional[Segment]) -> int:
    """Compare two segments at the same position.

    Args:
        a: Segment from the left string, or ``None`` if it is exhausted.
        b: Segment from the right string, or ``None`` if it is exhausted.

    Returns:
        ``-1`` if ``a`` orders before ``b``, ``0`` if equal, ``1`` otherwise.
    """
    if a is None:
        if b is None:
            return 0
        return -1 if b.is_numeric else 1

    if b is None:
        return 1 if a.is_numeric else -1

    if a.is_numeric and b.is_numeric:
        return _compare_digits(a.value, b.value)

    if a.is_numeric != b.is_numeric:
        return 1 if a.is_numeric else -1

    return _cmp_text(a.text, b.text)


def compare_pkgver(a: str, b: str) -> int:
    """Compare two pkgver (or pkgrel) strings.

    The result depends only on the two arguments, and the relation it
    induces is a total order: reflexive, antisymmetric and transitive.

    Args:
        a: Left version text.
        b: Right version text.

    Returns:
        ``-1`` if ``a < b``, ``0`` if ``a == b``, ``1`` if ``a > b``.

    Examples:
        >>> compare_pkgver("1.0", "1.0a")
        1
        >>> compare_pkgver("1.0", "1.0.1")
        -1
        >>> compare_pkgver("1_0", "1.0")
        0
    """
    if a == b:
        return 0

    for left, right in zip_longest(iter_segments(a), iter_segments(b)):
        result = compare_segments(left, right)
        if result:
            return result
    return 0


def segments_key(text: str) -> SegmentKey:
    """Return a tuple that sorts exactly like :func:`compare_pkgver`.

    Numeric segments contribute their length and digits (leading zeros
    dropped), alphabetic segments their text, and an end marker closes the
    sequence so that a shorter string lands between an alphabetic and a
    numeric continuation.

    Args:
        text: A pkgver or pkgrel string.

    Returns:
        A hashable, comparable key.
    """
    key = [
        (_NUMERIC_RANK, len(segment.value), segment.value)
        if segment.is_numeric
        else (_ALPHA_RANK, 0, segment.text)
        for segment in iter_segments(text)
    ]
    key.append((_END_RANK, 0, ""))
    return tuple(key)
