"""
Segment tokenizer for pacver.

A pkgver or pkgrel is compared as a sequence of *segments*: maximal runs of
ASCII digits or ASCII letters. Everything else separates segments and never
becomes part of one. A change between digits and letters is a boundary on
its own, so ``1.0a12`` yields ``1``, ``0``, ``a``, ``12``.

Example:
    >>> [s.text for s in iter_segments("1.0a12")]
    ['1', '0', 'a', '12']
"""

from __future__ import annotations

from enum import Enum
from dataclasses import dataclass
from typing import Iterator, Tuple


class SegmentKind(str, Enum):
    """Character class of a segment."""

    NUMERIC = "numeric"
    ALPHA = "alpha"


@dataclass(frozen=True)
class Segment:
    """A maximal run of digits or letters.

    Attributes:
        kind: Whether the run is numeric or alphabetic.
        text: The run exactly as it appears in the source string.
    """

    kind: SegmentKind
    text: str

    @property
    def is_numeric(self) -> bool:
        return self.kind is SegmentKind.NUMERIC

    @property
    def value(self) -> str:
        """Digits without leading zeros (``"0"`` for all zeros), or the letters.

        Numeric runs stay strings so that runs of any length compare without
        an integer conversion.
        """
        if self.is_numeric:
            return self.text.lstrip("0") or "0"
        return self.text

    def __str__(self) -> str:
        return self.text


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_letter(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z"


def iter_segments(text: str) -> Iterator[Segment]:
    """Yield the segments of ``text`` from left to right.

    Each call returns a fresh generator, so the sequence can be restarted
    by calling again. Separator runs (any character that is neither an
    ASCII digit nor an ASCII letter) collapse and never produce empty
    segments; leading separators are dropped.

    Args:
        text: A pkgver or pkgrel string.

    Yields:
        Segments in source order.
    """
    length = len(text)
    index = 0

    while index < length:
        char = text[index]

        if _is_digit(char):
            matches = _is_digit
            kind = SegmentKind.NUMERIC
        elif _is_letter(char):
            matches = _is_letter
            kind = SegmentKind.ALPHA
        else:
            index += 1
            continue

        start = index
        while index < length and matches(text[index]):
            index += 1
        yield Segment(kind, text[start:index])


def tokenize(text: str) -> Tuple[Segment, ...]:
    """Return all segments of ``text`` as a tuple."""
    return tuple(iter_segments(text))
