"""
Core comparison algorithms for pacver.

This package contains the pure functions the version model is built on:

- :mod:`pacver.core.segments` splits a pkgver into digit and letter runs
- :mod:`pacver.core.vercmp` orders segments and whole pkgver strings
"""

from __future__ import annotations

from pacver.core.segments import Segment, SegmentKind, iter_segments, tokenize
from pacver.core.vercmp import compare_pkgver, compare_segments, segments_key

__all__ = [
    "Segment",
    "SegmentKind",
    "iter_segments",
    "tokenize",
    "compare_segments",
    "compare_pkgver",
    "segments_key",
]
