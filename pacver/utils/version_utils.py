"""
Version helpers for pacver.

This module builds on :mod:`pacver.models` to answer the questions package
tooling asks about sets of versions: is an upgrade available, what kind of
change is it, which candidate is the newest that fits a constraint.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Union

from pacver.exceptions import VersionError
from pacver.models.requirement import VersionRequirement, parse_requirement
from pacver.models.version import Version, parse_version
from pacver.utils.logger import get_logger

logger = get_logger("version_utils")


def get_update_type(
    current_version: Optional[str],
    target_version: Optional[str],
) -> str:
    """Classify the change from ``current_version`` to ``target_version``.

    Args:
        current_version: Installed version, or ``None`` if not installed.
        target_version: Candidate version.

    Returns:
        One of:
            - ``"new"``       : No current version exists
            - ``"same"``      : Versions compare equal
            - ``"downgrade"`` : Target is older than current
            - ``"epoch"``     : Target is newer by epoch
            - ``"pkgver"``    : Target is newer by upstream version
            - ``"pkgrel"``    : Target is newer by package release only
            - ``"unknown"``   : Missing target or invalid version text

    Examples:
        >>> get_update_type("1.0-1", "1.0-2")
        'pkgrel'
        >>> get_update_type("2.0-1", "1:1.0-1")
        'epoch'
        >>> get_update_type(None, "1.0-1")
        'new'
    """
    if target_version is None:
        return "unknown"

    if current_version is None:
        return "new"

    try:
        current = parse_version(current_version)
        target = parse_version(target_version)
    except VersionError as exc:
        logger.debug(
            "Cannot classify %r -> %r: %s", current_version, target_version, exc
        )
        return "unknown"

    ordering = target.compare(current)
    if ordering == 0:
        return "same"
    if ordering < 0:
        return "downgrade"
    return _classify_upgrade(current, target)


def _classify_upgrade(current: Version, target: Version) -> str:
    """Name the first field in which ``target`` is newer than ``current``."""
    if target.epoch_value != current.epoch_value:
        return "epoch"
    if target.pkgver.compare(current.pkgver):
        return "pkgver"
    return "pkgrel"


def is_newer(
    candidate: Union[str, Version],
    current: Union[str, Version, None],
) -> bool:
    """Return True if ``candidate`` should replace ``current``.

    A missing ``current`` version makes any candidate newer.

    Raises:
        VersionError: A version string is invalid.
    """
    if current is None:
        return True

    left = candidate if isinstance(candidate, Version) else parse_version(candidate)
    right = current if isinstance(current, Version) else parse_version(current)
    return left.compare(right) > 0


def sort_versions(versions: Iterable[str], *, reverse: bool = False) -> List[str]:
    """Sort version strings from oldest to newest.

    Each version is parsed and tokenized once. Versions that compare equal
    keep a deterministic order: one without a pkgrel sorts before one with.

    Args:
        versions: Version strings.
        reverse: Sort newest first.

    Returns:
        The input strings in sorted order.

    Raises:
        VersionError: Any string is not a valid version.
    """
    parsed = [(parse_version(text), text) for text in versions]
    parsed.sort(key=lambda item: item[0].sort_key(), reverse=reverse)
    return [text for _, text in parsed]


def max_satisfying(
    versions: Iterable[str],
    requirement: Union[str, VersionRequirement],
) -> Optional[str]:
    """Return the newest version that satisfies ``requirement``.

    Invalid version strings are skipped.

    Args:
        versions: Candidate version strings.
        requirement: Requirement text (``>=1.0``) or parsed requirement.

    Returns:
        The newest matching version string, or ``None`` if none matches.

    Raises:
        VersionError: ``requirement`` is given as invalid text.
    """
    if isinstance(requirement, str):
        requirement = parse_requirement(requirement)

    best: Optional[Version] = None
    best_text: Optional[str] = None

    for text in versions:
        try:
            version = parse_version(text)
        except VersionError:
            logger.debug("Skipping invalid version %r", text)
            continue

        if not requirement.is_satisfied_by(version):
            continue

        if best is None or version.sort_key() > best.sort_key():
            best, best_text = version, text

    return best_text
