"""
Custom exception hierarchy for pacver.

This module defines structured exception types used across pacver.
All exceptions inherit from :class:`PacverError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.

Every failure to parse a version, requirement, or relation string is a
:class:`VersionError`, which is also a :class:`ValueError` so callers that
only care about "bad input" can catch the builtin.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class PacverError(Exception):
    """Base exception for all pacver errors.

    It supports structured metadata via ``details`` for richer error
    reporting and debugging.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = 80) -> str:
    """Truncate long input for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


# ---------------------------------------------------------------------------
# Parse errors
# ---------------------------------------------------------------------------


class VersionError(PacverError, ValueError):
    """Raised when a version or requirement string cannot be parsed.

    Args:
        message: Error description.
        text: The offending input text.
    """

    __slots__ = ("text",)

    def __init__(self, message: str, *, text: Optional[str] = None) -> None:
        details: MutableMapping[str, Any] = {}
        if text is not None:
            details["input"] = repr(_truncate(text))

        super().__init__(message, details)

        self.text = text


class EmptyVersionError(VersionError):
    """Raised when a version string is empty."""

    def __init__(self, text: str = "") -> None:
        super().__init__("Version string is empty", text=text)


class InvalidEpochError(VersionError):
    """Raised when the text before ``:`` is not a non-empty run of digits.

    Args:
        epoch: The rejected epoch text.
        text: The full version text.
    """

    __slots__ = ("epoch",)

    def __init__(self, epoch: str, *, text: Optional[str] = None) -> None:
        super().__init__(f"Invalid epoch {_truncate(epoch)!r}", text=text)
        self.epoch = epoch
        self.details["epoch"] = repr(_truncate(epoch))


class MalformedVersionError(VersionError):
    """Raised when the pkgver part of a version is missing or ill-formed."""


class InvalidCharacterError(MalformedVersionError):
    """Raised when a pkgver or pkgrel contains a character outside its class.

    Args:
        char: The rejected character.
        position: Zero-based index of ``char`` in ``text``.
        component: Which component was being validated (``pkgver``/``pkgrel``).
        text: The text the position refers to.
    """

    __slots__ = ("char", "position", "component")

    def __init__(
        self,
        char: str,
        position: int,
        *,
        component: str = "pkgver",
        text: Optional[str] = None,
    ) -> None:
        super().__init__(
            f"Invalid character {char!r} in {component} at position {position}",
            text=text,
        )
        self.char = char
        self.position = position
        self.component = component


class InvalidPkgrelError(VersionError):
    """Raised when the pkgrel after the last ``-`` is empty or ill-formed."""


class UnknownComparatorError(VersionError):
    """Raised when a requirement does not start with a known comparator."""


class MissingVersionError(VersionError):
    """Raised when a comparator is not followed by any version text.

    Args:
        comparator: The comparator token that was found.
        text: The full requirement text.
    """

    __slots__ = ("comparator",)

    def __init__(self, comparator: str, *, text: Optional[str] = None) -> None:
        super().__init__(f"No version follows comparator {comparator!r}", text=text)
        self.comparator = comparator


class InvalidRelationError(VersionError):
    """Raised when a ``name<op>version`` relation has no package name."""


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------


class ConfigError(PacverError):
    """Raised when a configuration file is missing, unreadable, or invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option
