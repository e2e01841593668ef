"""Configuration file loader for pacver.

Handles discovery, loading, parsing, and validation of configuration files.
Supports two formats:

- ``pacver.toml`` with settings under a ``[pacver]`` table
- ``pyproject.toml`` with settings under a ``[tool.pacver]`` table

Discovery order:

1. Explicit path from ``--config`` or ``PACVER_CONFIG``
2. ``pacver.toml`` in the current directory
3. ``pyproject.toml`` with a ``[tool.pacver]`` section

Example (``pacver.toml``)::

    [pacver]
    require_pkgrel = true
    descending = false
"""

from __future__ import annotations

import tomli
from pathlib import Path
from typing import Any, Callable, Dict, Optional
from dataclasses import dataclass, field

from pacver.exceptions import ConfigError
from pacver.models.version import Version
from pacver.utils.logger import get_logger
from pacver.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_DESCENDING,
    DEFAULT_REQUIRE_PKGREL,
    PYPROJECT_FILE_NAME,
)

logger = get_logger("config")

_SECTION = "pacver"


@dataclass
class PacverConfig:
    """Parsed and validated pacver configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        require_pkgrel: Reject versions without a pkgrel on the command
            line, as is required for installed or built packages.
        descending: Default order of ``pacver sort`` (newest first).
        source_path: Path to the loaded file, or ``None`` for defaults.
    """

    require_pkgrel: bool = DEFAULT_REQUIRE_PKGREL
    descending: bool = DEFAULT_DESCENDING

    source_path: Optional[Path] = field(default=None, repr=False)

    def version_parser(self) -> Callable[[str], Version]:
        """Return the version constructor matching ``require_pkgrel``."""
        return Version.with_pkgrel if self.require_pkgrel else Version.parse

    def to_log_dict(self) -> Dict[str, Any]:
        """Return user-facing options for debug logging."""
        return {
            "require_pkgrel": self.require_pkgrel,
            "descending": self.descending,
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to the config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    dedicated = cwd / CONFIG_FILE_NAME
    if dedicated.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, dedicated)
        return dedicated

    pyproject = cwd / PYPROJECT_FILE_NAME
    if pyproject.is_file() and _pyproject_has_pacver_section(pyproject):
        logger.debug("Found [tool.pacver] in %s", pyproject)
        return pyproject

    logger.debug("No configuration file found")
    return None


def _pyproject_has_pacver_section(path: Path) -> bool:
    """Return True if ``path`` parses and contains ``[tool.pacver]``.

    An unreadable or invalid pyproject.toml is not ours to report, so it
    simply does not count as a pacver configuration.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring %s: %s", path, exc)
        return False
    tool = raw.get("tool")
    return isinstance(tool, dict) and _SECTION in tool


def load_config(config_path: Optional[Path] = None) -> PacverConfig:
    """Load and validate pacver configuration.

    Args:
        config_path: Explicit path to a config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`PacverConfig`, with defaults if no file is found.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        return PacverConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == PYPROJECT_FILE_NAME:
        tool = raw.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError(
                f"[tool] must be a table, got {type(tool).__name__}",
                config_path=str(resolved),
            )
        section = tool.get(_SECTION, {})
    else:
        section = raw.get(_SECTION, {})

    if not section:
        logger.debug("No [%s] settings in %s, using defaults", _SECTION, resolved)
        return PacverConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomli.load(fh)
    except tomli.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


_BOOL_OPTIONS = ("require_pkgrel", "descending")


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> PacverConfig:
    """Validate a ``[pacver]`` or ``[tool.pacver]`` table.

    Raises:
        ConfigError: Unknown keys or values of the wrong type.
    """
    if not isinstance(section, dict):
        raise ConfigError(
            f"[{_SECTION}] must be a table, got {type(section).__name__}",
            config_path=config_path,
        )

    unknown = set(section) - set(_BOOL_OPTIONS)
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    config = PacverConfig()
    for option in _BOOL_OPTIONS:
        if option not in section:
            continue
        value = section[option]
        if not isinstance(value, bool):
            raise ConfigError(
                f"{option} must be a boolean, got {type(value).__name__}",
                config_path=config_path,
                option=option,
            )
        setattr(config, option, value)

    return config
