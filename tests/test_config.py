from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from pacver.config import (
    PacverConfig,
    _parse_section,
    _pyproject_has_pacver_section,
    _read_toml,
    discover_config_file,
    load_config,
)
from pacver.exceptions import ConfigError, InvalidPkgrelError
from pacver.models import Version


@pytest.mark.unit
class TestPacverConfig:
    """Tests for PacverConfig dataclass."""

    def test_default_initialization(self) -> None:
        """Test PacverConfig initializes with correct defaults."""
        config = PacverConfig()

        assert config.require_pkgrel is False
        assert config.descending is False
        assert config.source_path is None

    def test_to_log_dict(self) -> None:
        """Test to_log_dict excludes metadata."""
        config = PacverConfig(require_pkgrel=True, source_path=Path("/x.toml"))

        assert config.to_log_dict() == {"require_pkgrel": True, "descending": False}

    def test_version_parser_default(self) -> None:
        """Test the default parser accepts versions without pkgrel."""
        parse = PacverConfig().version_parser()

        assert parse("1.0") == Version.parse("1.0")

    def test_version_parser_requires_pkgrel(self) -> None:
        """Test require_pkgrel switches to Version.with_pkgrel."""
        parse = PacverConfig(require_pkgrel=True).version_parser()

        assert str(parse("1.0-1")) == "1.0-1"
        with pytest.raises(InvalidPkgrelError):
            parse("1.0")


@pytest.mark.unit
class TestDiscoverConfigFile:
    """Tests for discover_config_file."""

    def test_explicit_path_priority(self, tmp_path: Path) -> None:
        """Test an explicit path wins over auto-discovery."""
        config_file = tmp_path / "custom.toml"
        config_file.write_text("[pacver]\n", encoding="utf-8")
        (tmp_path / "pacver.toml").write_text("[pacver]\n", encoding="utf-8")

        with patch("pacver.config.Path.cwd", return_value=tmp_path):
            result = discover_config_file(config_file)

        assert result == config_file.resolve()

    def test_explicit_path_not_found(self, tmp_path: Path) -> None:
        """Test a missing explicit path raises ConfigError."""
        with pytest.raises(ConfigError) as exc_info:
            discover_config_file(tmp_path / "missing.toml")

        assert "not found" in str(exc_info.value)

    def test_dedicated_file(self, tmp_path: Path) -> None:
        """Test pacver.toml is discovered in the current directory."""
        (tmp_path / "pacver.toml").write_text("[pacver]\n", encoding="utf-8")

        with patch("pacver.config.Path.cwd", return_value=tmp_path):
            assert discover_config_file() == tmp_path / "pacver.toml"

    def test_pyproject_with_section(self, tmp_path: Path) -> None:
        """Test pyproject.toml is used when it has [tool.pacver]."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.pacver]\ndescending = true\n", encoding="utf-8")

        with patch("pacver.config.Path.cwd", return_value=tmp_path):
            assert discover_config_file() == pyproject

    def test_pyproject_without_section(self, tmp_path: Path) -> None:
        """Test pyproject.toml without [tool.pacver] is ignored."""
        (tmp_path / "pyproject.toml").write_text(
            "[project]\nname = 'x'\n", encoding="utf-8"
        )

        with patch("pacver.config.Path.cwd", return_value=tmp_path):
            assert discover_config_file() is None

    def test_pyproject_tool_not_a_table(self, tmp_path: Path) -> None:
        """Test a non-table [tool] value does not count as configuration."""
        (tmp_path / "pyproject.toml").write_text(
            'tool = "pacver"\n', encoding="utf-8"
        )

        with patch("pacver.config.Path.cwd", return_value=tmp_path):
            assert discover_config_file() is None
            assert load_config() == PacverConfig()

    def test_nothing_found(self, tmp_path: Path) -> None:
        """Test None is returned when no file exists."""
        with patch("pacver.config.Path.cwd", return_value=tmp_path):
            assert discover_config_file() is None


@pytest.mark.unit
class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_file(self, tmp_path: Path) -> None:
        """Test defaults are returned when nothing is found."""
        with patch("pacver.config.Path.cwd", return_value=tmp_path):
            config = load_config()

        assert config == PacverConfig()

    def test_dedicated_file_values(self, tmp_path: Path) -> None:
        """Test values are read from the [pacver] table."""
        path = tmp_path / "pacver.toml"
        path.write_text(
            "[pacver]\nrequire_pkgrel = true\ndescending = true\n", encoding="utf-8"
        )

        config = load_config(path)

        assert config.require_pkgrel is True
        assert config.descending is True
        assert config.source_path == path.resolve()

    def test_pyproject_values(self, tmp_path: Path) -> None:
        """Test values are read from the [tool.pacver] table."""
        (tmp_path / "pyproject.toml").write_text(
            "[tool.pacver]\nrequire_pkgrel = true\n", encoding="utf-8"
        )

        with patch("pacver.config.Path.cwd", return_value=tmp_path):
            config = load_config()

        assert config.require_pkgrel is True
        assert config.descending is False

    def test_empty_section(self, tmp_path: Path) -> None:
        """Test a file without settings yields defaults with source_path."""
        path = tmp_path / "pacver.toml"
        path.write_text("# nothing here\n", encoding="utf-8")

        config = load_config(path)

        assert config.require_pkgrel is False
        assert config.source_path == path.resolve()

    def test_explicit_pyproject_tool_not_a_table(self, tmp_path: Path) -> None:
        """Test an explicit pyproject.toml with a non-table [tool] is rejected."""
        path = tmp_path / "pyproject.toml"
        path.write_text('tool = "pacver"\n', encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert "[tool] must be a table" in str(exc_info.value)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test malformed TOML raises ConfigError."""
        path = tmp_path / "pacver.toml"
        path.write_text("[pacver\n", encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert "Invalid TOML" in str(exc_info.value)


@pytest.mark.unit
class TestParseSection:
    """Tests for _parse_section validation."""

    def test_unknown_key(self) -> None:
        """Test unknown keys are rejected."""
        with pytest.raises(ConfigError) as exc_info:
            _parse_section({"colour": True}, config_path="x.toml")

        assert "colour" in str(exc_info.value)

    def test_wrong_type(self) -> None:
        """Test non-boolean values are rejected."""
        with pytest.raises(ConfigError) as exc_info:
            _parse_section({"descending": "yes"}, config_path="x.toml")

        assert exc_info.value.option == "descending"

    def test_not_a_table(self) -> None:
        """Test a non-table section is rejected."""
        with pytest.raises(ConfigError):
            _parse_section(
                ["descending"], config_path="x.toml"  # type: ignore[arg-type]
            )


@pytest.mark.unit
class TestTomlHelpers:
    """Tests for TOML reading helpers."""

    def test_read_missing_file(self, tmp_path: Path) -> None:
        """Test unreadable files raise ConfigError."""
        with pytest.raises(ConfigError):
            _read_toml(tmp_path / "absent.toml")

    def test_broken_pyproject_has_no_section(self, tmp_path: Path) -> None:
        """Test a broken pyproject.toml does not count as configuration."""
        path = tmp_path / "pyproject.toml"
        path.write_text("[tool.pacver\n", encoding="utf-8")

        assert _pyproject_has_pacver_section(path) is False
