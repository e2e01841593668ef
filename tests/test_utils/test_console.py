from __future__ import annotations

from typing import Generator

import pytest

from pacver.utils.console import (
    PACVER_THEME,
    _should_use_color,
    colorize_update_type,
    print_error,
    print_markup,
    print_success,
    print_table,
    print_warning,
    reconfigure_console,
)


@pytest.fixture(autouse=True)
def reset_console(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Use a fresh, colorless console for every test."""
    monkeypatch.setenv("NO_COLOR", "1")
    reconfigure_console()
    yield
    reconfigure_console()


@pytest.mark.unit
class TestStatusMessages:
    """Tests for print_success, print_error and print_warning."""

    def test_print_error(self, capsys: pytest.CaptureFixture) -> None:
        """Test error messages keep their literal prefix."""
        print_error("Invalid epoch ':'")

        assert "[ERROR] Invalid epoch ':'" in capsys.readouterr().out

    def test_print_success(self, capsys: pytest.CaptureFixture) -> None:
        """Test success messages keep their literal prefix."""
        print_success("done")

        assert "[OK] done" in capsys.readouterr().out

    def test_print_warning_custom_prefix(self, capsys: pytest.CaptureFixture) -> None:
        """Test a custom prefix replaces the default one."""
        print_warning("careful", prefix="!")

        assert "! careful" in capsys.readouterr().out

    def test_print_markup(self, capsys: pytest.CaptureFixture) -> None:
        """Test markup tags are rendered, not printed."""
        print_markup("[green]pkgrel[/green]")

        out = capsys.readouterr().out
        assert "pkgrel" in out
        assert "[green]" not in out


@pytest.mark.unit
class TestPrintTable:
    """Tests for print_table."""

    def test_renders_rows(self, capsys: pytest.CaptureFixture) -> None:
        """Test rows and headers appear in the output."""
        print_table(
            [{"Version": "1.0-1", "Satisfied": "yes"}],
            title="Requirement >=1.0",
        )

        out = capsys.readouterr().out
        assert "Version" in out
        assert "1.0-1" in out
        assert "yes" in out

    def test_empty_data_prints_nothing(self, capsys: pytest.CaptureFixture) -> None:
        """Test no table is printed for empty data."""
        print_table([])

        assert capsys.readouterr().out == ""


@pytest.mark.unit
class TestColorizeUpdateType:
    """Tests for colorize_update_type."""

    @pytest.mark.parametrize(
        "update_type,color",
        [
            ("epoch", "red"),
            ("pkgver", "yellow"),
            ("pkgrel", "green"),
            ("new", "cyan"),
            ("downgrade", "red"),
        ],
    )
    def test_known_types(self, update_type: str, color: str) -> None:
        """Test known update types get a color tag."""
        assert colorize_update_type(update_type) == f"[{color}]{update_type}[/{color}]"

    def test_unknown_type_unchanged(self) -> None:
        """Test unknown labels are returned as-is."""
        assert colorize_update_type("same") == "same"


@pytest.mark.unit
class TestColorDetection:
    """Tests for color detection and theme."""

    def test_no_color_env(self) -> None:
        """Test NO_COLOR disables colors."""
        assert _should_use_color() is False

    def test_theme_styles(self) -> None:
        """Test the theme defines the status styles."""
        for name in ("success", "error", "warning", "info"):
            assert name in PACVER_THEME.styles
