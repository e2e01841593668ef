"""
Console output utilities for pacver using Rich.

User-facing output of the ``pacver`` command goes through this module;
diagnostics go through :mod:`pacver.utils.logger`.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Any, Dict, List, Optional

from rich.table import Table
from rich.theme import Theme
from rich.console import Console

PACVER_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold cyan",
        "dim": "dim",
    }
)

_console: Optional[Console] = None
_console_lock = threading.Lock()


def _should_use_color() -> bool:
    """Return True if colored output should be enabled."""
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, OSError):
        return False


def _get_console() -> Console:
    """Return the shared Rich Console, creating it on first use."""
    global _console

    if _console is None:
        with _console_lock:
            if _console is None:
                use_color = _should_use_color()
                _console = Console(
                    theme=PACVER_THEME,
                    no_color=not use_color,
                    highlight=False,
                )
    return _console


def reconfigure_console() -> None:
    """Drop the shared console so the next call re-reads the environment."""
    global _console
    with _console_lock:
        _console = None


def print_success(message: str, *, prefix: str = "[OK]") -> None:
    _get_console().print(f"{prefix} {message}", style="success", markup=False)


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    _get_console().print(f"{prefix} {message}", style="error", markup=False)


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    _get_console().print(f"{prefix} {message}", style="warning", markup=False)


def print_table(
    data: List[Dict[str, Any]],
    *,
    headers: Optional[List[str]] = None,
    title: Optional[str] = None,
    column_styles: Optional[Dict[str, Dict[str, Any]]] = None,
) -> None:
    """Render rows of data as a Rich table.

    Args:
        data: List of row dictionaries.
        headers: Column order. Defaults to keys of the first row.
        title: Optional table title.
        column_styles: Per-column ``style``/``justify`` settings.
    """
    if not data:
        return

    if headers is None:
        headers = list(data[0].keys())

    table = Table(title=title, show_header=True, header_style="bold")

    column_styles = column_styles or {}
    for header in headers:
        config = column_styles.get(header, {})
        table.add_column(
            header,
            style=config.get("style"),
            justify=config.get("justify", "default"),
            overflow="fold",
        )

    for row in data:
        table.add_row(*(str(row.get(h, "")) for h in headers))

    _get_console().print(table)


def colorize_update_type(update_type: str) -> str:
    """Return a Rich-markup label for an update classification.

    Args:
        update_type: Value returned by
            :func:`pacver.utils.version_utils.get_update_type`.
    """
    color_map = {
        "epoch": "red",
        "pkgver": "yellow",
        "pkgrel": "green",
        "new": "cyan",
        "downgrade": "red",
    }

    color = color_map.get(update_type.lower())
    return f"[{color}]{update_type}[/{color}]" if color else update_type


def print_markup(message: str) -> None:
    """Print a message containing Rich markup."""
    _get_console().print(message)
