"""Theme-aware Rich rendering helpers shared across CLI commands."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from rich.box import ROUNDED
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ._app import err_console
from ._theme import PANEL_PADDING


def key_value_panel(
    data: Mapping[str, Any],
    *,
    title: str | None = None,
    border: str = "sp.border",
) -> Panel:
    """Render a mapping as an aligned key-value panel."""
    max_key_len = max((len(str(k)) for k in data), default=0)
    lines: list[str] = []
    for key, value in data.items():
        padded = escape(str(key).ljust(max_key_len))
        lines.append(f"[sp.label]{padded}[/sp.label]  {escape(str(value))}")
    return Panel(
        "\n".join(lines),
        title=title,
        border_style=border,
        box=ROUNDED,
        padding=PANEL_PADDING,
    )


def dictionary_table(dictionaries: Mapping[str, Path], *, title: str | None = None) -> Table:
    table = Table(title=title)
    table.add_column("Dictionary", style="sp.label", no_wrap=True)
    table.add_column("Path")
    for name, path in dictionaries.items():
        table.add_row(escape(name), escape(str(path)))
    return table


def print_error(message: str) -> None:
    """Print a one-line diagnostic on stderr."""
    err_console.print(
        f"[sp.fail]Error:[/sp.fail] {escape(message)}", highlight=False, soft_wrap=True
    )


def print_diagnostic(message: str) -> None:
    err_console.print(escape(message), highlight=False, soft_wrap=True)
