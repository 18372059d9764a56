"""Dicts command: list dictionaries visible to the locator."""

from __future__ import annotations

from pathlib import Path

import typer

from spellparity.config_loader import load_config
from spellparity.finder import DictionaryFinder

from ._app import app, console
from ._rich_output import dictionary_table, print_error


@app.command("dicts", rich_help_panel="Utilities")
def dicts(
    config: Path | None = typer.Option(None, "--config", help="Path to spellparity.toml."),
) -> None:
    """List available dictionaries and their search directories."""
    try:
        cfg = load_config(config)
    except (FileNotFoundError, ValueError) as exc:
        print_error(str(exc))
        raise typer.Exit(code=1) from None

    finder = DictionaryFinder.search_all_dirs(cfg.dictionaries.paths)
    found = finder.list_dictionaries()
    if not found:
        console.print("[sp.warn]No dictionaries found.[/sp.warn] Searched:")
        for directory in finder.search_dirs:
            console.print(f"  {directory}", highlight=False, markup=False)
        return
    console.print(dictionary_table(found, title="Available dictionaries"))
