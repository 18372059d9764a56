"""App definition, consoles, and root callback for the spellparity CLI."""

from __future__ import annotations

import logging

import typer
from rich.console import Console

from ._theme import SP_THEME

app = typer.Typer(
    help="Verify a candidate spell checker against a reference engine.",
    epilog=(
        "[dim]Common workflows:\n"
        "  Verify a word list   → spellparity verify -d en_US words.txt\n"
        "  Score suggestions    → spellparity verify -d en_US -c corrections.tsv words.txt\n"
        "  List dictionaries    → spellparity dicts[/dim]"
    ),
    rich_markup_mode="rich",
    no_args_is_help=True,
)

console = Console(theme=SP_THEME)
err_console = Console(theme=SP_THEME, stderr=True)

DEBUG_LOG_FORMAT = "%(name)s %(levelname)s %(message)s"
LOG_FORMAT = "%(levelname)s: %(message)s"


def _version_callback(value: bool) -> None:
    if value:
        import platform
        from importlib.metadata import PackageNotFoundError, version

        from spellparity import __version__

        try:
            spylls_version = version("spylls")
        except PackageNotFoundError:
            spylls_version = "not installed"
        console.print(
            f"spellparity [bold]{__version__}[/bold]  "
            f"(Python {platform.python_version()}, spylls {spylls_version})",
            highlight=False,
        )
        raise typer.Exit()


def _configure_logging(*, verbose: bool, debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format=DEBUG_LOG_FORMAT)
    elif verbose:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    else:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log informational messages."),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """spellparity command-line interface."""
    _configure_logging(verbose=verbose, debug=debug)
