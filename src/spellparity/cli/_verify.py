"""Verify command: run both engines over the input and print the report."""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Iterator
from enum import Enum
from pathlib import Path

import typer

from spellparity.config_loader import load_config
from spellparity.encoding import EncodingBridge, default_input_encoding, normalize_encoding
from spellparity.engines import resolve_engine
from spellparity.errors import (
    DegenerateStatisticsError,
    DictionaryNotFoundError,
    EngineUnavailableError,
    InputError,
)
from spellparity.finder import DictionaryFinder, infer_dictionary_name
from spellparity.harness import VerificationHarness
from spellparity.invoker import DualEngineInvoker
from spellparity.report import render
from spellparity.sources import iter_corrections, iter_word_files, iter_words, open_corrections
from spellparity.types import WordSample

from ._app import app, console
from ._rich_output import key_value_panel, print_diagnostic, print_error

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    TEXT = "text"
    TABLE = "table"


def _stdin_words(encoding: str) -> Iterator[WordSample]:
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        yield from iter_words(sys.stdin)
        return
    stream = io.TextIOWrapper(buffer, encoding=encoding, errors="replace", newline="")
    try:
        yield from iter_words(stream)
    finally:
        stream.detach()


def _build_bridge(source_encoding: str, dictionary_encoding: str) -> EncodingBridge:
    try:
        return EncodingBridge(source_encoding, dictionary_encoding)
    except LookupError:
        logger.info(
            "Dictionary encoding %r is unknown to Python, passing words through as UTF-8",
            dictionary_encoding,
        )
        return EncodingBridge(source_encoding, "utf-8")


@app.command("verify", rich_help_panel="Verification")
def verify(
    files: list[Path] | None = typer.Argument(
        None, help="Word list files, one word per line. Reads standard input when omitted."
    ),
    dictionary: list[str] = typer.Option(
        [],
        "--dictionary",
        "-d",
        help="Dictionary name (e.g. en_US) or path prefix. Only the first one is used.",
    ),
    encoding: str | None = typer.Option(
        None, "--encoding", "-i", help="Input encoding, default is the active locale."
    ),
    corrections: Path | None = typer.Option(
        None,
        "--corrections",
        "-c",
        help="TSV file of <word>\\t<expected correction> lines to verify suggestions.",
    ),
    print_false: bool = typer.Option(
        False, "--print-false", "-f", help="Print false negative and false positive words."
    ),
    suggestions: bool = typer.Option(
        False,
        "--suggestions",
        "-s",
        help="Also time suggestions for words both engines reject.",
    ),
    candidate: str | None = typer.Option(
        None, "--candidate", help="Engine under test (default: spylls)."
    ),
    reference: str | None = typer.Option(
        None, "--reference", help="Reference engine (default: hunspell)."
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TEXT, "--format", help="Report layout: fixed-width text or a rich panel."
    ),
    config: Path | None = typer.Option(
        None, "--config", help="Path to spellparity.toml (default: ./spellparity.toml if present)."
    ),
) -> None:
    """Compare spelling verdicts, suggestions and timing of two engines.

    All durations are in nanoseconds. A speedup of 1.62 means the candidate
    is 1.6x faster than the reference.
    """
    try:
        cfg = load_config(config)
    except (FileNotFoundError, ValueError) as exc:
        print_error(str(exc))
        raise typer.Exit(code=1) from None
    settings = cfg.verify

    raw_encoding = encoding or settings.encoding or default_input_encoding()
    try:
        input_encoding = normalize_encoding(raw_encoding)
    except LookupError:
        raise typer.BadParameter(
            f"Unknown encoding {raw_encoding!r}, see `locale -m` for supported encodings.",
            param_hint="'--encoding' / '-i'",
        ) from None
    logger.info("I/O encoding %s", input_encoding)

    names = list(dictionary) or ([settings.dictionary] if settings.dictionary else [])
    for extra in names[1:]:
        logger.warning("Ignoring additional dictionary %s, only one is supported", extra)
    dictionary_name = names[0] if names else infer_dictionary_name()
    if not dictionary_name:
        print_error("No dictionary provided and can not infer from OS locale")
        raise typer.Exit(code=1)

    finder = DictionaryFinder.search_all_dirs(cfg.dictionaries.paths)
    try:
        dictionary_path = finder.require(dictionary_name)
        candidate_engine = resolve_engine(candidate or settings.candidate, dictionary_path)
        reference_engine = resolve_engine(reference or settings.reference, dictionary_path)
    except (DictionaryNotFoundError, EngineUnavailableError) as exc:
        print_error(str(exc))
        raise typer.Exit(code=1) from None
    logger.info(
        "Candidate %s vs reference %s on %s",
        candidate_engine.name,
        reference_engine.name,
        dictionary_path,
    )

    bridge = _build_bridge(input_encoding, reference_engine.get_dictionary_encoding())
    invoker = DualEngineInvoker(candidate_engine, reference_engine, bridge)
    harness = VerificationHarness(
        invoker,
        test_suggestions=suggestions or settings.suggestions,
        mismatch_sink=typer.echo if (print_false or settings.print_false) else None,
    )

    words = iter_word_files(files, input_encoding) if files else _stdin_words(input_encoding)
    corrections_path = corrections or (Path(settings.corrections) if settings.corrections else None)
    corrections_handle = (
        open_corrections(corrections_path, input_encoding) if corrections_path else None
    )
    try:
        result = harness.run(
            words,
            iter_corrections(corrections_handle) if corrections_handle is not None else None,
        )
    except InputError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1) from None
    finally:
        if corrections_handle is not None:
            corrections_handle.close()

    if result.skipped:
        logger.warning("%d sample(s) skipped after engine errors", result.skipped)

    try:
        report = render(result.confusion, result.durations, result.suggestions)
    except DegenerateStatisticsError as exc:
        print_diagnostic(exc.diagnostic)
        return

    if output_format is OutputFormat.TABLE:
        console.print(
            key_value_panel(
                {row.label: row.rendered for row in report.rows},
                title=f"{candidate_engine.name} vs {reference_engine.name}",
            )
        )
    else:
        typer.echo(report.render_text(), nl=False)
