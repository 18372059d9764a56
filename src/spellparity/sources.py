"""Readers for the primary word stream and the corrections TSV file."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from .errors import InputError
from .types import SampleSource, WordSample

logger = logging.getLogger(__name__)


def _strip_newline(line: str) -> str:
    return line.rstrip("\r\n")


def iter_words(stream: Iterable[str]) -> Iterator[WordSample]:
    """Yield one sample per line; the whole line is the word."""
    for line_number, line in enumerate(stream, start=1):
        yield WordSample(word=_strip_newline(line), line_number=line_number)


def iter_word_files(paths: Iterable[Path], encoding: str) -> Iterator[WordSample]:
    """Yield samples from each file in turn, failing on the first unreadable one."""
    for path in paths:
        try:
            handle = path.open("r", encoding=encoding, errors="replace", newline="")
        except OSError as exc:
            raise InputError(f"Can't open {path}: {exc.strerror or exc}") from exc
        with handle:
            yield from iter_words(handle)


def parse_correction(line: str, line_number: int) -> WordSample | None:
    """Parse ``<word>\\t<expected>``; lines without a tab are malformed."""
    fields = _strip_newline(line).split("\t")
    if len(fields) < 2:
        logger.warning("Skipping malformed corrections line %d: no tab separator", line_number)
        return None
    if len(fields) > 2:
        logger.debug("Ignoring extra fields on corrections line %d", line_number)
    return WordSample(
        word=fields[0],
        source=SampleSource.CORRECTIONS,
        expected=fields[1],
        line_number=line_number,
    )


def iter_corrections(stream: TextIO) -> Iterator[WordSample]:
    for line_number, line in enumerate(stream, start=1):
        sample = parse_correction(line, line_number)
        if sample is not None:
            yield sample


def open_corrections(path: Path, encoding: str) -> TextIO | None:
    """Open the corrections file, or warn and return ``None`` when unreadable."""
    try:
        return path.open("r", encoding=encoding, errors="replace", newline="")
    except OSError as exc:
        logger.warning(
            "Can't open corrections file %s (%s), suggestion comparison is skipped",
            path,
            exc.strerror or exc,
        )
        return None
