"""Typed objects flowing through one verification run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Engine(str, Enum):
    """Role an engine plays in the comparison."""

    CANDIDATE = "candidate"
    REFERENCE = "reference"


class Operation(str, Enum):
    SPELL = "spell"
    SUGGEST = "suggest"


class SampleSource(str, Enum):
    PRIMARY = "primary"
    CORRECTIONS = "corrections"


@dataclass(frozen=True)
class WordSample:
    """One input line, parsed."""

    word: str
    source: SampleSource = SampleSource.PRIMARY
    expected: str | None = None
    line_number: int = 0

    @property
    def is_correction(self) -> bool:
        return self.source is SampleSource.CORRECTIONS


@dataclass(frozen=True)
class EngineVerdict:
    """Outcome of one engine call on one sample."""

    engine: Engine
    operation: Operation
    elapsed_ns: int
    correct: bool = False
    suggestions: tuple[str, ...] = ()
