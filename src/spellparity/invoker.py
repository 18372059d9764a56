"""Invoke the same operation on both engines, back to back, and time it."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .encoding import EncodingBridge
from .engines.base import SpellEngine
from .errors import EngineError
from .timing import DEFAULT_CLOCK, Clock, measure_pair
from .types import Engine, EngineVerdict, Operation, WordSample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerdictPair:
    candidate: EngineVerdict
    reference: EngineVerdict


class DualEngineInvoker:
    """Run the candidate engine, then the reference engine, on one sample.

    The word handed to the reference engine is converted by the encoding
    bridge before the first timestamp is taken, so conversion cost never
    lands in either engine's measured interval. Engine failures skip the
    sample with a warning and return ``None``.
    """

    def __init__(
        self,
        candidate: SpellEngine,
        reference: SpellEngine,
        bridge: EncodingBridge,
        *,
        clock: Clock = DEFAULT_CLOCK,
    ) -> None:
        self.candidate = candidate
        self.reference = reference
        self.bridge = bridge
        self.clock = clock
        self.skipped = 0

    def spell(self, sample: WordSample) -> VerdictPair | None:
        word = sample.word
        reference_word = self.bridge.to_engine_encoding(word)
        try:
            timed = measure_pair(
                lambda: self.candidate.spell(word),
                lambda: self.reference.spell(reference_word),
                clock=self.clock,
            )
        except EngineError as exc:
            self._skip(sample, Operation.SPELL, exc)
            return None
        return VerdictPair(
            candidate=EngineVerdict(
                engine=Engine.CANDIDATE,
                operation=Operation.SPELL,
                elapsed_ns=timed.first_ns,
                correct=bool(timed.first),
            ),
            reference=EngineVerdict(
                engine=Engine.REFERENCE,
                operation=Operation.SPELL,
                elapsed_ns=timed.second_ns,
                correct=bool(timed.second),
            ),
        )

    def suggest(self, sample: WordSample) -> VerdictPair | None:
        word = sample.word
        reference_word = self.bridge.to_engine_encoding(word)
        try:
            timed = measure_pair(
                lambda: self.candidate.suggest(word),
                lambda: self.reference.suggest(reference_word),
                clock=self.clock,
            )
        except EngineError as exc:
            self._skip(sample, Operation.SUGGEST, exc)
            return None
        return VerdictPair(
            candidate=EngineVerdict(
                engine=Engine.CANDIDATE,
                operation=Operation.SUGGEST,
                elapsed_ns=timed.first_ns,
                suggestions=tuple(timed.first),
            ),
            reference=EngineVerdict(
                engine=Engine.REFERENCE,
                operation=Operation.SUGGEST,
                elapsed_ns=timed.second_ns,
                suggestions=tuple(timed.second),
            ),
        )

    def _skip(self, sample: WordSample, operation: Operation, exc: EngineError) -> None:
        self.skipped += 1
        logger.warning(
            "Skipping %s line %d (%s): %s",
            sample.source.value,
            sample.line_number,
            operation.value,
            exc,
        )
