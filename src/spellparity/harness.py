"""Sequential sample pipeline feeding the run's accumulators."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .accumulators import ConfusionState, DurationAccumulator, SuggestionComparisonState
from .invoker import DualEngineInvoker, VerdictPair
from .types import Engine, Operation, WordSample

logger = logging.getLogger(__name__)

MismatchSink = Callable[[str], None]

_MISMATCH_LABELS = {
    "false_neg": "FalseNegativeWord   ",
    "false_pos": "FalsePositiveWord   ",
}


@dataclass
class VerificationResult:
    """Final accumulator states of one run, handed read-only to the report."""

    confusion: ConfusionState
    durations: DurationAccumulator
    suggestions: SuggestionComparisonState | None
    skipped: int = 0


class VerificationHarness:
    """Drive both engines over the primary stream, then the corrections file.

    Corrections lines feed the same confusion and spelling-duration
    accumulators as primary words, and additionally the suggestion comparator.
    Samples are processed strictly one at a time in input order.
    """

    def __init__(
        self,
        invoker: DualEngineInvoker,
        *,
        test_suggestions: bool = False,
        mismatch_sink: MismatchSink | None = None,
    ) -> None:
        self.invoker = invoker
        self.test_suggestions = test_suggestions
        self.mismatch_sink = mismatch_sink
        self.confusion = ConfusionState()
        self.durations = DurationAccumulator()
        self.suggestions = SuggestionComparisonState(
            max_suggestions=invoker.reference.max_suggestions
        )

    def _record_spelling(self, sample: WordSample) -> VerdictPair | None:
        pair = self.invoker.spell(sample)
        if pair is None:
            return None
        self.durations.record(Engine.CANDIDATE, Operation.SPELL, pair.candidate.elapsed_ns)
        self.durations.record(Engine.REFERENCE, Operation.SPELL, pair.reference.elapsed_ns)
        outcome = self.confusion.record(pair.candidate.correct, pair.reference.correct)
        label = _MISMATCH_LABELS.get(outcome)
        if label is not None and self.mismatch_sink is not None:
            self.mismatch_sink(label + sample.word)
        return pair

    def _record_suggestion_timing(self, pair: VerdictPair) -> None:
        self.durations.record(Engine.CANDIDATE, Operation.SUGGEST, pair.candidate.elapsed_ns)
        self.durations.record(Engine.REFERENCE, Operation.SUGGEST, pair.reference.elapsed_ns)

    def process_word(self, sample: WordSample) -> None:
        pair = self._record_spelling(sample)
        if pair is None or not self.test_suggestions:
            return
        if pair.candidate.correct or pair.reference.correct:
            return
        sugs = self.invoker.suggest(sample)
        if sugs is not None:
            self._record_suggestion_timing(sugs)

    def process_correction(self, sample: WordSample) -> None:
        if sample.expected is None:
            raise ValueError(f"Corrections sample on line {sample.line_number} has no expected word")
        self._record_spelling(sample)
        sugs = self.invoker.suggest(sample)
        if sugs is None:
            return
        self._record_suggestion_timing(sugs)
        self.suggestions.record(
            sugs.candidate.suggestions,
            sugs.reference.suggestions,
            sample.expected,
        )

    def run(
        self,
        words: Iterable[WordSample],
        corrections: Iterable[WordSample] | None = None,
    ) -> VerificationResult:
        first = True
        for sample in words:
            if first:
                logger.debug("First word (line %d): %r", sample.line_number, sample.word)
                first = False
            self.process_word(sample)

        if corrections is not None:
            first = True
            for sample in corrections:
                if first:
                    logger.debug(
                        "First correction (line %d): %r -> %r",
                        sample.line_number,
                        sample.word,
                        sample.expected,
                    )
                    first = False
                self.process_correction(sample)

        return VerificationResult(
            confusion=self.confusion,
            durations=self.durations,
            suggestions=self.suggestions if corrections is not None else None,
            skipped=self.invoker.skipped,
        )
