"""Running aggregates owned by a single verification run."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .types import Engine, Operation

MAX_DURATION_NS = 2**63 - 1


@dataclass
class ConfusionState:
    """Confusion matrix of candidate verdicts against reference verdicts.

    The reference engine is ground truth: a reference ``True`` is a positive.
    """

    true_pos: int = 0
    true_neg: int = 0
    false_pos: int = 0
    false_neg: int = 0

    @property
    def total(self) -> int:
        return self.true_pos + self.true_neg + self.false_pos + self.false_neg

    @property
    def positives_candidate(self) -> int:
        return self.true_pos + self.false_pos

    @property
    def positives_reference(self) -> int:
        return self.true_pos + self.false_neg

    @property
    def negatives_candidate(self) -> int:
        return self.true_neg + self.false_neg

    @property
    def negatives_reference(self) -> int:
        return self.true_neg + self.false_pos

    def record(self, candidate: bool, reference: bool) -> str:
        """Count one pair of verdicts and return the name of the bumped counter."""
        if reference:
            if candidate:
                self.true_pos += 1
                return "true_pos"
            self.false_neg += 1
            return "false_neg"
        if candidate:
            self.false_pos += 1
            return "false_pos"
        self.true_neg += 1
        return "true_neg"


@dataclass
class DurationStats:
    """Total, extremes and count of elapsed nanoseconds for one bucket."""

    total: int = 0
    count: int = 0
    minimum: int = MAX_DURATION_NS
    maximum: int = 0

    @property
    def average(self) -> int:
        if self.count == 0:
            return 0
        return self.total // self.count

    def record(self, elapsed_ns: int) -> None:
        self.total += elapsed_ns
        self.count += 1
        if elapsed_ns < self.minimum:
            self.minimum = elapsed_ns
        if elapsed_ns > self.maximum:
            self.maximum = elapsed_ns


@dataclass
class DurationAccumulator:
    """One :class:`DurationStats` per (engine, operation) pair."""

    buckets: dict[tuple[Engine, Operation], DurationStats] = field(
        default_factory=lambda: {
            (engine, operation): DurationStats() for operation in Operation for engine in Engine
        }
    )

    def record(self, engine: Engine, operation: Operation, elapsed_ns: int) -> None:
        self.buckets[(engine, operation)].record(elapsed_ns)

    def get(self, engine: Engine, operation: Operation) -> DurationStats:
        return self.buckets[(engine, operation)]


@dataclass
class SuggestionComparisonState:
    """Independent tallies comparing two suggestion lists against an expected word."""

    max_suggestions: int = 15
    total_cor: int = 0
    sug_candidate: int = 0
    sug_reference: int = 0
    total_sug_equal_first: int = 0
    total_sug_equal: int = 0
    total_sug_more_candidate: int = 0
    total_sug_more_reference: int = 0
    total_sug_none: int = 0
    total_sug_none_candidate: int = 0
    total_sug_none_reference: int = 0
    total_sug_max: int = 0
    total_sug_max_candidate: int = 0
    total_sug_max_reference: int = 0

    def record(
        self,
        candidate: Sequence[str],
        reference: Sequence[str],
        expected: str,
    ) -> None:
        self.total_cor += 1
        if expected in candidate:
            self.sug_candidate += 1
        if expected in reference:
            self.sug_reference += 1

        if candidate and reference and candidate[0] == reference[0]:
            self.total_sug_equal_first += 1

        if len(candidate) == len(reference):
            self.total_sug_equal += 1
        elif len(candidate) > len(reference):
            self.total_sug_more_candidate += 1
        else:
            self.total_sug_more_reference += 1

        if not candidate:
            self.total_sug_none_candidate += 1
        if not reference:
            self.total_sug_none_reference += 1
        if not candidate and not reference:
            self.total_sug_none += 1

        cap = self.max_suggestions
        if len(candidate) == cap:
            self.total_sug_max_candidate += 1
        if len(reference) == cap:
            self.total_sug_max_reference += 1
        if len(candidate) == cap and len(reference) == cap:
            self.total_sug_max += 1

    def counters(self) -> dict[str, int]:
        """Return every tally bounded by ``total_cor``."""
        return {
            name: value
            for name, value in vars(self).items()
            if name not in {"max_suggestions", "total_cor"}
        }
