"""Derive rates from final accumulator states and render the text report."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .accumulators import ConfusionState, DurationAccumulator, SuggestionComparisonState
from .errors import DegenerateStatisticsError
from .types import Engine, Operation

logger = logging.getLogger(__name__)

NO_INPUT_MESSAGE = "No input was provided"
ZERO_DURATION_MESSAGE = "Invalid duration of 0 nanoseconds for the candidate engine"


def format_value(value: int | float) -> str:
    """Integers verbatim, floats with six significant digits."""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    return f"{value:.6g}"


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator


@dataclass(frozen=True)
class ReportRow:
    key: str
    label: str
    value: int | float

    @property
    def rendered(self) -> str:
        return format_value(self.value)


@dataclass(frozen=True)
class Report:
    """Ordered metrics produced once at stream end."""

    rows: tuple[ReportRow, ...]

    @property
    def values(self) -> Mapping[str, int | float]:
        return MappingProxyType({row.key: row.value for row in self.rows})

    @property
    def metrics(self) -> Mapping[str, str]:
        return MappingProxyType({row.key: row.rendered for row in self.rows})

    @property
    def has_suggestions(self) -> bool:
        return "total_cor" in self.values

    def render_text(self) -> str:
        width = max((len(row.label) for row in self.rows), default=0) + 2
        return "".join(f"{row.label.ljust(width)}{row.rendered}\n" for row in self.rows)


def _spelling_rows(confusion: ConfusionState, durations: DurationAccumulator) -> list[ReportRow]:
    total = confusion.total
    cand = durations.get(Engine.CANDIDATE, Operation.SPELL)
    ref = durations.get(Engine.REFERENCE, Operation.SPELL)
    return [
        ReportRow("total", "Total Words", total),
        ReportRow("positives_candidate", "Positives Candidate", confusion.positives_candidate),
        ReportRow("positives_reference", "Positives Reference", confusion.positives_reference),
        ReportRow("negatives_candidate", "Negatives Candidate", confusion.negatives_candidate),
        ReportRow("negatives_reference", "Negatives Reference", confusion.negatives_reference),
        ReportRow("true_pos", "True Positives", confusion.true_pos),
        ReportRow("true_pos_rate", "True Positive Rate", confusion.true_pos / total),
        ReportRow("true_neg", "True Negatives", confusion.true_neg),
        ReportRow("true_neg_rate", "True Negative Rate", confusion.true_neg / total),
        ReportRow("false_pos", "False Positives", confusion.false_pos),
        ReportRow("false_pos_rate", "False Positive Rate", confusion.false_pos / total),
        ReportRow("false_neg", "False Negatives", confusion.false_neg),
        ReportRow("false_neg_rate", "False Negative Rate", confusion.false_neg / total),
        ReportRow("accuracy", "Accuracy", (confusion.true_pos + confusion.true_neg) / total),
        ReportRow(
            "precision",
            "Precision",
            _ratio(confusion.true_pos, confusion.true_pos + confusion.false_pos),
        ),
        ReportRow("duration_candidate_total", "Tot. Duration Candidate", cand.total),
        ReportRow("duration_reference_total", "Tot. Duration Reference", ref.total),
        ReportRow("duration_candidate_min", "Min. Duration Candidate", cand.minimum),
        ReportRow("duration_reference_min", "Min. Duration Reference", ref.minimum),
        ReportRow("duration_candidate_avg", "Ave. Duration Candidate", cand.average),
        ReportRow("duration_reference_avg", "Ave. Duration Reference", ref.average),
        ReportRow("duration_candidate_max", "Max. Duration Candidate", cand.maximum),
        ReportRow("duration_reference_max", "Max. Duration Reference", ref.maximum),
        ReportRow("speedup", "Speedup Rate", ref.total / cand.total),
    ]


def _suggestion_rows(
    sugs: SuggestionComparisonState, durations: DurationAccumulator
) -> list[ReportRow]:
    total_cor = sugs.total_cor
    cand = durations.get(Engine.CANDIDATE, Operation.SUGGEST)
    ref = durations.get(Engine.REFERENCE, Operation.SUGGEST)
    rate_candidate = sugs.sug_candidate / total_cor
    rate_reference = sugs.sug_reference / total_cor
    return [
        ReportRow("total_cor", "Total Corrections", total_cor),
        ReportRow("sug_candidate", "Satisfied Suggestions Candidate", sugs.sug_candidate),
        ReportRow("sug_reference", "Satisfied Suggestions Reference", sugs.sug_reference),
        ReportRow("correction_rate_candidate", "Correction Rate Sat.S. Candidate", rate_candidate),
        ReportRow("correction_rate_reference", "Correction Rate Sat.S. Reference", rate_reference),
        ReportRow(
            "correction_improvement_rate",
            "Correction Improvement Rate",
            _ratio(rate_candidate, rate_reference),
        ),
        ReportRow("total_sug_none", "Cor. No Suggestions Both", sugs.total_sug_none),
        ReportRow(
            "total_sug_none_candidate", "Cor. No Suggestions Candidate", sugs.total_sug_none_candidate
        ),
        ReportRow(
            "total_sug_none_reference", "Cor. No Suggestions Reference", sugs.total_sug_none_reference
        ),
        ReportRow("total_sug_some", "Cor. With Suggestions Both", total_cor - sugs.total_sug_none),
        ReportRow(
            "total_sug_some_candidate",
            "Cor. With Suggestions Candidate",
            total_cor - sugs.total_sug_none_candidate,
        ),
        ReportRow(
            "total_sug_some_reference",
            "Cor. With Suggestions Reference",
            total_cor - sugs.total_sug_none_reference,
        ),
        ReportRow("total_sug_equal", "Cor. Equal # Sug. Both", sugs.total_sug_equal),
        ReportRow(
            "total_sug_more_candidate", "Cor. More # Sug. Candidate", sugs.total_sug_more_candidate
        ),
        ReportRow(
            "total_sug_more_reference", "Cor. More # Sug. Reference", sugs.total_sug_more_reference
        ),
        ReportRow("total_sug_max", "Cor. Maximum # Sug. Both", sugs.total_sug_max),
        ReportRow(
            "total_sug_max_candidate", "Cor. Maximum # Sug. Candidate", sugs.total_sug_max_candidate
        ),
        ReportRow(
            "total_sug_max_reference", "Cor. Maximum # Sug. Reference", sugs.total_sug_max_reference
        ),
        ReportRow("total_sug_equal_first", "Cor. Equal First Sug. Both", sugs.total_sug_equal_first),
        ReportRow(
            "total_sug_equal_first_rate",
            "Cor. Equal First Sug. Both Rate",
            sugs.total_sug_equal_first / total_cor,
        ),
        ReportRow("duration_sug_candidate_total", "Tot. Duration Sug. Candidate", cand.total),
        ReportRow("duration_sug_reference_total", "Tot. Duration Sug. Reference", ref.total),
        ReportRow("duration_sug_candidate_min", "Min. Duration Sug. Candidate", cand.minimum),
        ReportRow("duration_sug_reference_min", "Min. Duration Sug. Reference", ref.minimum),
        ReportRow("duration_sug_candidate_avg", "Ave. Duration Sug. Candidate", cand.average),
        ReportRow("duration_sug_reference_avg", "Ave. Duration Sug. Reference", ref.average),
        ReportRow("duration_sug_candidate_max", "Max. Duration Sug. Candidate", cand.maximum),
        ReportRow("duration_sug_reference_max", "Max. Duration Sug. Reference", ref.maximum),
        ReportRow("suggestion_speedup", "Suggestion Speedup Rate", ref.total / cand.total),
    ]


def render(
    confusion: ConfusionState,
    durations: DurationAccumulator,
    suggestions: SuggestionComparisonState | None = None,
) -> Report:
    """Build the report, or raise when the spelling statistics are degenerate.

    The suggestion block is included only when corrections were processed and
    the candidate's suggestion timing is non-zero.
    """
    if confusion.total == 0:
        raise DegenerateStatisticsError(NO_INPUT_MESSAGE)
    if durations.get(Engine.CANDIDATE, Operation.SPELL).total == 0:
        logger.debug("Raw counters before abort: %s", confusion)
        raise DegenerateStatisticsError(ZERO_DURATION_MESSAGE)

    rows = _spelling_rows(confusion, durations)
    if (
        suggestions is not None
        and suggestions.total_cor > 0
        and durations.get(Engine.CANDIDATE, Operation.SUGGEST).total != 0
    ):
        rows.extend(_suggestion_rows(suggestions, durations))
    elif suggestions is not None and suggestions.total_cor > 0:
        logger.warning("Suggestion durations are 0 nanoseconds, suggestion block omitted")
    return Report(rows=tuple(rows))
