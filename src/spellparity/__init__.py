"""spellparity: verify a candidate spell checker against a reference engine."""

from __future__ import annotations

from .accumulators import (
    ConfusionState,
    DurationAccumulator,
    DurationStats,
    SuggestionComparisonState,
)
from .encoding import EncodingBridge
from .errors import (
    DegenerateStatisticsError,
    DictionaryNotFoundError,
    EngineError,
    EngineUnavailableError,
    InputError,
    SpellParityError,
)
from .harness import VerificationHarness, VerificationResult
from .invoker import DualEngineInvoker
from .report import Report, render
from .types import Engine, EngineVerdict, Operation, SampleSource, WordSample

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfusionState",
    "DurationAccumulator",
    "DurationStats",
    "SuggestionComparisonState",
    "EncodingBridge",
    "DualEngineInvoker",
    "VerificationHarness",
    "VerificationResult",
    "Report",
    "render",
    "Engine",
    "EngineVerdict",
    "Operation",
    "SampleSource",
    "WordSample",
    "SpellParityError",
    "InputError",
    "DictionaryNotFoundError",
    "EngineUnavailableError",
    "EngineError",
    "DegenerateStatisticsError",
]
