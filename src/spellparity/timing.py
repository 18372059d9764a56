"""Back-to-back timing of two calls sharing one middle timestamp."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Clock = Callable[[], int]

DEFAULT_CLOCK: Clock = time.perf_counter_ns


@dataclass(frozen=True)
class TimedPair(Generic[T, U]):
    """Results of two calls and their elapsed nanoseconds."""

    first: T
    second: U
    first_ns: int
    second_ns: int


def measure_pair(
    first: Callable[[], T],
    second: Callable[[], U],
    *,
    clock: Clock = DEFAULT_CLOCK,
) -> TimedPair[T, U]:
    """Call ``first`` then ``second`` with nothing in between.

    Three timestamps bracket the calls; the one taken after ``first`` also
    starts the interval of ``second``. Any preparation of arguments must
    happen before calling this function.
    """
    tick_a = clock()
    first_result = first()
    tick_b = clock()
    second_result = second()
    tick_c = clock()
    return TimedPair(
        first=first_result,
        second=second_result,
        first_ns=tick_b - tick_a,
        second_ns=tick_c - tick_b,
    )
