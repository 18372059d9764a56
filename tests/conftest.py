"""Shared fakes for harness tests."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence

import pytest

from spellparity.errors import EngineError


class FakeEngine:
    """Deterministic in-memory engine."""

    def __init__(
        self,
        name: str,
        known: Iterable[str] = (),
        suggestions: Mapping[str, Sequence[str]] | None = None,
        *,
        encoding: str = "UTF-8",
        max_suggestions: int = 15,
        failing: Iterable[str] = (),
        calls: list[tuple[str, str, str]] | None = None,
    ) -> None:
        self.name = name
        self.known = set(known)
        self.suggestions = dict(suggestions or {})
        self.encoding = encoding
        self.max_suggestions = max_suggestions
        self.failing = set(failing)
        self.calls = calls if calls is not None else []

    def spell(self, word: str) -> bool:
        self.calls.append((self.name, "spell", word))
        if word in self.failing:
            raise EngineError(self.name, word, "simulated failure")
        return word in self.known

    def suggest(self, word: str) -> list[str]:
        self.calls.append((self.name, "suggest", word))
        if word in self.failing:
            raise EngineError(self.name, word, "simulated failure")
        return list(self.suggestions.get(word, ()))[: self.max_suggestions]

    def get_dictionary_encoding(self) -> str:
        return self.encoding


class StepClock:
    """Clock advancing by a fixed step on every reading."""

    def __init__(self, step: int = 10, start: int = 1_000) -> None:
        self.step = step
        self.now = start
        self.readings = 0

    def __call__(self) -> int:
        self.readings += 1
        self.now += self.step
        return self.now


class ScriptedClock:
    """Clock returning pre-recorded timestamps."""

    def __init__(self, ticks: Sequence[int]) -> None:
        self._ticks: Iterator[int] = iter(ticks)

    def __call__(self) -> int:
        return next(self._ticks)


@pytest.fixture()
def fake_engine() -> type[FakeEngine]:
    return FakeEngine


@pytest.fixture()
def step_clock() -> StepClock:
    return StepClock()


@pytest.fixture()
def scripted_clock() -> type[ScriptedClock]:
    return ScriptedClock
