"""Tests for the sequential verification pipeline."""

from __future__ import annotations

import logging

import pytest

from spellparity.encoding import EncodingBridge
from spellparity.errors import EngineError
from spellparity.harness import VerificationHarness
from spellparity.invoker import DualEngineInvoker
from spellparity.report import render
from spellparity.types import Engine, Operation, SampleSource, WordSample


def _words(*words: str) -> list[WordSample]:
    return [WordSample(word, line_number=i) for i, word in enumerate(words, start=1)]


def _corrections(*pairs: tuple[str, str]) -> list[WordSample]:
    return [
        WordSample(word, SampleSource.CORRECTIONS, expected, line_number=i)
        for i, (word, expected) in enumerate(pairs, start=1)
    ]


def _harness(candidate, reference, clock, **kwargs) -> VerificationHarness:
    invoker = DualEngineInvoker(
        candidate, reference, EncodingBridge("utf-8", "utf-8"), clock=clock
    )
    return VerificationHarness(invoker, **kwargs)


def test_agreeing_engines_scenario(fake_engine, step_clock) -> None:
    candidate = fake_engine("cand", known={"cat"})
    reference = fake_engine("ref", known={"cat"})

    result = _harness(candidate, reference, step_clock).run(_words("cat", "wrog", "xyzzyqx"))
    confusion = result.confusion

    assert (confusion.true_pos, confusion.true_neg, confusion.false_pos, confusion.false_neg) == (
        1,
        2,
        0,
        0,
    )
    assert result.suggestions is None
    values = render(result.confusion, result.durations).values
    assert values["accuracy"] == 1.0
    assert values["precision"] == 1.0


def test_every_sample_contributes_one_duration_per_engine(fake_engine, step_clock) -> None:
    candidate = fake_engine("cand", known={"a", "b"})
    reference = fake_engine("ref", known={"a", "c"})

    result = _harness(candidate, reference, step_clock).run(_words("a", "b", "c", "d"))

    for engine in Engine:
        stats = result.durations.get(engine, Operation.SPELL)
        assert stats.count == result.confusion.total == 4
        assert stats.minimum <= stats.total / stats.count <= stats.maximum
    assert result.durations.get(Engine.CANDIDATE, Operation.SUGGEST).count == 0


def test_mismatches_are_reported_to_sink(fake_engine, step_clock) -> None:
    lines: list[str] = []
    candidate = fake_engine("cand", known={"teh"})
    reference = fake_engine("ref", known={"the"})

    _harness(candidate, reference, step_clock, mismatch_sink=lines.append).run(
        _words("teh", "the")
    )

    assert lines == ["FalsePositiveWord   teh", "FalseNegativeWord   the"]


def test_corrections_fold_into_confusion_and_suggestions(fake_engine, step_clock) -> None:
    candidate = fake_engine(
        "cand", known={"cat"}, suggestions={"teh": ["the", "ten", "tea"], "wrog": ["wrong"]}
    )
    reference = fake_engine(
        "ref", known={"cat"}, suggestions={"teh": ["the", "tech", "eh"], "wrog": ["wrong", "grog"]}
    )

    result = _harness(candidate, reference, step_clock).run(
        _words("cat", "wrog", "xyzzyqx"),
        _corrections(("teh", "the"), ("wrog", "catalog")),
    )

    assert result.confusion.total == 5
    assert result.confusion.true_neg == 4
    sugs = result.suggestions
    assert sugs is not None
    assert sugs.total_cor == 2
    assert sugs.sug_candidate == 1
    assert sugs.sug_reference == 1
    assert sugs.total_sug_equal_first == 2
    assert sugs.total_sug_equal == 1
    assert sugs.total_sug_more_reference == 1
    assert result.durations.get(Engine.CANDIDATE, Operation.SUGGEST).count == 2

    report = render(result.confusion, result.durations, sugs)
    assert report.has_suggestions
    assert report.values["suggestion_speedup"] == pytest.approx(1.0)


def test_saturation_cap_comes_from_reference_engine(fake_engine, step_clock) -> None:
    many = [f"w{i}" for i in range(5)]
    candidate = fake_engine("cand", suggestions={"x": many}, max_suggestions=15)
    reference = fake_engine("ref", suggestions={"x": many}, max_suggestions=5)

    result = _harness(candidate, reference, step_clock).run([], _corrections(("x", "w9")))

    assert result.suggestions is not None
    assert result.suggestions.max_suggestions == 5
    assert result.suggestions.total_sug_max == 1


def test_suggestion_mode_times_words_both_engines_reject(fake_engine, step_clock) -> None:
    calls: list[tuple[str, str, str]] = []
    candidate = fake_engine("cand", known={"cat"}, calls=calls)
    reference = fake_engine("ref", known={"cat", "dog"}, calls=calls)

    result = _harness(candidate, reference, step_clock, test_suggestions=True).run(
        _words("cat", "dog", "zzz")
    )

    suggested = [word for _, op, word in calls if op == "suggest"]
    assert suggested == ["zzz", "zzz"]
    assert result.durations.get(Engine.REFERENCE, Operation.SUGGEST).count == 1
    assert result.suggestions is None


def test_failing_sample_is_skipped_without_counting(
    fake_engine, step_clock, caplog: pytest.LogCaptureFixture
) -> None:
    candidate = fake_engine("cand", known={"ok"}, failing={"bad"})
    reference = fake_engine("ref", known={"ok"})

    with caplog.at_level(logging.WARNING):
        result = _harness(candidate, reference, step_clock).run(_words("ok", "bad", "ok"))

    assert result.confusion.total == 2
    assert result.skipped == 1
    assert result.durations.get(Engine.CANDIDATE, Operation.SPELL).count == 2
    assert "Skipping primary line 2" in caplog.text


def test_failed_suggestion_does_not_count_correction(fake_engine, step_clock) -> None:
    class NoSuggestions(fake_engine):
        def suggest(self, word: str) -> list[str]:
            raise EngineError(self.name, word, "suggestion backend down")

    candidate = fake_engine("cand")
    reference = NoSuggestions("ref")

    result = _harness(candidate, reference, step_clock).run([], _corrections(("teh", "the")))

    assert result.confusion.total == 1
    assert result.suggestions is not None
    assert result.suggestions.total_cor == 0


def test_repeated_runs_yield_identical_counters(fake_engine, step_clock) -> None:
    def run_once():
        candidate = fake_engine("cand", known={"a", "b"}, suggestions={"c": ["a", "b"]})
        reference = fake_engine("ref", known={"a"}, suggestions={"c": ["b"]})
        return _harness(candidate, reference, step_clock).run(
            _words("a", "b", "c"), _corrections(("c", "b"), ("d", "a"))
        )

    first, second = run_once(), run_once()
    assert first.confusion == second.confusion
    assert first.suggestions == second.suggestions


def test_empty_input_yields_no_samples(fake_engine, step_clock) -> None:
    result = _harness(fake_engine("cand"), fake_engine("ref"), step_clock).run([])
    assert result.confusion.total == 0
    assert step_clock.readings == 0


def test_first_word_is_logged_in_encounter_order(
    fake_engine, step_clock, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.DEBUG, logger="spellparity.harness"):
        _harness(fake_engine("cand"), fake_engine("ref"), step_clock).run(_words("zeta", "alpha"))
    assert "First word (line 1): 'zeta'" in caplog.text
