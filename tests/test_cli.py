"""CLI tests for the verify and dicts commands."""

from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

if importlib.util.find_spec("typer") is None or importlib.util.find_spec("rich") is None:
    pytest.skip("CLI dependencies are not installed", allow_module_level=True)

from typer.testing import CliRunner

import spellparity.cli as cli
from spellparity import engines

runner = CliRunner()

KNOWN = {"cat", "the", "dog"}
CANDIDATE_SUGGESTIONS = {"teh": ["the", "ten", "tea"], "wrog": ["wrong"]}
REFERENCE_SUGGESTIONS = {"teh": ["the", "tech", "eh"], "wrog": ["wrong", "grog"]}


class SlowEngine:
    """Fake engine doing a little work so perf_counter_ns always advances."""

    max_suggestions = 15

    def __init__(self, name: str, known: set[str], suggestions: dict[str, list[str]]) -> None:
        self.name = name
        self.known = known
        self.suggestions = suggestions

    def _work(self) -> None:
        sum(range(200))

    def spell(self, word: str) -> bool:
        self._work()
        return word in self.known

    def suggest(self, word: str) -> list[str]:
        self._work()
        return list(self.suggestions.get(word, []))

    def get_dictionary_encoding(self) -> str:
        return "UTF-8"


@pytest.fixture()
def dictionary(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    directory = tmp_path / "dicts"
    directory.mkdir()
    (directory / "en_US.aff").write_text("SET UTF-8\n", encoding="utf-8")
    (directory / "en_US.dic").write_text("1\ncat\n", encoding="utf-8")
    monkeypatch.setattr(engines, "_REGISTRY", dict(engines._REGISTRY))
    engines.register_engine(
        "fake-candidate",
        lambda path: SlowEngine("fake-candidate", KNOWN - {"dog"}, CANDIDATE_SUGGESTIONS),
    )
    engines.register_engine(
        "fake-reference",
        lambda path: SlowEngine("fake-reference", KNOWN, REFERENCE_SUGGESTIONS),
    )
    monkeypatch.chdir(tmp_path)
    return directory / "en_US"


def _verify_args(dictionary: Path, *extra: str) -> list[str]:
    return [
        "verify",
        "-d",
        str(dictionary),
        "-i",
        "UTF-8",
        "--candidate",
        "fake-candidate",
        "--reference",
        "fake-reference",
        *extra,
    ]


def _report_values(output: str) -> dict[str, str]:
    values: dict[str, str] = {}
    for line in output.splitlines():
        label, _, value = line.rpartition(" ")
        if label.strip():
            values[label.strip()] = value
    return values


def test_verify_reads_stdin_and_prints_report(dictionary: Path) -> None:
    result = runner.invoke(cli.app, _verify_args(dictionary), input="cat\nwrog\nxyzzyqx\n")

    assert result.exit_code == 0, result.output
    values = _report_values(result.output)
    assert values["Total Words"] == "3"
    assert values["True Positives"] == "1"
    assert values["True Negatives"] == "2"
    assert values["Accuracy"] == "1"
    assert values["Precision"] == "1"
    assert "Total Corrections" not in values


def test_verify_prints_false_words(dictionary: Path) -> None:
    result = runner.invoke(cli.app, _verify_args(dictionary, "-f"), input="cat\ndog\n")

    assert result.exit_code == 0, result.output
    assert "FalseNegativeWord   dog" in result.output
    assert _report_values(result.output)["False Negatives"] == "1"


def test_verify_consolidates_files_with_corrections(dictionary: Path, tmp_path: Path) -> None:
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    corrections = tmp_path / "cor.tsv"
    first.write_text("cat\n", encoding="utf-8")
    second.write_text("wrog\n", encoding="utf-8")
    corrections.write_text("teh\tthe\nmalformed\nwrog\tcatalog\n", encoding="utf-8")

    result = runner.invoke(
        cli.app, _verify_args(dictionary, "-c", str(corrections), str(first), str(second))
    )

    assert result.exit_code == 0, result.output
    values = _report_values(result.output)
    assert values["Total Words"] == "4"
    assert values["Total Corrections"] == "2"
    assert values["Satisfied Suggestions Candidate"] == "1"
    assert values["Cor. Equal First Sug. Both"] == "2"
    assert values["Cor. Equal # Sug. Both"] == "1"


def test_verify_without_input_reports_no_input(dictionary: Path) -> None:
    result = runner.invoke(cli.app, _verify_args(dictionary), input="")

    assert result.exit_code == 0
    assert "No input was provided" in result.output
    assert "Total Words" not in result.output


def test_verify_missing_corrections_still_reports(dictionary: Path, tmp_path: Path) -> None:
    result = runner.invoke(
        cli.app,
        _verify_args(dictionary, "-c", str(tmp_path / "missing.tsv")),
        input="cat\n",
    )

    assert result.exit_code == 0, result.output
    assert "Total Words" in result.output
    assert "Total Corrections" not in result.output


def test_verify_missing_input_file_is_fatal(dictionary: Path, tmp_path: Path) -> None:
    result = runner.invoke(cli.app, _verify_args(dictionary, str(tmp_path / "none.txt")))

    assert result.exit_code == 1
    assert "Can't open" in result.output
    assert "Total Words" not in result.output


def test_verify_missing_dictionary_is_fatal(dictionary: Path, tmp_path: Path) -> None:
    result = runner.invoke(cli.app, _verify_args(tmp_path / "nowhere" / "xx_XX"), input="cat\n")

    assert result.exit_code == 1
    assert "not found" in result.output


def test_verify_unknown_engine_is_fatal(dictionary: Path) -> None:
    args = _verify_args(dictionary)
    args[args.index("fake-candidate")] = "aspell"
    result = runner.invoke(cli.app, args, input="cat\n")

    assert result.exit_code == 1
    assert "Unknown engine" in result.output


def test_verify_rejects_unknown_encoding(dictionary: Path) -> None:
    args = _verify_args(dictionary)
    args[args.index("UTF-8")] = "no-such-charset"
    result = runner.invoke(cli.app, args, input="cat\n")

    assert result.exit_code == 2


def test_verify_table_format(dictionary: Path) -> None:
    result = runner.invoke(
        cli.app, _verify_args(dictionary, "--format", "table"), input="cat\nteh\n"
    )

    assert result.exit_code == 0, result.output
    assert "Total Words" in result.output
    assert "fake-candidate vs fake-reference" in result.output


def test_verify_uses_config_file(dictionary: Path, tmp_path: Path) -> None:
    config = tmp_path / "spellparity.toml"
    config.write_text(
        "[verify]\n"
        f'dictionary = "{dictionary.as_posix()}"\n'
        'candidate = "fake-candidate"\n'
        'reference = "fake-reference"\n'
        'encoding = "UTF-8"\n'
        "print_false = true\n",
        encoding="utf-8",
    )

    result = runner.invoke(cli.app, ["verify"], input="dog\n")

    assert result.exit_code == 0, result.output
    assert "FalseNegativeWord   dog" in result.output


def test_dicts_lists_configured_directories(dictionary: Path, tmp_path: Path) -> None:
    config = tmp_path / "custom.toml"
    config.write_text(
        f'[dictionaries]\npaths = ["{dictionary.parent.as_posix()}"]\n', encoding="utf-8"
    )

    result = runner.invoke(cli.app, ["dicts", "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert "en_US" in result.output


def test_version_flag() -> None:
    result = runner.invoke(cli.app, ["--version"])
    assert result.exit_code == 0
    assert "spellparity" in result.output
