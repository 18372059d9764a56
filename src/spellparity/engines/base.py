"""Capability interface every spell-checking engine exposes to the harness."""

from __future__ import annotations

from pathlib import Path
from typing import Final, Protocol, runtime_checkable

DEFAULT_MAX_SUGGESTIONS: Final[int] = 15


@runtime_checkable
class SpellEngine(Protocol):
    """Black-box spelling engine."""

    name: str
    max_suggestions: int

    def spell(self, word: str) -> bool: ...

    def suggest(self, word: str) -> list[str]: ...

    def get_dictionary_encoding(self) -> str: ...


class EngineFactory(Protocol):
    def __call__(self, dictionary_path: Path) -> SpellEngine: ...


def dictionary_files(dictionary_path: Path) -> tuple[Path, Path]:
    """Return the ``(.aff, .dic)`` pair for a dictionary path prefix."""
    return (
        dictionary_path.with_name(dictionary_path.name + ".aff"),
        dictionary_path.with_name(dictionary_path.name + ".dic"),
    )
