"""Adapter for spylls, the pure-Python port of Hunspell."""

from __future__ import annotations

from itertools import islice
from pathlib import Path

from ..errors import EngineError, EngineUnavailableError
from .base import DEFAULT_MAX_SUGGESTIONS


class SpyllsEngine:
    """Spell and suggest through ``spylls.hunspell.Dictionary``."""

    name = "spylls"

    def __init__(
        self, dictionary_path: Path, max_suggestions: int = DEFAULT_MAX_SUGGESTIONS
    ) -> None:
        try:
            from spylls.hunspell import Dictionary
        except ImportError as exc:
            raise EngineUnavailableError(
                "spylls is not installed. Install with: pip install spylls"
            ) from exc

        try:
            self._dictionary = Dictionary.from_files(str(dictionary_path))
        except (OSError, ValueError, LookupError) as exc:
            raise EngineUnavailableError(
                f"spylls could not load {dictionary_path}: {exc}"
            ) from exc
        self.max_suggestions = max_suggestions

    def spell(self, word: str) -> bool:
        try:
            return bool(self._dictionary.lookup(word))
        except (UnicodeError, ValueError, LookupError) as exc:
            raise EngineError(self.name, word, str(exc)) from exc

    def suggest(self, word: str) -> list[str]:
        try:
            return list(islice(self._dictionary.suggest(word), self.max_suggestions))
        except (UnicodeError, ValueError, LookupError) as exc:
            raise EngineError(self.name, word, str(exc)) from exc

    def get_dictionary_encoding(self) -> str:
        return str(getattr(self._dictionary.aff, "SET", None) or "UTF-8")
