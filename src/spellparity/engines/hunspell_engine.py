"""Adapter for the C++ Hunspell library through the ``hunspell`` binding."""

from __future__ import annotations

from pathlib import Path

from ..errors import EngineError, EngineUnavailableError
from .base import DEFAULT_MAX_SUGGESTIONS, dictionary_files


class HunspellEngine:
    """Spell and suggest through ``hunspell.HunSpell``.

    Hunspell caps its own suggestion list at 15 entries, which is why it is
    the default reference engine for saturation checks.
    """

    name = "hunspell"
    max_suggestions = DEFAULT_MAX_SUGGESTIONS

    def __init__(self, dictionary_path: Path) -> None:
        try:
            import hunspell
        except ImportError as exc:
            raise EngineUnavailableError(
                "hunspell is not installed. Install with: pip install 'spellparity[hunspell]'"
            ) from exc

        aff_path, dic_path = dictionary_files(dictionary_path)
        try:
            self._hunspell = hunspell.HunSpell(str(dic_path), str(aff_path))
        except OSError as exc:
            raise EngineUnavailableError(
                f"hunspell could not load {dictionary_path}: {exc}"
            ) from exc

    def spell(self, word: str) -> bool:
        try:
            return bool(self._hunspell.spell(word))
        except (UnicodeError, ValueError) as exc:
            raise EngineError(self.name, word, str(exc)) from exc

    def suggest(self, word: str) -> list[str]:
        try:
            return list(self._hunspell.suggest(word))
        except (UnicodeError, ValueError) as exc:
            raise EngineError(self.name, word, str(exc)) from exc

    def get_dictionary_encoding(self) -> str:
        return str(self._hunspell.get_dic_encoding() or "ISO8859-1")
