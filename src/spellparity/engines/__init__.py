"""Spell-checking engines the harness can drive."""

from __future__ import annotations

from pathlib import Path

from ..errors import EngineUnavailableError
from .base import DEFAULT_MAX_SUGGESTIONS, EngineFactory, SpellEngine, dictionary_files
from .hunspell_engine import HunspellEngine
from .spylls_engine import SpyllsEngine

_REGISTRY: dict[str, EngineFactory] = {
    "hunspell": HunspellEngine,
    "spylls": SpyllsEngine,
}


def register_engine(name: str, factory: EngineFactory) -> None:
    """Make ``factory`` available under ``name`` for ``--candidate``/``--reference``."""
    _REGISTRY[name.strip().lower()] = factory


def available_engines() -> list[str]:
    return sorted(_REGISTRY)


def resolve_engine(name: str, dictionary_path: Path) -> SpellEngine:
    """Build the engine registered as ``name`` on the given dictionary."""
    factory = _REGISTRY.get(name.strip().lower())
    if factory is None:
        raise EngineUnavailableError(
            f"Unknown engine {name!r}. Available engines: {', '.join(available_engines())}"
        )
    return factory(dictionary_path)


__all__ = [
    "DEFAULT_MAX_SUGGESTIONS",
    "EngineFactory",
    "HunspellEngine",
    "SpellEngine",
    "SpyllsEngine",
    "available_engines",
    "dictionary_files",
    "register_engine",
    "resolve_engine",
]
