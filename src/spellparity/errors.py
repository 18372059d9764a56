"""Custom exceptions for the verification harness."""

from __future__ import annotations


class SpellParityError(RuntimeError):
    """Base exception for all spellparity errors."""

    error_code = "SP_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(f"{self.error_code}: {message}")


class InputError(SpellParityError):
    """Raised when a primary input source cannot be read."""

    error_code = "SP_INPUT"


class DictionaryNotFoundError(SpellParityError):
    """Raised when no dictionary pair can be resolved for a name."""

    error_code = "SP_DICTIONARY"

    def __init__(self, name: str, searched: list[str] | None = None) -> None:
        self.name = name
        self.searched = searched
        message = f"Dictionary {name!r} not found"
        if searched:
            message += f" (searched: {', '.join(searched)})"
        super().__init__(message)


class EngineUnavailableError(SpellParityError):
    """Raised when an engine cannot be constructed."""

    error_code = "SP_ENGINE_UNAVAILABLE"


class EngineError(SpellParityError):
    """Raised when an engine fails on a single word."""

    error_code = "SP_ENGINE"

    def __init__(self, engine: str, word: str, reason: str) -> None:
        self.engine = engine
        self.word = word
        super().__init__(f"{engine} failed on {word!r}: {reason}")


class DegenerateStatisticsError(SpellParityError):
    """Raised when accumulated data cannot yield meaningful rates."""

    error_code = "SP_DEGENERATE"

    def __init__(self, message: str) -> None:
        self.diagnostic = message
        super().__init__(message)
