"""Encoding bridge between the input stream and an engine's dictionary charset."""

from __future__ import annotations

import codecs
import locale
import logging

logger = logging.getLogger(__name__)


def default_input_encoding() -> str:
    """Return the encoding of the active process locale."""
    return locale.getpreferredencoding(False) or "UTF-8"


def normalize_encoding(name: str) -> str:
    """Return the canonical codec name, raising ``LookupError`` when unknown."""
    return codecs.lookup(name.strip()).name


class EncodingBridge:
    """Re-encode words so that an engine only ever sees representable text.

    Words arrive as text decoded from ``source_encoding``. The bridge round
    trips them through ``target_encoding`` with replacement, so characters the
    target charset cannot hold become ``?`` instead of raising inside the
    engine. Lossy conversions are logged at INFO level and never abort a run.
    """

    def __init__(self, source_encoding: str, target_encoding: str) -> None:
        self.source_encoding = normalize_encoding(source_encoding)
        self.target_encoding = normalize_encoding(target_encoding)
        self.lossy_conversions = 0

    @property
    def is_identity(self) -> bool:
        return self.target_encoding in {"utf-8", "utf-16", "utf-32"}

    def to_engine_encoding(self, word: str | bytes) -> str:
        if isinstance(word, bytes):
            word = word.decode(self.source_encoding, errors="replace")
        if self.is_identity:
            return word
        encoded = word.encode(self.target_encoding, errors="replace")
        converted = encoded.decode(self.target_encoding)
        if converted != word:
            self.lossy_conversions += 1
            logger.info(
                "Word %r is not representable in %s, using %r",
                word,
                self.target_encoding,
                converted,
            )
        return converted
