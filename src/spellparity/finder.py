"""Locate Hunspell-format dictionary pairs on disk."""

from __future__ import annotations

import locale
import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path

from .errors import DictionaryNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_DIRS: tuple[str, ...] = (
    "~/.local/share/hunspell",
    "/usr/local/share/hunspell",
    "/usr/share/hunspell",
    "/usr/share/myspell",
    "/usr/share/myspell/dicts",
    "/Library/Spelling",
)


def _dicpath_dirs() -> list[Path]:
    raw = os.environ.get("DICPATH", "")
    return [Path(part) for part in raw.split(os.pathsep) if part]


def _has_pair(prefix: Path) -> bool:
    return (
        prefix.with_name(prefix.name + ".aff").is_file()
        and prefix.with_name(prefix.name + ".dic").is_file()
    )


class DictionaryFinder:
    """Search a list of directories for ``<name>.aff`` + ``<name>.dic`` pairs."""

    def __init__(self, search_dirs: Sequence[Path]) -> None:
        self.search_dirs = list(search_dirs)

    @classmethod
    def search_all_dirs(cls, extra_dirs: Iterable[str | Path] = ()) -> DictionaryFinder:
        """Build a finder over configured, ``DICPATH`` and system directories."""
        dirs: list[Path] = [Path(d).expanduser() for d in extra_dirs]
        dirs.extend(_dicpath_dirs())
        dirs.extend(Path(d).expanduser() for d in DEFAULT_SEARCH_DIRS)
        unique: list[Path] = []
        for directory in dirs:
            if directory not in unique:
                unique.append(directory)
        return cls(unique)

    def locate(self, name: str) -> Path | None:
        """Return the dictionary path prefix for ``name``, or ``None``."""
        if os.sep in name or (os.altsep and os.altsep in name):
            prefix = Path(name).expanduser()
            return prefix if _has_pair(prefix) else None
        for directory in self.search_dirs:
            prefix = directory / name
            if _has_pair(prefix):
                return prefix
        return None

    def require(self, name: str) -> Path:
        path = self.locate(name)
        if path is None:
            raise DictionaryNotFoundError(name, [str(d) for d in self.search_dirs])
        logger.info("Pointed dictionary %s.{dic,aff}", path)
        return path

    def list_dictionaries(self) -> dict[str, Path]:
        """Map each dictionary name to the first directory providing it."""
        found: dict[str, Path] = {}
        for directory in self.search_dirs:
            if not directory.is_dir():
                continue
            for aff in sorted(directory.glob("*.aff")):
                prefix = aff.with_suffix("")
                if prefix.name not in found and _has_pair(prefix):
                    found[prefix.name] = prefix
        return found


def infer_dictionary_name() -> str | None:
    """Derive ``lang_COUNTRY`` from the process locale, e.g. ``en_US``."""
    lang_code = locale.getlocale(locale.LC_CTYPE)[0] or os.environ.get("LANG", "")
    lang_code = lang_code.split(".")[0].split("@")[0]
    if not lang_code or lang_code in {"C", "POSIX"}:
        return None
    return lang_code
