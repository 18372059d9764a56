"""``spellparity.toml`` configuration loader.

Parses the optional configuration file into structured types consumed by
``spellparity verify``. Command-line options override every value here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redefine]

DEFAULT_CONFIG_NAME = "spellparity.toml"


@dataclass(frozen=True)
class VerifySectionConfig:
    """Harness parameters from ``[verify]``."""

    candidate: str = "spylls"
    reference: str = "hunspell"
    dictionary: str | None = None
    encoding: str | None = None
    corrections: str | None = None
    print_false: bool = False
    suggestions: bool = False


@dataclass(frozen=True)
class DictionarySectionConfig:
    """Extra dictionary search directories from ``[dictionaries]``."""

    paths: tuple[str, ...] = ()


@dataclass(frozen=True)
class HarnessConfig:
    """Top-level parsed representation of ``spellparity.toml``."""

    verify: VerifySectionConfig = field(default_factory=VerifySectionConfig)
    dictionaries: DictionarySectionConfig = field(default_factory=DictionarySectionConfig)
    source: Path | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


def _optional_str(value: Any, key: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"[verify] {key} must be a string, got {value!r}")
    return value or None


def _bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"[verify] {key} must be a boolean, got {value!r}")
    return value


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    section = raw.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{name}] must be a table")
    return section


def load_config(path: str | Path | None = None) -> HarnessConfig:
    """Load ``spellparity.toml``.

    Parameters
    ----------
    path:
        Explicit configuration path. When omitted, ``spellparity.toml`` in the
        current directory is used if present, otherwise defaults apply.

    Raises
    ------
    FileNotFoundError
        If an explicit path does not exist.
    ValueError
        If a value has the wrong type.
    """
    if path is None:
        config_path = Path(DEFAULT_CONFIG_NAME)
        if not config_path.exists():
            return HarnessConfig()
    else:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"Invalid TOML in {config_path}: {exc}") from exc

    verify_raw = _section(raw, "verify")
    defaults = VerifySectionConfig()
    verify = VerifySectionConfig(
        candidate=_optional_str(verify_raw.get("candidate"), "candidate") or defaults.candidate,
        reference=_optional_str(verify_raw.get("reference"), "reference") or defaults.reference,
        dictionary=_optional_str(verify_raw.get("dictionary"), "dictionary"),
        encoding=_optional_str(verify_raw.get("encoding"), "encoding"),
        corrections=_optional_str(verify_raw.get("corrections"), "corrections"),
        print_false=_bool(verify_raw.get("print_false", False), "print_false"),
        suggestions=_bool(verify_raw.get("suggestions", False), "suggestions"),
    )

    dict_raw = _section(raw, "dictionaries")
    paths_raw = dict_raw.get("paths", [])
    if not isinstance(paths_raw, list) or not all(isinstance(p, str) for p in paths_raw):
        raise ValueError("[dictionaries] paths must be a list of strings")

    return HarnessConfig(
        verify=verify,
        dictionaries=DictionarySectionConfig(paths=tuple(paths_raw)),
        source=config_path,
        raw=raw,
    )
