"""Centralized color palette, Rich Theme, and shared constants."""

from __future__ import annotations

from dataclasses import dataclass

from rich.theme import Theme


@dataclass(frozen=True)
class ColorPalette:
    """Immutable color palette for the spellparity CLI.

    Designed for dark terminal backgrounds; every text color stays legible
    on light backgrounds too.
    """

    primary: str = "#7AA2F7"
    success: str = "#A6E3A1"
    warning: str = "#F9E2AF"
    error: str = "#F38BA8"
    info: str = "#89DCEB"
    text: str = "#CDD6F4"
    text_muted: str = "#9399B2"
    border: str = "#585B70"


PALETTE = ColorPalette()

SP_THEME = Theme(
    {
        "sp.header": f"bold {PALETTE.primary}",
        "sp.label": f"bold {PALETTE.text}",
        "sp.muted": f"{PALETTE.text_muted}",
        "sp.pass": f"bold {PALETTE.success}",
        "sp.fail": f"bold {PALETTE.error}",
        "sp.warn": f"bold {PALETTE.warning}",
        "sp.info": f"{PALETTE.info}",
        "sp.border": f"{PALETTE.border}",
        "sp.border.error": f"{PALETTE.error}",
    }
)

PANEL_PADDING: tuple[int, int] = (1, 2)
