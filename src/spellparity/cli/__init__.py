"""spellparity CLI package."""

from __future__ import annotations

from ._app import app as app  # noqa: F401
from ._app import console as console  # noqa: F401
from ._app import err_console as err_console  # noqa: F401


def _register_commands() -> None:
    """Register command modules in desired help-panel order."""
    # isort: off
    from . import _verify  # noqa: F401  Verification
    from . import _dicts  # noqa: F401  Utilities
    # isort: on


_register_commands()
