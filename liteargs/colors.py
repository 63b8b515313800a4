"""
ANSI styling for the liteargs command output.

NO_COLOR disables styling, FORCE_COLOR enables it even when stdout is not
a terminal. The check runs on every call so redirected output stays plain.
"""

from __future__ import annotations

import os
import sys

_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_CYAN = "\x1b[36m"


def colors_enabled() -> bool:
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("FORCE_COLOR") is not None:
        return True
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def color(text: str, *, cyan: bool = False, bold: bool = False) -> str:
    """Style ids in the command output; other text is printed plain."""
    if not (cyan or bold) or not colors_enabled():
        return text
    prefix = (_BOLD if bold else "") + (_CYAN if cyan else "")
    return prefix + text + _RESET
