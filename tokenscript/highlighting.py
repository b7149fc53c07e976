from __future__ import annotations

import os
import sys

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JsonLexer


def colorize_json(text: str) -> str:
    """Highlight the JSON listing of `tokenscript kinds --format json`.

    Plain text is returned when ``NO_COLOR=1`` or stdout is not a terminal.
    """
    if (not text) or (os.getenv("NO_COLOR") == "1") or (not sys.stdout.isatty()):
        return text
    return highlight(text, JsonLexer(), TerminalFormatter())


__all__ = ["colorize_json"]
