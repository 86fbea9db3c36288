# chromalogo/terminal.py
"""
Terminal color detection and ANSI stripping.

- should_use_color(): decide whether rendered art keeps its escape codes.
- strip_ansi_codes(): drop escape sequences, keeping the plain glyphs.

Precedence in :func:`should_use_color`: explicit force ➜ explicit disable ➜
``NO_COLOR`` ➜ ``FORCE_COLOR`` ➜ CI with a color-capable terminal ➜ TTY.
"""

from __future__ import annotations

import os
import sys
from typing import Mapping, Optional, TextIO

from rich.text import Text

__all__ = ["should_use_color", "strip_ansi_codes"]


def should_use_color(
    force_color: bool = False,
    no_color: bool = False,
    stream: Optional[TextIO] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> bool:
    env = os.environ if environ is None else environ
    if force_color:
        return True
    if no_color:
        return False
    if env.get("NO_COLOR"):
        return False
    if env.get("FORCE_COLOR"):
        return True
    if env.get("CI") and (env.get("COLORTERM") or env.get("TERM_PROGRAM")):
        return True

    target = stream if stream is not None else sys.stdout
    isatty = getattr(target, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:  # closed stream
        return False


def strip_ansi_codes(text: str) -> str:
    """Return ``text`` without ANSI escape sequences."""
    return Text.from_ansi(text).plain
