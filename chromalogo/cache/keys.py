# chromalogo/cache/keys.py
"""
Cache-key fingerprints.

Two logically identical parameter sets must produce the same key, and
different ones must not collide: a collision would serve the wrong value.

- glyph_key: canonical JSON, so text containing ``:`` or ``,`` cannot bleed
  into the font or option fields.
- gradient_key: lowercase hex of every stop, in order.
- diagonal_key: gradient key plus the row shift at two decimals. The integer
  rotation is appended as well; two shifts on either side of a whole number
  (``1.999`` and ``2.0``) round to the same text but rotate differently.
"""

from __future__ import annotations

import json
import math
from typing import Any, Mapping, Optional, Sequence

from rich.color_triplet import ColorTriplet

__all__ = ["glyph_key", "gradient_key", "diagonal_key"]


def glyph_key(
    text: str,
    font: str,
    options: Optional[Mapping[str, Any]] = None,
    mode: str = "outline",
) -> str:
    payload = {"text": text, "font": font, "mode": mode, "options": dict(options or {})}
    return json.dumps(payload, sort_keys=True, ensure_ascii=False, separators=(",", ":"))


def gradient_key(stops: Sequence[ColorTriplet]) -> str:
    return ",".join(ColorTriplet(*s).hex for s in stops)


def diagonal_key(stops: Sequence[ColorTriplet], shift: float) -> str:
    rotation = math.floor(shift) % len(stops) if stops else 0
    return f"{gradient_key(stops)}:{shift:.2f}:{rotation}"
