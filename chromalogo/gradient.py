# chromalogo/gradient.py
"""
Gradient interpolation over RGB color stops.

Public API
----------
- interpolate_color(stops, t): RGB interpolation across color stops.
- Gradient: a ramp built once from a palette and reused for many lines.

Design notes
------------
- Interpolation is piecewise linear between adjacent stops; edge values snap
  to the first/last stop.
- Colored output is plain ``str`` with 24-bit ANSI SGR sequences, produced by
  :meth:`rich.style.Style.render` so escape formatting stays in one place.
- Whitespace is never colored. In a single line it still occupies a column of
  the ramp; in a multi-line block a blank row is skipped entirely.

Python 3.9+ compatible.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from rich.color import Color, ColorSystem
from rich.color_triplet import ColorTriplet
from rich.style import Style

from .errors import InvalidPaletteError
from .palettes import ColorStops, ColorValue, parse_color_stops

__all__ = ["interpolate_color", "Gradient", "is_blank"]


# =============================================================================
# Internal helpers
# =============================================================================

def _clamp01(x: float) -> float:
    """Clamp a float into [0, 1]."""
    if x < 0.0:
        return 0.0
    if x > 1.0:
        return 1.0
    return x


def is_blank(line: str) -> bool:
    """Return True for empty or whitespace-only lines."""
    return not line.strip()


# =============================================================================
# Public API
# =============================================================================

def interpolate_color(stops: Sequence[ColorTriplet], t: float) -> ColorTriplet:
    """Interpolate between a list of RGB color stops.

    Parameters
    ----------
    stops : Sequence[ColorTriplet]
        RGB triplets with values 0..255. Must contain at least one stop.
    t : float
        Interpolation parameter in [0, 1]. Values outside the range are
        clamped.

    Returns
    -------
    ColorTriplet
        The interpolated RGB value.

    Notes
    -----
    - A single stop is a flat ramp and is returned for every ``t``.
    - Components are truncated, so the midpoint of 0 and 255 is 127.
    """
    if not stops:
        raise InvalidPaletteError(list(stops), "cannot interpolate an empty palette")
    t = _clamp01(float(t))

    if len(stops) == 1 or t <= 0.0:
        return ColorTriplet(*stops[0])
    if t >= 1.0:
        return ColorTriplet(*stops[-1])

    seg = 1.0 / (len(stops) - 1)
    idx = int(t / seg)
    if idx >= len(stops) - 1:
        # Numerical safety at t ~ 1.0 after float ops.
        return ColorTriplet(*stops[-1])

    local_t = (t - seg * idx) / seg
    c1 = stops[idx]
    c2 = stops[idx + 1]

    r = int(c1[0] + (c2[0] - c1[0]) * local_t)
    g = int(c1[1] + (c2[1] - c1[1]) * local_t)
    b = int(c1[2] + (c2[2] - c1[2]) * local_t)
    return ColorTriplet(r, g, b)


class Gradient:
    """A reusable color ramp.

    Building a ``Gradient`` validates and normalizes the palette once; calling
    it is cheap, which is what makes instances worth caching.

    Examples
    --------
    >>> ramp = Gradient(["#ff0000", "#0000ff"])
    >>> ramp.color_at(0.0)
    ColorTriplet(red=255, green=0, blue=0)
    """

    def __init__(self, stops: Iterable[ColorValue]) -> None:
        self.stops: ColorStops = parse_color_stops(stops)
        self._styles: Dict[ColorTriplet, Style] = {}

    def __repr__(self) -> str:
        return f"Gradient({[s.hex for s in self.stops]!r})"

    # ---- ramp ---------------------------------------------------------------

    def color_at(self, position: float) -> ColorTriplet:
        """Return the interpolated color at ``position`` (0..1)."""
        return interpolate_color(self.stops, position)

    def style_for(self, color: ColorTriplet) -> Style:
        style = self._styles.get(color)
        if style is None:
            style = Style(bold=True, color=Color.from_triplet(color))
            self._styles[color] = style
        return style

    def paint(self, text: str, color: ColorTriplet) -> str:
        """Wrap ``text`` in the ANSI sequence for ``color``."""
        return self.style_for(color).render(text, color_system=ColorSystem.TRUECOLOR)

    # ---- colorizers ---------------------------------------------------------

    def __call__(self, line: str) -> str:
        """Apply the full ramp left-to-right across one line."""
        if not line:
            return line
        span = max(1, len(line) - 1)
        out: List[str] = []
        for col_idx, char in enumerate(line):
            if char.isspace():
                out.append(char)
                continue
            out.append(self.paint(char, self.color_at(col_idx / span)))
        return "".join(out)

    def multiline(self, block: str) -> str:
        """Band a multi-line block top-to-bottom, one color per visible row."""
        lines = block.split("\n")
        visible = sum(1 for line in lines if not is_blank(line))
        span = max(1, visible - 1)

        out: List[str] = []
        row = 0
        for line in lines:
            if is_blank(line):
                out.append(line)
                continue
            out.append(self.paint(line, self.color_at(row / span)))
            row += 1
        return "\n".join(out)
