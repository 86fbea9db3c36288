# chromalogo/palettes.py
"""
Named color palettes and color-stop parsing.

Public API
----------
- PALETTES: name ➜ tuple of hex color stops (immutable).
- DEFAULT_PALETTE: name of the palette used when nothing is specified.
- resolve_palette(name): independent list copy of a named palette, or None.
- get_palette_names(), get_default_palette(), get_palette_preview(name).
- parse_color(value): normalize one color value into an RGB triplet.
- parse_color_stops(values): normalize a whole palette.

Notes
-----
- Color strings are parsed with :meth:`rich.color.Color.parse`, so hex
  (``#4ea8ff``), named (``red``, ``bright_cyan``) and ``rgb(r,g,b)`` forms are
  accepted.
- Callers get copies; the module-level tuples are never handed out.

Python 3.9+ compatible.
"""

from __future__ import annotations

from typing import Dict, Final, Iterable, List, Optional, Sequence, Tuple, Union

from rich.color import Color, ColorParseError
from rich.color_triplet import ColorTriplet

from .errors import InvalidPaletteError

__all__ = [
    "PALETTES",
    "DEFAULT_PALETTE",
    "ColorValue",
    "ColorStops",
    "resolve_palette",
    "get_palette_names",
    "get_default_palette",
    "get_palette_preview",
    "parse_color",
    "parse_color_stops",
]

ColorValue = Union[str, Tuple[int, int, int], ColorTriplet]
ColorStops = Tuple[ColorTriplet, ...]

# =============================================================================
# Palette table
# =============================================================================

PALETTES: Final[Dict[str, Tuple[str, ...]]] = {
    "grad-blue": ("#4ea8ff", "#7f88ff"),
    "sunset": ("#ff9966", "#ff5e62", "#ffa34e"),
    "dawn": ("#00c6ff", "#0072ff"),
    "nebula": ("#654ea3", "#eaafc8"),
    "mono": ("#f07178", "#f07178"),
    "ocean": ("#667eea", "#764ba2"),
    "fire": ("#ff0844", "#ffb199"),
    "forest": ("#134e5e", "#71b280"),
    "gold": ("#f7971e", "#ffd200"),
    "purple": ("#667db6", "#0082c8", "#0078ff"),
    "mint": ("#00d2ff", "#3a7bd5"),
    "coral": ("#ff9a9e", "#fecfef"),
    "matrix": ("#00ff41", "#008f11"),
}

DEFAULT_PALETTE: Final[str] = "grad-blue"


# =============================================================================
# Lookup helpers
# =============================================================================

def resolve_palette(name: str) -> Optional[List[str]]:
    """Return a fresh list with the stops of palette ``name``, or None."""
    stops = PALETTES.get(name)
    if stops is None:
        return None
    return list(stops)


def get_palette_names() -> List[str]:
    """Return palette names in declaration order."""
    return list(PALETTES)


def get_default_palette() -> List[str]:
    return list(PALETTES[DEFAULT_PALETTE])


def get_palette_preview(name: str) -> str:
    """Return a one-line preview such as ``#4ea8ff → #7f88ff``."""
    return " → ".join(PALETTES[name])


# =============================================================================
# Color parsing
# =============================================================================

def _triplet_from_tuple(value: Sequence[int]) -> ColorTriplet:
    if len(value) != 3:
        raise InvalidPaletteError(value, "RGB tuples need exactly three components")
    try:
        r, g, b = (int(c) for c in value)
    except (TypeError, ValueError) as exc:
        raise InvalidPaletteError(value, "RGB components must be integers") from exc
    if not (0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255):
        raise InvalidPaletteError(value, "RGB components must be within 0..255")
    return ColorTriplet(r, g, b)


def parse_color(value: ColorValue) -> ColorTriplet:
    """Normalize a single color value into a :class:`ColorTriplet`.

    Raises:
        InvalidPaletteError: If the value cannot be interpreted as a color.
    """
    if isinstance(value, ColorTriplet):
        return value
    if isinstance(value, (tuple, list)):
        return _triplet_from_tuple(value)
    if not isinstance(value, str):
        raise InvalidPaletteError(value, "unsupported color type")

    try:
        color = Color.parse(value.strip())
    except ColorParseError as exc:
        raise InvalidPaletteError(value, str(exc)) from exc
    if color.is_default:
        raise InvalidPaletteError(value, "'default' is not a concrete color")
    return color.get_truecolor()


def parse_color_stops(values: Iterable[ColorValue]) -> ColorStops:
    """Normalize a palette into an immutable tuple of RGB triplets.

    Raises:
        InvalidPaletteError: If the palette is empty or any stop is malformed.
    """
    if values is None or isinstance(values, (str, bytes)):
        raise InvalidPaletteError(values, "expected a sequence of colors")
    stops = tuple(parse_color(v) for v in values)
    if not stops:
        raise InvalidPaletteError(list(stops), "palette must contain at least one color")
    return stops
