# chromalogo/colorizer.py
"""
Gradient coloring strategies for multi-line glyph blocks.

Public API
----------
- Direction: ``vertical`` (default), ``horizontal`` or ``diagonal``.
- shift_stops(stops, shift): rotate a palette for one diagonal row.
- GradientColorizer: applies a strategy, memoizing gradients in a
  :class:`~chromalogo.cache.CacheManager`.

Strategies
----------
vertical
    One color per non-blank row, from the first stop at the top to the last
    stop at the bottom (``Gradient.multiline``).
horizontal
    The full ramp left-to-right across every non-blank row independently.
diagonal
    Row ``i`` of ``n`` (blank rows included in both) uses the palette rotated
    by ``shift = (i / n) * len(stops)``, applied left-to-right. The gradient
    appears to turn as it descends.

Blank rows (empty or whitespace-only) are emitted verbatim by every strategy
and never sample a gradient.

Python 3.9+ compatible.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar, Union

from .cache.keys import diagonal_key, gradient_key
from .cache.manager import CacheManager
from .errors import InvalidConfigurationError
from .gradient import Gradient, is_blank
from .palettes import ColorStops, ColorValue, parse_color_stops

__all__ = ["Direction", "shift_stops", "GradientColorizer", "GradientFactory"]

logger = logging.getLogger("chromalogo.colorizer")

T = TypeVar("T")
GradientFactory = Callable[[ColorStops], Gradient]


class Direction(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    DIAGONAL = "diagonal"

    @classmethod
    def parse(cls, value: Union["Direction", str]) -> "Direction":
        """Accept a member or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            choices = ", ".join(d.value for d in cls)
            raise InvalidConfigurationError(
                "direction", f"{value!r} is not one of: {choices}"
            ) from exc


def shift_stops(stops: Sequence[T], shift: float) -> Tuple[T, ...]:
    """Return ``stops[floor(j + shift) % L]`` for each position ``j``.

    >>> shift_stops("ABC", 1.5)
    ('B', 'C', 'A')
    """
    size = len(stops)
    return tuple(stops[math.floor(j + shift) % size] for j in range(size))


class GradientColorizer:
    """Colorize glyph blocks with one of the :class:`Direction` strategies.

    Parameters
    ----------
    cache : CacheManager | None
        Where built gradients are memoized. A private manager is created when
        omitted.
    gradient_factory : Callable[[ColorStops], Gradient]
        Builds a gradient on a cache miss. Tests inject counting doubles here.
    """

    def __init__(
        self,
        cache: Optional[CacheManager] = None,
        gradient_factory: GradientFactory = Gradient,
    ) -> None:
        self.cache = cache if cache is not None else CacheManager()
        self.gradient_factory = gradient_factory

    # ---- gradient lookup ------------------------------------------------------

    def _cached(self, key: str, stops: ColorStops) -> Gradient:
        gradient = self.cache.get_gradient(key)
        if gradient is None:
            logger.debug("gradient cache miss: %s", key)
            gradient = self.gradient_factory(stops)
            self.cache.set_gradient(key, gradient)
        return gradient

    def gradient_for(self, stops: ColorStops) -> Gradient:
        return self._cached(gradient_key(stops), stops)

    def diagonal_gradient_for(self, stops: ColorStops, shift: float) -> Gradient:
        return self._cached(diagonal_key(stops, shift), shift_stops(stops, shift))

    # ---- strategies -----------------------------------------------------------

    def _vertical(self, block: str, stops: ColorStops) -> str:
        return self.gradient_for(stops).multiline(block)

    def _horizontal(self, lines: List[str], stops: ColorStops) -> List[str]:
        gradient = self.gradient_for(stops)
        return [line if is_blank(line) else gradient(line) for line in lines]

    def _diagonal(self, lines: List[str], stops: ColorStops) -> List[str]:
        line_count = len(lines)
        out: List[str] = []
        for index, line in enumerate(lines):
            if is_blank(line):
                out.append(line)
                continue
            shift = (index / line_count) * len(stops)
            out.append(self.diagonal_gradient_for(stops, shift)(line))
        return out

    def colorize(
        self,
        block: str,
        palette: Iterable[ColorValue],
        direction: Union[Direction, str] = Direction.VERTICAL,
    ) -> str:
        """Return ``block`` with its visible rows colored.

        Raises:
            InvalidPaletteError: If ``palette`` is empty or malformed.
            InvalidConfigurationError: If ``direction`` is unknown.
        """
        stops = parse_color_stops(palette)
        direction = Direction.parse(direction)

        if not block:
            return ""
        lines = block.split("\n")
        if all(is_blank(line) for line in lines):
            return block

        if direction is Direction.VERTICAL:
            return self._vertical(block, stops)
        if direction is Direction.HORIZONTAL:
            return "\n".join(self._horizontal(lines, stops))
        return "\n".join(self._diagonal(lines, stops))
