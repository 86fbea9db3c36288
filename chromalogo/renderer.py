# chromalogo/renderer.py
"""
Render facade: palette + font + direction in, colored banner out.

Public API
----------
- Renderer: explicitly constructed facade owning (or sharing) a CacheManager.
- render(), render_filled(), get_cache_stats(), clear_render_cache():
  convenience wrappers over a lazily built process-wide default Renderer.
- DEFAULT_PALETTE / DEFAULT_FONT / DEFAULT_DIRECTION.

Flow of :meth:`Renderer.render`
-------------------------------
1. Resolve the palette (explicit colors or a palette-table name).
2. Fetch the glyph block for (text, font, layout) from the glyph cache, or
   generate it with pyfiglet and store it.
3. Hand block and colors to :class:`GradientColorizer`, which memoizes the
   gradients it builds.

Cached and freshly computed renders are byte-identical; clearing the cache
only changes latency.

Python 3.9+ compatible.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, List, Optional, Sequence, Union

from rich.console import Console
from rich.text import Text

from .cache.keys import glyph_key
from .cache.manager import CacheManager, ManagerStats
from .colorizer import Direction, GradientColorizer, GradientFactory
from .config import CacheConfig, clamp_config, load_cache_config
from .errors import InvalidConfigurationError, InvalidPaletteError, PaletteNotFoundError
from .glyphs import DEFAULT_FILLED_FONT, GlyphGenerator
from .gradient import Gradient
from .palettes import DEFAULT_PALETTE, ColorValue, parse_color_stops, resolve_palette
from .performance import PerformanceMonitor

__all__ = [
    "DEFAULT_PALETTE",
    "DEFAULT_FONT",
    "DEFAULT_DIRECTION",
    "SETTLE_DELAY",
    "PaletteSpec",
    "Renderer",
    "get_default_renderer",
    "render",
    "render_filled",
    "get_cache_stats",
    "clear_render_cache",
]

logger = logging.getLogger("chromalogo.renderer")

DEFAULT_FONT = "standard"
DEFAULT_DIRECTION = Direction.VERTICAL
# Seconds to wait after printing filled art so the terminal flushes before exit.
SETTLE_DELAY = 0.05

PaletteSpec = Union[str, Sequence[ColorValue]]


class Renderer:
    """Facade over glyph generation, caching and gradient coloring.

    Parameters
    ----------
    cache : CacheManager | None
        Shared cache; a private one is created when omitted.
    glyph_generator : GlyphGenerator | None
        Source of FIGlet art; defaults to a pyfiglet-backed generator.
    gradient_factory : Callable
        Builds gradients on cache misses.
    monitor : PerformanceMonitor | None
        Collects render timings.
    settle_delay : float
        Pause after printing filled art, in seconds.
    sleep : Callable[[float], None]
        Used for the settle delay; injectable for tests.
    """

    def __init__(
        self,
        cache: Optional[CacheManager] = None,
        glyph_generator: Optional[GlyphGenerator] = None,
        gradient_factory: GradientFactory = Gradient,
        monitor: Optional[PerformanceMonitor] = None,
        settle_delay: float = SETTLE_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.cache = cache if cache is not None else CacheManager()
        self.glyph_generator = glyph_generator if glyph_generator is not None else GlyphGenerator()
        self.colorizer = GradientColorizer(self.cache, gradient_factory=gradient_factory)
        self.monitor = monitor if monitor is not None else PerformanceMonitor()
        self.settle_delay = settle_delay
        self._sleep = sleep

    # ---- resolution -----------------------------------------------------------

    @staticmethod
    def resolve_colors(palette: PaletteSpec) -> List[ColorValue]:
        """Turn a palette name or explicit color list into color stops.

        Raises:
            PaletteNotFoundError: If a palette name is not in the table.
            InvalidPaletteError: If explicit colors are empty or malformed.
        """
        if isinstance(palette, str):
            colors = resolve_palette(palette)
            if colors is None:
                raise PaletteNotFoundError(palette)
            return list(colors)
        if palette is None:
            raise InvalidPaletteError(palette, "no palette given")
        colors = list(palette)
        parse_color_stops(colors)
        return colors

    def glyphs(self, text: str, font: str = DEFAULT_FONT) -> str:
        """Return the outlined glyph block for ``text``, cached by font/layout."""
        key = glyph_key(text, font, self.glyph_generator.layout)
        block = self.cache.get_glyphs(key)
        if block is None:
            logger.debug("glyph cache miss: font=%s text=%r", font, text)
            block = self.glyph_generator.generate(text, font)
            self.cache.set_glyphs(key, block)
        return block

    def filled_glyphs(
        self, text: str, font: str = DEFAULT_FILLED_FONT, letter_spacing: Optional[int] = None
    ) -> str:
        key = glyph_key(text, font, {"letter_spacing": letter_spacing}, mode="filled")
        block = self.cache.get_glyphs(key)
        if block is None:
            block = self.glyph_generator.generate_filled(text, font, letter_spacing)
            self.cache.set_glyphs(key, block)
        return block

    # ---- rendering ------------------------------------------------------------

    def render(
        self,
        text: str,
        palette: PaletteSpec = DEFAULT_PALETTE,
        font: str = DEFAULT_FONT,
        direction: Union[Direction, str] = DEFAULT_DIRECTION,
    ) -> str:
        """Render ``text`` as outlined art colored with a gradient.

        Returns an ANSI-colored string; an empty ``text`` yields ``""``.

        Raises:
            PaletteNotFoundError / InvalidPaletteError: Bad palette.
            FontNotFoundError: Unknown FIGlet font.
            InvalidConfigurationError: Unknown direction.
        """
        colors = self.resolve_colors(palette)
        direction = Direction.parse(direction)
        if not text:
            return ""

        stop = self.monitor.start_timing()
        try:
            block = self.glyphs(text, font)
            return self.colorizer.colorize(block, colors, direction)
        finally:
            stop()

    def filled_text(
        self,
        text: str,
        palette: PaletteSpec = DEFAULT_PALETTE,
        font: str = DEFAULT_FILLED_FONT,
        letter_spacing: Optional[int] = None,
    ) -> Text:
        """Build the filled banner as a Rich ``Text`` with a left-to-right gradient."""
        if letter_spacing is not None and letter_spacing < 0:
            raise InvalidConfigurationError("letter_spacing", "must be 0 or greater")
        colors = self.resolve_colors(palette)
        if not text:
            return Text()

        block = self.filled_glyphs(text, font, letter_spacing)
        gradient = self.colorizer.gradient_for(parse_color_stops(colors))
        lines = block.split("\n")
        span = max(1, max(len(line) for line in lines) - 1)

        banner = Text()
        for row_idx, line in enumerate(lines):
            for col_idx, char in enumerate(line):
                if char == " ":
                    banner.append(char)
                    continue
                banner.append(char, style=gradient.style_for(gradient.color_at(col_idx / span)))
            if row_idx < len(lines) - 1:
                banner.append("\n")
        return banner

    def render_filled(
        self,
        text: str,
        palette: PaletteSpec = DEFAULT_PALETTE,
        font: str = DEFAULT_FILLED_FONT,
        letter_spacing: Optional[int] = None,
        console: Optional[Console] = None,
    ) -> None:
        """Print filled block-character art to ``console``.

        Output goes straight to the terminal; the call returns once the
        settle delay has elapsed.

        Raises:
            InvalidConfigurationError: If ``letter_spacing`` is negative.
        """
        banner = self.filled_text(text, palette, font, letter_spacing)
        target = console if console is not None else Console()
        target.print(banner, soft_wrap=True)
        target.file.flush()
        self._sleep(self.settle_delay)

    # ---- cache management -----------------------------------------------------

    def clear_cache(self) -> None:
        self.cache.clear_all()

    def cache_stats(self) -> ManagerStats:
        return self.cache.stats()


# =============================================================================
# Process-wide default (application wiring only)
# =============================================================================

_default_renderer: Optional[Renderer] = None
_default_lock = threading.Lock()


def get_default_renderer(config: Optional[CacheConfig] = None) -> Renderer:
    """Return the shared Renderer, building it on first use.

    ``config`` (or the environment, when omitted) only sizes the caches of
    the first build. A different ``config`` passed afterwards is ignored with
    a warning; construct a :class:`Renderer` directly to get other settings.
    """
    global _default_renderer
    with _default_lock:
        if _default_renderer is None:
            _default_renderer = Renderer(CacheManager(config or load_cache_config()))
        elif config is not None and clamp_config(config) != _default_renderer.cache.config:
            logger.warning("Default renderer already built; ignoring new cache config %s", config)
        return _default_renderer


def render(
    text: str,
    palette: PaletteSpec = DEFAULT_PALETTE,
    font: str = DEFAULT_FONT,
    direction: Union[Direction, str] = DEFAULT_DIRECTION,
) -> str:
    return get_default_renderer().render(text, palette, font, direction)


def render_filled(
    text: str,
    palette: PaletteSpec = DEFAULT_PALETTE,
    font: str = DEFAULT_FILLED_FONT,
    letter_spacing: Optional[int] = None,
    console: Optional[Console] = None,
) -> None:
    get_default_renderer().render_filled(text, palette, font, letter_spacing, console)


def get_cache_stats() -> ManagerStats:
    return get_default_renderer().cache_stats()


def clear_render_cache() -> None:
    get_default_renderer().clear_cache()
