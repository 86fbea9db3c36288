"""
chromalogo: giant ASCII-art banners with color gradients for the terminal.

Quick start
-----------
>>> from chromalogo import Renderer
>>> print(Renderer().render("HI", "sunset", direction="diagonal"))
"""

from .cache import CacheManager, CacheStats, LRUCache, ManagerStats
from .colorizer import Direction, GradientColorizer, shift_stops
from .config import CacheConfig, load_cache_config
from .errors import (
    ChromaLogoError,
    FontNotFoundError,
    InvalidConfigurationError,
    InvalidInputError,
    InvalidPaletteError,
    PaletteNotFoundError,
)
from .glyphs import FILLED_FONTS, GlyphGenerator
from .gradient import Gradient, interpolate_color
from .palettes import (
    DEFAULT_PALETTE,
    PALETTES,
    get_default_palette,
    get_palette_names,
    get_palette_preview,
    resolve_palette,
)
from .renderer import (
    DEFAULT_DIRECTION,
    DEFAULT_FONT,
    Renderer,
    clear_render_cache,
    get_cache_stats,
    get_default_renderer,
    render,
    render_filled,
)

__version__ = "1.0.0"

__all__ = [
    "render",
    "render_filled",
    "get_cache_stats",
    "clear_render_cache",
    "get_default_renderer",
    "Renderer",
    "GradientColorizer",
    "Direction",
    "shift_stops",
    "Gradient",
    "interpolate_color",
    "GlyphGenerator",
    "FILLED_FONTS",
    "LRUCache",
    "CacheStats",
    "CacheManager",
    "ManagerStats",
    "CacheConfig",
    "load_cache_config",
    "PALETTES",
    "DEFAULT_PALETTE",
    "DEFAULT_FONT",
    "DEFAULT_DIRECTION",
    "resolve_palette",
    "get_palette_names",
    "get_default_palette",
    "get_palette_preview",
    "ChromaLogoError",
    "InvalidPaletteError",
    "PaletteNotFoundError",
    "FontNotFoundError",
    "InvalidInputError",
    "InvalidConfigurationError",
]
