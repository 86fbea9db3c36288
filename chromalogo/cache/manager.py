# chromalogo/cache/manager.py
"""
Owner of the two render caches.

Glyph blocks and gradients live in separate :class:`LRUCache` instances with
separate key spaces and value types, so a read never has to check what kind
of object came back.

A ``CacheManager`` is constructed explicitly and handed to a renderer; the
process-wide default lives in :mod:`chromalogo.renderer`, not here.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..config import CacheConfig, clamp_config
from ..gradient import Gradient
from .lru import CacheStats, LRUCache

__all__ = ["CacheManager", "ManagerStats"]

logger = logging.getLogger("chromalogo.cache")


@dataclass(frozen=True)
class ManagerStats:
    glyph: CacheStats
    gradient: CacheStats
    total_hit_rate: float

    def as_dict(self) -> Dict[str, Any]:
        return {
            "glyph": self.glyph.as_dict(),
            "gradient": self.gradient.as_dict(),
            "total_hit_rate": self.total_hit_rate,
        }


class CacheManager:
    """Glyph-block cache plus gradient cache, configured together.

    Parameters
    ----------
    config : CacheConfig | None
        Sizes and expiry policy. Values are clamped to their sane ranges.
    clock : Callable[[], float]
        Time source shared by both caches.
    """

    def __init__(
        self,
        config: Optional[CacheConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = clamp_config(config or CacheConfig())
        self.glyph_cache: LRUCache[str] = LRUCache(
            max_size=self.config.glyph_cache_size,
            max_age=self.config.max_age_seconds,
            refresh_age_on_access=self.config.refresh_age_on_access,
            clock=clock,
            name="glyph",
        )
        self.gradient_cache: LRUCache[Gradient] = LRUCache(
            max_size=self.config.gradient_cache_size,
            max_age=self.config.max_age_seconds,
            refresh_age_on_access=self.config.refresh_age_on_access,
            clock=clock,
            name="gradient",
        )

    # ---- glyph blocks ---------------------------------------------------------

    def get_glyphs(self, key: str) -> Optional[str]:
        return self.glyph_cache.get(key)

    def set_glyphs(self, key: str, block: str) -> None:
        self.glyph_cache.set(key, block)

    # ---- gradients ------------------------------------------------------------

    def get_gradient(self, key: str) -> Optional[Gradient]:
        return self.gradient_cache.get(key)

    def set_gradient(self, key: str, gradient: Gradient) -> None:
        self.gradient_cache.set(key, gradient)

    # ---- maintenance ----------------------------------------------------------

    def clear_glyphs(self) -> None:
        self.glyph_cache.clear()

    def clear_gradients(self) -> None:
        self.gradient_cache.clear()

    def clear_all(self) -> None:
        self.clear_glyphs()
        self.clear_gradients()
        logger.debug("All render caches cleared")

    def prune(self) -> int:
        """Force-expire stale entries in both caches; return the count removed."""
        return self.glyph_cache.prune() + self.gradient_cache.prune()

    def stats(self) -> ManagerStats:
        glyph = self.glyph_cache.stats()
        gradient = self.gradient_cache.stats()
        hits = glyph.hits + gradient.hits
        total = hits + glyph.misses + gradient.misses
        return ManagerStats(
            glyph=glyph,
            gradient=gradient,
            total_hit_rate=(hits / total) if total else 0.0,
        )

    def hot_keys(self, limit: int = 5) -> Dict[str, List[Tuple[str, int]]]:
        return {
            "glyph": self.glyph_cache.hot_keys(limit),
            "gradient": self.gradient_cache.hot_keys(limit),
        }
