"""Render caches: a generic LRU store, its manager and key fingerprints."""

from .keys import diagonal_key, glyph_key, gradient_key
from .lru import CacheStats, LRUCache
from .manager import CacheManager, ManagerStats

__all__ = [
    "LRUCache",
    "CacheStats",
    "CacheManager",
    "ManagerStats",
    "glyph_key",
    "gradient_key",
    "diagonal_key",
]
