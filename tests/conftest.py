# tests/conftest.py
from __future__ import annotations

import io
from typing import Dict, List, Optional

import pytest
from rich.console import Console

from chromalogo.cache.manager import CacheManager
from chromalogo.config import CacheConfig
from chromalogo.errors import FontNotFoundError
from chromalogo.glyphs import DEFAULT_LAYOUT
from chromalogo.gradient import Gradient


# -------------------------
# Deterministic clock
# -------------------------
class FakeClock:
    """Manually advanced time source (seconds)."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# -------------------------
# Counting gradient doubles
# -------------------------
class CountingGradient(Gradient):
    """Real gradient that records how it is used."""

    def __init__(self, stops, log: Dict[str, list]):
        super().__init__(stops)
        self.log = log

    def __call__(self, line: str) -> str:
        self.log["lines"].append(line)
        return super().__call__(line)

    def multiline(self, block: str) -> str:
        self.log["blocks"].append(block)
        return super().multiline(block)

    def color_at(self, position: float):
        self.log["positions"].append(position)
        return super().color_at(position)


class GradientFactorySpy:
    """Gradient factory that counts builds and shares one usage log."""

    def __init__(self):
        self.built: List[tuple] = []
        self.log: Dict[str, list] = {"lines": [], "blocks": [], "positions": []}

    def __call__(self, stops) -> CountingGradient:
        self.built.append(tuple(stops))
        return CountingGradient(stops, self.log)


@pytest.fixture
def gradient_spy() -> GradientFactorySpy:
    return GradientFactorySpy()


# -------------------------
# Glyph generator stub
# -------------------------
class FakeGlyphGenerator:
    """Returns canned blocks; unknown fonts raise FontNotFoundError."""

    def __init__(self, blocks: Optional[Dict[str, str]] = None, fonts=("standard",)):
        self.blocks = blocks or {}
        self.fonts = set(fonts)
        self.layout = dict(DEFAULT_LAYOUT)
        self.calls: List[tuple] = []

    def generate(self, text: str, font: str, options=None) -> str:
        self.calls.append((text, font))
        if font not in self.fonts:
            raise FontNotFoundError(font)
        return self.blocks.get(text, text)

    def generate_filled(self, text: str, font: str = "block", letter_spacing=None) -> str:
        self.calls.append((text, font, letter_spacing))
        return self.blocks.get(text, text)


@pytest.fixture
def fake_glyphs() -> FakeGlyphGenerator:
    return FakeGlyphGenerator()


# -------------------------
# Caches and consoles
# -------------------------
@pytest.fixture
def cache_manager(clock) -> CacheManager:
    return CacheManager(CacheConfig(glyph_cache_size=50, gradient_cache_size=50), clock=clock)


@pytest.fixture
def capture_console() -> Console:
    """Truecolor console writing into a StringIO (read via .file.getvalue())."""
    return Console(file=io.StringIO(), force_terminal=True, color_system="truecolor", width=200)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in (
        "CHROMALOGO_CACHE_SIZE",
        "CHROMALOGO_GRADIENT_CACHE_SIZE",
        "CHROMALOGO_CACHE_TTL",
        "CHROMALOGO_CACHE_REFRESH",
        "CHROMALOGO_FONT",
        "CHROMALOGO_LOG_LEVEL",
        "CHROMALOGO_FORCE_COLOR",
        "NO_COLOR",
        "FORCE_COLOR",
        "CI",
    ):
        monkeypatch.delenv(var, raising=False)
    yield
