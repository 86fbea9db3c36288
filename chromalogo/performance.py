# chromalogo/performance.py
"""
Render timing and cache metrics.

``PerformanceMonitor`` keeps the most recent render durations and combines
them with the cache manager's counters into a small report (a Rich table, so
the CLI can print it next to the art).
"""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Optional

from rich.table import Table

from .cache.manager import CacheManager

__all__ = ["PerformanceMonitor", "PerformanceMetrics"]


@dataclass(frozen=True)
class PerformanceMetrics:
    render_time_ms: float
    cache_hit_rate: float
    operations_per_second: float
    samples: int


class PerformanceMonitor:
    """Rolling window of render durations.

    Parameters
    ----------
    max_samples : int, default 100
        Oldest samples are discarded beyond this count.
    timer : Callable[[], float], default time.perf_counter
        Time source in seconds; injectable for tests.
    """

    def __init__(self, max_samples: int = 100, timer: Callable[[], float] = time.perf_counter) -> None:
        self._samples: Deque[float] = deque(maxlen=max_samples)
        self._timer = timer

    def start_timing(self) -> Callable[[], float]:
        """Start a measurement; call the returned function to stop it.

        The stop function records the sample and returns it in milliseconds.
        """
        started = self._timer()

        def stop() -> float:
            elapsed_ms = (self._timer() - started) * 1000.0
            self._samples.append(elapsed_ms)
            return elapsed_ms

        return stop

    def get_metrics(self, cache: Optional[CacheManager] = None) -> PerformanceMetrics:
        avg = sum(self._samples) / len(self._samples) if self._samples else 0.0
        hit_rate = cache.stats().total_hit_rate if cache is not None else 0.0
        return PerformanceMetrics(
            render_time_ms=avg,
            cache_hit_rate=hit_rate,
            operations_per_second=(1000.0 / avg) if avg > 0 else 0.0,
            samples=len(self._samples),
        )

    def report(self, cache: Optional[CacheManager] = None) -> Table:
        """Build a Rich table summarizing timings and per-cache counters."""
        metrics = self.get_metrics(cache)
        table = Table(title="Render performance", show_header=True, header_style="bold cyan")
        table.add_column("Metric")
        table.add_column("Value", justify="right")
        table.add_row("Average render time", f"{metrics.render_time_ms:.2f} ms")
        table.add_row("Operations/second", f"{metrics.operations_per_second:.1f}")
        table.add_row("Cache hit rate", f"{metrics.cache_hit_rate * 100:.1f}%")

        if cache is not None:
            stats = cache.stats()
            for label, s in (("Glyph", stats.glyph), ("Gradient", stats.gradient)):
                table.add_row(
                    f"{label} cache",
                    f"{s.size}/{s.max_size} entries, {s.hit_rate * 100:.1f}% hits",
                )
        return table

    def reset(self) -> None:
        self._samples.clear()
