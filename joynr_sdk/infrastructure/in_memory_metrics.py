"""In-memory metrics implementation of the MetricsPort."""

import time
from collections import defaultdict
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from ..ports.metrics import MetricsPort


class DurationSummary:
    """Running statistics over the durations recorded by one timer."""

    def __init__(self) -> None:
        self.count: int = 0
        self.total_ms: float = 0.0
        self.min_ms: float = float("inf")
        self.max_ms: float = float("-inf")

    def add(self, duration_ms: float) -> None:
        self.count += 1
        self.total_ms += duration_ms
        self.min_ms = min(self.min_ms, duration_ms)
        self.max_ms = max(self.max_ms, duration_ms)

    @property
    def average_ms(self) -> float:
        return self.total_ms / self.count if self.count else 0.0

    def to_dict(self) -> dict[str, float]:
        if not self.count:
            return {"count": 0, "average": 0.0, "min": 0, "max": 0}
        return {
            "count": self.count,
            "average": round(self.average_ms, 2),
            "min": round(self.min_ms, 2),
            "max": round(self.max_ms, 2),
        }


class InMemoryMetrics(MetricsPort):
    """MetricsPort keeping counters and timer summaries in process memory.

    Default metrics sink for messaging stubs; swap in another MetricsPort to
    export elsewhere.
    """

    def __init__(self) -> None:
        self._counters: dict[str, int] = defaultdict(int)
        self._timers: dict[str, DurationSummary] = defaultdict(DurationSummary)

    def increment(self, name: str, value: int = 1) -> None:
        self._counters[name] += value

    @contextmanager
    def timer(self, name: str) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            self._timers[name].add((time.perf_counter() - start) * 1000)

    def get_all(self) -> dict[str, Any]:
        return {
            "counters": dict(self._counters),
            "timers": {name: summary.to_dict() for name, summary in self._timers.items()},
        }

    def reset(self) -> None:
        self._counters.clear()
        self._timers.clear()
