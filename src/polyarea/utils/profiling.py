"""
Performance Profiling Utilities for PolyArea

Every pointer event triggers a redraw, so rendering has to stay well
inside a frame. Operations with a target in ``TARGETS`` log a warning
when they run over it.
"""

import time
import functools
import logging
from typing import Callable, Dict, List, NamedTuple, Optional
from contextlib import contextmanager

logger = logging.getLogger("polyarea.profiling")


class TimingResult(NamedTuple):
    """One timed run of an operation."""
    operation: str
    duration_ms: float


class PerformanceProfiler:
    """Shared collector of operation timings."""

    # Targets in milliseconds
    TARGETS = {
        "canvas_render": 16,
        "polygon_layer": 50,
    }

    # Oldest results are dropped past this many
    MAX_RESULTS = 5000

    _instance: Optional['PerformanceProfiler'] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.results = []
        return cls._instance

    @classmethod
    def get_instance(cls) -> 'PerformanceProfiler':
        return cls()

    def record(self, operation: str, duration_ms: float) -> TimingResult:
        """Store a timing and warn if it exceeds the operation's target."""
        result = TimingResult(operation, duration_ms)
        self.results.append(result)
        overflow = len(self.results) - self.MAX_RESULTS
        if overflow > 0:
            del self.results[:overflow]

        target = self.TARGETS.get(operation)
        if target and duration_ms > target:
            logger.warning(
                "Performance warning: %s took %.1fms (target: %sms)",
                operation, duration_ms, target
            )
        else:
            logger.debug("%s: %.1fms", operation, duration_ms)
        return result

    @contextmanager
    def measure(self, operation: str):
        """Time the enclosed block, including blocks that raise."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.record(operation, (time.perf_counter() - start) * 1000)

    def durations(self) -> Dict[str, List[float]]:
        """Recorded durations grouped by operation."""
        grouped: Dict[str, List[float]] = {}
        for result in self.results:
            grouped.setdefault(result.operation, []).append(result.duration_ms)
        return grouped

    def get_summary(self) -> Dict[str, Dict]:
        """Count, average, min, max and target per operation."""
        summary = {}
        for op, times in self.durations().items():
            target = self.TARGETS.get(op)
            avg = sum(times) / len(times)
            summary[op] = {
                "count": len(times),
                "avg_ms": round(avg, 2),
                "min_ms": round(min(times), 2),
                "max_ms": round(max(times), 2),
                "target_ms": target,
                "meets_target": avg <= target if target else None,
            }
        return summary

    def log_summary(self):
        summary = self.get_summary()
        if not summary:
            logger.info("No timing data collected")
            return

        for op, stats in sorted(summary.items()):
            status = ""
            if stats["target_ms"]:
                status = " [OK]" if stats["meets_target"] else " [SLOW]"
            logger.info(
                "%s%s: count=%d avg=%.1fms min=%.1fms max=%.1fms",
                op, status, stats["count"], stats["avg_ms"],
                stats["min_ms"], stats["max_ms"]
            )

    def clear(self):
        self.results.clear()


def timed(operation: str = None):
    """
    Decorator to time a function execution.

    Usage:
        @timed("canvas_render")
        def render(self, session, width, height):
            ...
    """
    def decorator(func: Callable) -> Callable:
        op_name = operation or func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with PerformanceProfiler.get_instance().measure(op_name):
                return func(*args, **kwargs)

        return wrapper
    return decorator


def profile_block(operation: str):
    """Context manager timing a block under ``operation``."""
    return PerformanceProfiler.get_instance().measure(operation)


profiler = PerformanceProfiler.get_instance()
