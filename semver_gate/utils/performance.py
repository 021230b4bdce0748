"""Performance monitoring utilities for SemverGate."""

import functools
import logging
import os
import time
import tracemalloc
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, TypeVar
from rich.console import Console
from rich.table import Table

F = TypeVar('F', bound=Callable[..., Any])

BENCHMARK_ENV_VAR = "SEMVER_GATE_VERBOSE_BENCHMARK"


@dataclass
class PerformanceMetrics:
    """Container for performance metrics."""

    function_name: str
    execution_time: float
    memory_usage: Optional[float] = None
    memory_peak: Optional[float] = None

    def __post_init__(self) -> None:
        """Convert memory usage to MB for readability."""
        if self.memory_usage is not None:
            self.memory_usage = self.memory_usage / 1024 / 1024
        if self.memory_peak is not None:
            self.memory_peak = self.memory_peak / 1024 / 1024


class PerformanceMonitor:
    """Timing and optional memory tracking for matcher operations."""

    def __init__(self, enabled: bool = True, enable_memory_tracking: bool = False) -> None:
        self.metrics: List[PerformanceMetrics] = []
        self.enabled = enabled
        self.enable_memory_tracking = enabled and enable_memory_tracking
        self.console = Console()

        if self.enable_memory_tracking and not tracemalloc.is_tracing():
            tracemalloc.start()

    @contextmanager
    def measure(self, name: str) -> Any:
        """Context manager for measuring performance.

        Nothing is recorded when the monitor is disabled.

        Args:
            name: Name of the operation being measured

        Yields:
            None
        """
        if not self.enabled:
            yield
            return

        start_time = time.perf_counter()
        start_memory = None

        if self.enable_memory_tracking:
            start_memory = tracemalloc.get_traced_memory()[0]

        try:
            yield
        finally:
            execution_time = time.perf_counter() - start_time

            if self.enable_memory_tracking:
                current_memory, peak_memory = tracemalloc.get_traced_memory()
                memory_usage = current_memory - start_memory if start_memory else 0
            else:
                memory_usage = None
                peak_memory = None

            self.metrics.append(PerformanceMetrics(
                function_name=name,
                execution_time=execution_time,
                memory_usage=memory_usage,
                memory_peak=peak_memory,
            ))

    def get_summary(self) -> Dict[str, Any]:
        """Get performance summary.

        Returns:
            Dictionary with performance summary
        """
        if not self.metrics:
            return {}

        total_time = sum(m.execution_time for m in self.metrics)

        return {
            "total_executions": len(self.metrics),
            "total_time": total_time,
            "average_time": total_time / len(self.metrics),
            "total_memory": sum(m.memory_usage or 0 for m in self.metrics),
            "max_peak_memory": max(m.memory_peak or 0 for m in self.metrics),
            "metrics": self.metrics,
        }

    def print_summary(self) -> None:
        """Print performance summary to console."""
        summary = self.get_summary()
        if not summary:
            return

        table = Table(title="Performance Summary")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Total Executions", str(summary["total_executions"]))
        table.add_row("Total Time", f"{summary['total_time']:.4f}s")
        table.add_row("Average Time", f"{summary['average_time']:.4f}s")

        if self.enable_memory_tracking:
            table.add_row("Total Memory", f"{summary['total_memory']:.2f} MB")
            table.add_row("Max Peak Memory", f"{summary['max_peak_memory']:.2f} MB")

        self.console.print(table)


def benchmark(func: F) -> F:
    """Simple benchmark decorator.

    Timing is only logged when ``SEMVER_GATE_VERBOSE_BENCHMARK`` is set.

    Args:
        func: Function to benchmark

    Returns:
        Wrapped function with timing
    """
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        end_time = time.perf_counter()

        if os.environ.get(BENCHMARK_ENV_VAR):
            logger = logging.getLogger("Performance")
            logger.info(f"{func.__name__} took {end_time - start_time:.4f} seconds")
        return result
    return wrapper  # type: ignore[return-value]
