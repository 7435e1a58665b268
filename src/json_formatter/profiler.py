"""Performance profiler for JSON Formatter operations."""

import logging
import time
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Deque, Dict, Iterator, Optional

import psutil


@dataclass
class PerformanceMetrics:
    """Performance metrics for a single operation."""
    operation_name: str
    start_time: float
    end_time: float
    duration: float
    input_size: int
    output_size: int
    memory_start_mb: float
    memory_end_mb: float

    @property
    def throughput_mbps(self) -> float:
        """Input megabytes processed per second."""
        if self.duration <= 0:
            return 0.0
        return (self.input_size / 1024 / 1024) / self.duration


class ProfileSession:
    """Handle yielded by profile_operation for reporting output size."""

    def __init__(self):
        self.output_size = 0


class PerformanceProfiler:
    """
    Records duration and memory usage of operations.

    Only the most recent max_history metrics are kept.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, max_history: int = 100):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
            max_history: Number of metrics entries to keep
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: Deque[PerformanceMetrics] = deque(maxlen=max_history)

    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0) -> Iterator[ProfileSession]:
        """
        Context manager for profiling operations.

        Args:
            operation_name: Name of the operation being profiled
            input_size: Size of input data
        """
        session = ProfileSession()
        start_time = time.perf_counter()
        start_memory = self._memory_mb()
        try:
            yield session
        finally:
            end_time = time.perf_counter()
            metrics = PerformanceMetrics(
                operation_name=operation_name,
                start_time=start_time,
                end_time=end_time,
                duration=end_time - start_time,
                input_size=input_size,
                output_size=session.output_size,
                memory_start_mb=start_memory,
                memory_end_mb=self._memory_mb(),
            )
            self.metrics_history.append(metrics)
            self.logger.debug(
                f"{operation_name}: {metrics.duration * 1000:.2f}ms, "
                f"{input_size} -> {session.output_size} characters, "
                f"memory {metrics.memory_end_mb:.1f} MB"
            )

    def _memory_mb(self) -> float:
        """Resident memory of the current process in MB."""
        try:
            return psutil.Process().memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            self.logger.warning(f"Performance sampling failed: {e}")
            return 0.0

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of recorded performance metrics.

        Returns:
            Dictionary with performance summary
        """
        if not self.metrics_history:
            return {"total_operations": 0}

        count = len(self.metrics_history)
        total_duration = sum(m.duration for m in self.metrics_history)

        return {
            "total_operations": count,
            "total_duration": total_duration,
            "average_duration": total_duration / count,
            "total_input": sum(m.input_size for m in self.metrics_history),
            "total_output": sum(m.output_size for m in self.metrics_history),
            "peak_memory_mb": max(m.memory_end_mb for m in self.metrics_history),
            "operations": [
                {"name": m.operation_name, "duration": m.duration}
                for m in self.metrics_history
            ],
        }
