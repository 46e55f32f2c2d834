"""
Prometheus metrics collection.
"""

import threading

from prometheus_client import (
    REGISTRY,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

from spooler.constants import (
    METRIC_BATCH_SIZE,
    METRIC_DOCUMENTS_PRINTED,
    METRIC_DOCUMENTS_SUBMITTED,
    METRIC_PRINT_RUNS,
    METRIC_QUEUE_DEPTH,
    ProcessMode,
)

# Global metrics instance
_metrics: "MetricsCollector | None" = None
_metrics_lock = threading.Lock()


class MetricsCollector:
    """
    Prometheus metrics collector for the print spooler.

    Collects metrics for:
    - Queue depth
    - Document submissions and batch sizes
    - Processing passes and documents printed
    """

    def __init__(self, registry: CollectorRegistry | None = None):
        """
        Initialize the metrics collector.

        Args:
            registry: Optional custom registry. Uses default if not provided.
        """
        self._registry = registry or REGISTRY

        self.queue_depth = Gauge(
            METRIC_QUEUE_DEPTH,
            "Number of documents currently queued",
            registry=self._registry,
        )

        self.documents_submitted = Counter(
            METRIC_DOCUMENTS_SUBMITTED,
            "Total number of documents submitted",
            registry=self._registry,
        )

        self.documents_printed = Counter(
            METRIC_DOCUMENTS_PRINTED,
            "Total number of document lines written by processing passes",
            registry=self._registry,
        )

        self.print_runs = Counter(
            METRIC_PRINT_RUNS,
            "Total number of processing passes",
            ["mode"],
            registry=self._registry,
        )

        self.batch_size = Histogram(
            METRIC_BATCH_SIZE,
            "Number of documents per submitted batch",
            buckets=(0, 1, 2, 5, 10, 25, 50, 100, 500),
            registry=self._registry,
        )

    def record_batch_submitted(self, size: int, depth: int) -> None:
        """Record a submitted batch and the resulting queue depth."""
        self.documents_submitted.inc(size)
        self.batch_size.observe(size)
        self.queue_depth.set(depth)

    def record_print_run(self, mode: ProcessMode, printed: int, depth: int) -> None:
        """Record a processing pass."""
        self.print_runs.labels(mode=mode.value).inc()
        self.documents_printed.inc(printed)
        self.queue_depth.set(depth)

    def get_metrics(self) -> bytes:
        """Get all metrics in Prometheus format."""
        return generate_latest(self._registry)


def setup_metrics() -> MetricsCollector:
    """
    Set up and return the process-wide metrics collector.

    Returns:
        MetricsCollector: The metrics collector instance.
    """
    global _metrics
    with _metrics_lock:
        if _metrics is None:
            _metrics = MetricsCollector()
    return _metrics


def get_metrics() -> MetricsCollector:
    """
    Get the metrics collector instance, creating it on first use.

    Returns:
        MetricsCollector: The metrics collector instance.
    """
    if _metrics is None:
        return setup_metrics()
    return _metrics


def get_metrics_text() -> str:
    """Render the process-wide metrics in the Prometheus text exposition format."""
    return get_metrics().get_metrics().decode("utf-8")
