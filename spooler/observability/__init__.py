"""
Observability module.
Contains logging, metrics, and tracing setup.
"""

from spooler.observability.logging import bind_context, clear_context, setup_logging
from spooler.observability.metrics import (
    MetricsCollector,
    get_metrics,
    get_metrics_text,
    setup_metrics,
)
from spooler.observability.tracing import create_span, get_tracer, setup_tracing

__all__ = [
    "setup_logging",
    "bind_context",
    "clear_context",
    "setup_metrics",
    "get_metrics",
    "get_metrics_text",
    "MetricsCollector",
    "setup_tracing",
    "get_tracer",
    "create_span",
]
