"""
OpenTelemetry tracing setup.
"""

import threading
from typing import Any

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.trace import Tracer

from spooler import __version__
from spooler.config import get_settings

# Global tracer instance
_tracer: Tracer | None = None
_tracer_lock = threading.Lock()


def setup_tracing(enable_console_export: bool | None = None) -> Tracer:
    """
    Set up OpenTelemetry tracing.

    Spans are exported over OTLP only when an endpoint is configured.

    Args:
        enable_console_export: If True, also export spans to console.
            Defaults to the ``otel_console_export`` setting.

    Returns:
        Tracer: The tracer instance.
    """
    global _tracer

    settings = get_settings()
    if enable_console_export is None:
        enable_console_export = settings.otel_console_export

    resource = Resource.create(
        {
            "service.name": settings.otel_service_name,
            "service.version": __version__,
        }
    )

    provider = TracerProvider(resource=resource)

    if settings.otel_exporter_otlp_endpoint:
        otlp_exporter = OTLPSpanExporter(
            endpoint=settings.otel_exporter_otlp_endpoint,
            insecure=True,
        )
        provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    if enable_console_export:
        provider.add_span_processor(
            BatchSpanProcessor(ConsoleSpanExporter())
        )

    trace.set_tracer_provider(provider)

    _tracer = trace.get_tracer(settings.otel_service_name)

    return _tracer


def get_tracer() -> Tracer:
    """
    Get the tracer instance, setting up tracing on first use.

    Returns:
        Tracer: The tracer instance.
    """
    global _tracer
    if _tracer is None:
        with _tracer_lock:
            if _tracer is None:
                _tracer = setup_tracing()
    return _tracer


def create_span(name: str, **attributes: Any) -> Any:
    """
    Create a new span with the given name and attributes.

    Args:
        name: Span name.
        **attributes: Span attributes. ``None`` values are skipped.

    Returns:
        A context manager for the span.
    """
    tracer = get_tracer()
    return tracer.start_as_current_span(
        name,
        attributes={
            key: str(value) for key, value in attributes.items() if value is not None
        },
    )
