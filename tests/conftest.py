"""
Pytest configuration and shared fixtures.
"""

import io
from collections.abc import Generator

import pytest
from prometheus_client import CollectorRegistry

import spooler.core.print_spooler as print_spooler_module
from spooler.config import get_settings
from spooler.core import PrintSpooler
from spooler.observability.metrics import MetricsCollector


@pytest.fixture
def metrics() -> MetricsCollector:
    """Create a metrics collector bound to a private registry."""
    return MetricsCollector(registry=CollectorRegistry())


@pytest.fixture
def spooler(metrics: MetricsCollector) -> PrintSpooler:
    """Create a private, non-draining spooler."""
    return PrintSpooler(drain_on_process=False, metrics=metrics)


@pytest.fixture
def draining_spooler(metrics: MetricsCollector) -> PrintSpooler:
    """Create a private spooler that clears its queue on every pass."""
    return PrintSpooler(drain_on_process=True, metrics=metrics)


@pytest.fixture
def output() -> io.StringIO:
    """In-memory stream for processing output."""
    return io.StringIO()


@pytest.fixture
def fresh_print_spooler(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset the shared spooler slot so the next accessor call constructs anew."""
    monkeypatch.setattr(print_spooler_module, "_print_spooler", None)


@pytest.fixture
def clear_settings_cache() -> Generator[None]:
    """Drop cached settings before and after the test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

