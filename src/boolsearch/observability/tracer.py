"""
OpenTelemetry Tracer Configuration

Provides initialization and management of OpenTelemetry tracing.
"""

import os
from typing import TextIO

from loguru import logger
from opentelemetry import trace
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    ConsoleSpanExporter,
    SimpleSpanProcessor,
    SpanExporter,
)

# Global state
_tracer: trace.Tracer | None = None
_tracer_provider: TracerProvider | None = None
_tracing_enabled = False
_log_file_handle: TextIO | None = None


def is_tracing_enabled() -> bool:
    """Check if tracing is currently enabled."""
    return _tracing_enabled


def init_tracer(
    service_name: str = "boolsearch",
    enable_console_export: bool = False,
    log_file: str | None = None,
    exporter: SpanExporter | None = None,
) -> bool:
    """
    Initialize OpenTelemetry tracer.

    Args:
        service_name: Name of the service for tracing.
        enable_console_export: If True, export spans to stderr (for debugging).
        log_file: Path to a file to append finished spans to.
        exporter: Any additional span exporter (e.g. an in-memory one in tests).

    Returns:
        True once tracing is enabled.
    """
    global _tracer, _tracer_provider, _tracing_enabled, _log_file_handle

    if _tracer_provider is not None:
        shutdown_tracer()

    resource = Resource.create({SERVICE_NAME: service_name})
    _tracer_provider = TracerProvider(resource=resource)

    if exporter is not None:
        _tracer_provider.add_span_processor(SimpleSpanProcessor(exporter))

    if log_file:
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        # Kept open until shutdown_tracer()
        _log_file_handle = open(log_file, "a", encoding="utf-8")
        _tracer_provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter(out=_log_file_handle)))
        logger.info(f"OpenTelemetry file exporter enabled: {log_file}")
    elif enable_console_export:
        _tracer_provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
        logger.info("OpenTelemetry console exporter enabled")

    # Ignored by OpenTelemetry if a global provider was already set
    trace.set_tracer_provider(_tracer_provider)

    _tracer = _tracer_provider.get_tracer("boolsearch")
    _tracing_enabled = True

    logger.info(f"OpenTelemetry tracer initialized for service: {service_name}")
    return True


def get_tracer() -> trace.Tracer:
    """
    Get the tracer instance.

    Falls back to the global OpenTelemetry tracer, a no-op one unless the
    application configured a provider itself.
    """
    if _tracer is not None:
        return _tracer
    return trace.get_tracer("boolsearch")


def shutdown_tracer() -> None:
    """Shutdown the tracer and flush any pending spans."""
    global _tracer, _tracer_provider, _tracing_enabled, _log_file_handle

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        logger.info("OpenTelemetry tracer shut down")

    if _log_file_handle is not None:
        _log_file_handle.close()
        _log_file_handle = None

    _tracer = None
    _tracer_provider = None
    _tracing_enabled = False
