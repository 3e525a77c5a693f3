"""OpenTelemetry tracing for executor operations."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.trace import Status, StatusCode

TRACER_NAME = "docstore"

_tracer: trace.Tracer | None = None


def setup_tracing(
    service_name: str = "docstore",
    otlp_endpoint: str | None = None,
    console_export: bool = False,
) -> trace.Tracer:
    """Install a tracer provider exporting executor spans.

    Args:
        service_name: ``service.name`` resource attribute
        otlp_endpoint: gRPC OTLP collector, e.g. ``"http://localhost:4317"``
        console_export: Also print finished spans to stdout

    Returns:
        The tracer used for ``docstore.*`` spans
    """
    global _tracer

    from docstore import __version__

    provider = TracerProvider(
        resource=Resource.create({"service.name": service_name, "service.version": __version__})
    )
    exporters = []
    if otlp_endpoint:
        exporters.append(OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True))
    if console_export:
        exporters.append(ConsoleSpanExporter())
    for exporter in exporters:
        provider.add_span_processor(BatchSpanProcessor(exporter))

    trace.set_tracer_provider(provider)
    _tracer = provider.get_tracer(TRACER_NAME, __version__)
    return _tracer


def get_tracer() -> trace.Tracer:
    """Return the configured tracer, or the global provider's one."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer(TRACER_NAME)
    return _tracer


@contextmanager
def trace_span(
    name: str,
    attributes: dict[str, Any] | None = None,
) -> Generator[trace.Span, None, None]:
    """Run the block inside a span.

    An exception escaping the block marks the span as failed and is
    recorded on it before propagating.
    """
    with get_tracer().start_as_current_span(
        name,
        attributes=attributes,
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        try:
            yield span
        except Exception as e:
            span.record_exception(e)
            span.set_status(Status(StatusCode.ERROR, str(e)))
            raise
