"""Infrastructure layer - cross-cutting concerns."""

from docstore.infrastructure.config import Config, get_config
from docstore.infrastructure.logging import setup_logging, get_logger, operation_context
from docstore.infrastructure.metrics import setup_metrics, get_metrics, MetricsRegistry
from docstore.infrastructure.tracing import setup_tracing, get_tracer, trace_span

__all__ = [
    "Config",
    "get_config",
    "setup_logging",
    "get_logger",
    "operation_context",
    "setup_metrics",
    "get_metrics",
    "MetricsRegistry",
    "setup_tracing",
    "get_tracer",
    "trace_span",
]
