"""Prometheus metrics for the document store."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all document store metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Operation metrics
        self.queries_total = Counter(
            "docstore_queries_total",
            "Total number of executor operations",
            ["operation", "status"],  # status: success, error
            registry=self._registry,
        )

        self.query_latency_seconds = Histogram(
            "docstore_query_latency_seconds",
            "Executor operation latency in seconds",
            ["operation"],
            buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
            registry=self._registry,
        )

        # Scan metrics
        self.documents_scanned_total = Counter(
            "docstore_documents_scanned_total",
            "Documents loaded from snapshots",
            ["collection"],
            registry=self._registry,
        )

        self.documents_returned_total = Counter(
            "docstore_documents_returned_total",
            "Documents returned by reads",
            ["collection"],
            registry=self._registry,
        )

        # Write metrics
        self.mutations_total = Counter(
            "docstore_mutations_total",
            "Documents written by mutations",
            ["operation"],  # add, update, delete
            registry=self._registry,
        )

        self.info = Info(
            "docstore",
            "Document store information",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        """The underlying collector registry."""
        return self._registry


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 8001, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up Prometheus metrics server.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    global _metrics
    _metrics = MetricsRegistry(registry)

    from docstore import __version__
    _metrics.info.info({
        "version": __version__,
    })

    start_http_server(port, registry=registry or REGISTRY)

    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
