"""Module-level, Firestore-style API.

The functions here forward to a process-wide ``QueryExecutor`` resolved from
the dependency injection container, so callers only deal with collection
handles and clauses:

    from docstore import collection, add_doc, get_docs, where, order_by

    people = collection("people")
    add_doc(people, {"name": "Mike", "age": 40})
    get_docs(people, where("age", ">", 18), order_by("name", "desc"))

The executor is built from the configuration on first use. Call
``configure`` to pick another configuration, or ``use_store`` to bind an
explicit Collection Store.
"""

from __future__ import annotations

from typing import Any, Mapping

from docstore.application.executor import CollectionHandle, QueryExecutor, collection
from docstore.domain.entities import Document
from docstore.domain.value_objects import limit, order_by, skip, where
from docstore.infrastructure.config import Config, get_config
from docstore.infrastructure.container import bootstrap, get_container, reset_container
from docstore.infrastructure.logging import setup_logging
from docstore.infrastructure.metrics import MetricsRegistry
from docstore.infrastructure.tracing import setup_tracing
from docstore.ports.outbound import CollectionStore

__all__ = [
    "collection",
    "where",
    "order_by",
    "limit",
    "skip",
    "add_doc",
    "get_docs",
    "get_doc",
    "count_docs",
    "update_docs",
    "update_doc",
    "delete_docs",
    "delete_doc",
    "configure",
    "use_store",
    "get_executor",
]


def configure(config: Config | None = None) -> QueryExecutor:
    """Rebuild the global executor from a configuration.

    Also sets up logging and tracing from the observability settings.
    """
    config = config or get_config()
    setup_logging(config.observability.log_level, config.observability.log_format)
    if config.observability.otel_endpoint:
        setup_tracing(
            service_name=config.observability.otel_service_name,
            otlp_endpoint=config.observability.otel_endpoint,
        )
    reset_container()
    config.ensure_directories()
    return bootstrap(config).resolve(QueryExecutor)


def use_store(store: CollectionStore) -> QueryExecutor:
    """Bind the global executor to an explicit Collection Store."""
    container = get_container()
    if not container.has(QueryExecutor):
        bootstrap(container=container)
    container.register_factory(CollectionStore, lambda c: store)
    container.register_factory(
        QueryExecutor,
        lambda c: QueryExecutor(store, metrics=c.resolve(MetricsRegistry)),
    )
    return container.resolve(QueryExecutor)


def get_executor() -> QueryExecutor:
    """Return the global executor, bootstrapping it on first use."""
    container = get_container()
    if not container.has(QueryExecutor):
        bootstrap(container=container)
    return container.resolve(QueryExecutor)


def add_doc(collection: CollectionHandle, fields: Mapping[str, Any]) -> Document:
    return get_executor().add_doc(collection, fields)


def get_docs(collection: CollectionHandle, *clauses: Any) -> list[Document]:
    return get_executor().get_docs(collection, *clauses)


def get_doc(collection: CollectionHandle, *clauses: Any) -> Document | None:
    return get_executor().get_doc(collection, *clauses)


def count_docs(collection: CollectionHandle, *clauses: Any) -> int:
    return get_executor().count_docs(collection, *clauses)


def update_docs(collection: CollectionHandle, *args: Any) -> list[Document]:
    """Patch every selected document; the last argument is the patch."""
    return get_executor().update_docs(collection, *args)


def update_doc(collection: CollectionHandle, patch: Mapping[str, Any]) -> Document | None:
    return get_executor().update_doc(collection, patch)


def delete_docs(collection: CollectionHandle, *clauses: Any) -> list[Document]:
    return get_executor().delete_docs(collection, *clauses)


def delete_doc(collection: CollectionHandle) -> Document | None:
    return get_executor().delete_doc(collection)
