"""Query Executor.

This module runs queries and mutations against a Collection Store. Every
call loads the full collection snapshot and pushes it through a fixed
pipeline:

    snapshot -> predicates (AND) -> ordering (stable, multi-key) -> skip -> limit

The clauses are passed variadically and may arrive in any order. They are
split by kind into a ``QueryPlan`` first, so the pipeline order never
depends on argument order. Ordering clauses keep their relative order.

Mutations select documents with the same pipeline, apply the change to the
snapshot and save the entire collection back. Reads never write, and
neither does a mutation on an empty or unknown collection, so it does not
create the collection.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Generator, Iterable, Mapping

from docstore.domain.entities import Document, check_patch
from docstore.domain.exceptions import InvalidArgumentError
from docstore.domain.services import filter_documents, paginate, sort_documents
from docstore.domain.value_objects import Limit, OrderBy, Skip, Where
from docstore.infrastructure.logging import get_logger, operation_context
from docstore.infrastructure.metrics import MetricsRegistry, get_metrics
from docstore.infrastructure.tracing import trace_span
from docstore.ports.outbound import CollectionStore

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CollectionHandle:
    """Reference to a named collection. Carries no state besides the name."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidArgumentError(f"Collection name must be a non-empty string, got {self.name!r}")


def collection(name: str) -> CollectionHandle:
    """Build a collection handle."""
    return CollectionHandle(name)


@dataclass
class QueryPlan:
    """Clauses split by kind, ready for the pipeline.

    When several limit or skip clauses are given, the last one wins.
    """

    predicates: list[Where] = field(default_factory=list)
    orderings: list[OrderBy] = field(default_factory=list)
    skip: int | None = None
    limit: int | None = None

    @classmethod
    def from_clauses(cls, clauses: Iterable[Any]) -> QueryPlan:
        """Split clauses by kind.

        Raises:
            InvalidArgumentError: If an argument is not a clause.
        """
        plan = cls()
        for clause in clauses:
            if isinstance(clause, Where):
                plan.predicates.append(clause)
            elif isinstance(clause, OrderBy):
                plan.orderings.append(clause)
            elif isinstance(clause, Skip):
                plan.skip = clause.count
            elif isinstance(clause, Limit):
                plan.limit = clause.count
            else:
                raise InvalidArgumentError(f"Malformed clause: {clause!r}")
        return plan

    def run(self, documents: list[Document]) -> list[Document]:
        """Apply the pipeline to a snapshot."""
        selected = filter_documents(documents, self.predicates)
        selected = sort_documents(selected, self.orderings)
        return paginate(selected, skip=self.skip, limit=self.limit)


class QueryExecutor:
    """Executes queries and mutations against a Collection Store.

    Example:
        executor = QueryExecutor(InMemoryCollectionStore())
        people = collection("people")
        executor.add_doc(people, {"name": "Mike", "age": 18})
        adults = executor.get_docs(people, where("age", ">=", 18), order_by("name"))
    """

    def __init__(
        self,
        store: CollectionStore,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        self._store = store
        self._metrics = metrics

    @property
    def store(self) -> CollectionStore:
        """The backing Collection Store."""
        return self._store

    @property
    def metrics(self) -> MetricsRegistry:
        if self._metrics is None:
            self._metrics = get_metrics()
        return self._metrics

    def plan(self, *clauses: Any) -> QueryPlan:
        """Split clauses into a QueryPlan without running it."""
        return QueryPlan.from_clauses(clauses)

    # ----- Reads -----

    def get_docs(self, collection: CollectionHandle, *clauses: Any) -> list[Document]:
        """Return the documents selected by the clauses (may be empty)."""
        with self._operation("get_docs", collection, len(clauses)):
            plan = self.plan(*clauses)
            docs = plan.run(self._load(collection))
            self.metrics.documents_returned_total.labels(collection=collection.name).inc(len(docs))
            logger.debug("query_executed", collection=collection.name, returned=len(docs))
            return docs

    def get_doc(self, collection: CollectionHandle, *clauses: Any) -> Document | None:
        """Return the first selected document, or None if nothing matches."""
        with self._operation("get_doc", collection, len(clauses)):
            plan = self.plan(*clauses)
            docs = plan.run(self._load(collection))
            if not docs:
                return None
            self.metrics.documents_returned_total.labels(collection=collection.name).inc()
            return docs[0]

    def count_docs(self, collection: CollectionHandle, *clauses: Any) -> int:
        """Count the documents selected by the clauses."""
        with self._operation("count_docs", collection, len(clauses)):
            plan = self.plan(*clauses)
            return len(plan.run(self._load(collection)))

    # ----- Writes -----

    def add_doc(self, collection: CollectionHandle, fields: Mapping[str, Any]) -> Document:
        """Add a document and return it with its new identifier."""
        with self._operation("add_doc", collection, 0):
            data = check_patch(fields)
            records = self._store.load(collection.name)
            doc = Document(id=self._store.next_id(collection.name), data=data)
            records.append(doc.to_record())
            self._store.save(collection.name, records)

            self.metrics.mutations_total.labels(operation="add").inc()
            logger.info("documents_added", collection=collection.name, id=doc.id)
            return doc

    def update_docs(self, collection: CollectionHandle, *args: Any) -> list[Document]:
        """Shallow-merge a patch into every selected document.

        The last positional argument is the patch; the ones before it are
        clauses:

            executor.update_docs(people, where("name", "==", "Abel"), {"age": 22})

        Returns:
            The updated documents, in selection order.
        """
        if not args:
            raise InvalidArgumentError("update_docs requires a patch as its last argument")
        *clauses, patch = args
        with self._operation("update_docs", collection, len(clauses)):
            patch = check_patch(patch)
            plan = self.plan(*clauses)
            snapshot = self._load(collection)
            updated = {doc.id: doc.merged(patch) for doc in plan.run(snapshot)}
            if snapshot:
                self._save(collection, [updated.get(doc.id, doc) for doc in snapshot])

            self.metrics.mutations_total.labels(operation="update").inc(len(updated))
            logger.info("documents_updated", collection=collection.name, count=len(updated))
            return list(updated.values())

    def update_doc(self, collection: CollectionHandle, patch: Mapping[str, Any]) -> Document | None:
        """Shallow-merge a patch into the first document in insertion order.

        Returns:
            The updated document, or None if the collection is empty.
        """
        with self._operation("update_doc", collection, 0):
            patch = check_patch(patch)
            snapshot = self._load(collection)
            if not snapshot:
                return None
            first = snapshot[0].merged(patch)
            self._save(collection, [first, *snapshot[1:]])

            self.metrics.mutations_total.labels(operation="update").inc()
            logger.info("documents_updated", collection=collection.name, count=1)
            return first

    def delete_docs(self, collection: CollectionHandle, *clauses: Any) -> list[Document]:
        """Remove every selected document.

        Survivors keep their relative order.

        Returns:
            The removed documents, in selection order.
        """
        with self._operation("delete_docs", collection, len(clauses)):
            plan = self.plan(*clauses)
            snapshot = self._load(collection)
            removed = plan.run(snapshot)
            removed_ids = {doc.id for doc in removed}
            if snapshot:
                self._save(collection, [doc for doc in snapshot if doc.id not in removed_ids])

            self.metrics.mutations_total.labels(operation="delete").inc(len(removed))
            logger.info("documents_deleted", collection=collection.name, count=len(removed))
            return removed

    def delete_doc(self, collection: CollectionHandle) -> Document | None:
        """Remove the first document in insertion order.

        Returns:
            The removed document, or None if the collection is empty.
        """
        with self._operation("delete_doc", collection, 0):
            snapshot = self._load(collection)
            if not snapshot:
                return None
            self._save(collection, snapshot[1:])

            self.metrics.mutations_total.labels(operation="delete").inc()
            logger.info("documents_deleted", collection=collection.name, count=1)
            return snapshot[0]

    # ----- Internals -----

    def _load(self, collection: CollectionHandle) -> list[Document]:
        records = self._store.load(collection.name)
        self.metrics.documents_scanned_total.labels(collection=collection.name).inc(len(records))
        return [Document.from_record(record) for record in records]

    def _save(self, collection: CollectionHandle, documents: list[Document]) -> None:
        self._store.save(collection.name, [doc.to_record() for doc in documents])

    @contextmanager
    def _operation(
        self, operation: str, collection: CollectionHandle, clause_count: int
    ) -> Generator[None, None, None]:
        """Trace, time and count one executor operation."""
        start = time.perf_counter()
        attributes = {"docstore.collection": collection.name, "docstore.clauses": clause_count}
        with operation_context(operation, collection.name), trace_span(
            f"docstore.{operation}", attributes
        ):
            try:
                yield
            except Exception as e:
                self.metrics.queries_total.labels(operation=operation, status="error").inc()
                logger.warning(
                    "query_failed",
                    operation=operation,
                    collection=collection.name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise
            else:
                self.metrics.queries_total.labels(operation=operation, status="success").inc()
            finally:
                self.metrics.query_latency_seconds.labels(operation=operation).observe(
                    time.perf_counter() - start
                )
