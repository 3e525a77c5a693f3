"""Application layer for the document store.

The application layer orchestrates domain logic to fulfill use cases:
loading a collection snapshot, running it through the query pipeline and
persisting mutations.

Exports:
    - QueryExecutor: Runs queries and mutations against a CollectionStore
    - QueryPlan: Clauses split by kind, ready for the pipeline
    - CollectionHandle: Reference to a named collection
    - collection: CollectionHandle constructor
"""

from docstore.application.executor import (
    CollectionHandle,
    QueryExecutor,
    QueryPlan,
    collection,
)

__all__ = [
    "QueryExecutor",
    "QueryPlan",
    "CollectionHandle",
    "collection",
]
