"""Outbound ports - interfaces for external dependencies.

Outbound ports define contracts for external systems that the query
engine depends on, such as the key-value medium holding collections.
"""

from docstore.ports.outbound.collection_store import CollectionStore

__all__ = [
    "CollectionStore",
]
