"""In-memory collection store adapter.

A simple in-memory implementation of CollectionStore for testing and
embedding. Data is not persisted across restarts.

Usage:
    store = InMemoryCollectionStore()
    store.save("people", [{"_id": "a1", "name": "Mike"}])
    records = store.load("people")
"""

from __future__ import annotations

import copy
import threading
from typing import Any, Callable

from docstore.domain.value_objects import DocumentId, generate_document_id


class InMemoryCollectionStore:
    """In-memory implementation of CollectionStore.

    Keeps one record list per collection name. Records are deep-copied on
    the way in and out so callers never share state with the store.
    """

    def __init__(self, id_factory: Callable[[], DocumentId] = generate_document_id) -> None:
        """Initialize empty storage.

        Args:
            id_factory: Callable producing new document identifiers
        """
        self._collections: dict[str, list[dict[str, Any]]] = {}
        self._id_factory = id_factory
        self._lock = threading.Lock()

    def load(self, name: str) -> list[dict[str, Any]]:
        with self._lock:
            return copy.deepcopy(self._collections.get(name, []))

    def save(self, name: str, records: list[dict[str, Any]]) -> None:
        with self._lock:
            self._collections[name] = copy.deepcopy(records)

    def next_id(self, name: str) -> DocumentId:
        return self._id_factory()

    def list_collections(self) -> list[str]:
        with self._lock:
            return sorted(self._collections)

    def drop(self, name: str) -> bool:
        with self._lock:
            return self._collections.pop(name, None) is not None

    def clear(self) -> None:
        """Remove every collection."""
        with self._lock:
            self._collections.clear()

    def __len__(self) -> int:
        """Number of stored collections."""
        return len(self._collections)
