"""Collection Store port for raw collection persistence.

This outbound port defines the contract between the query engine and the
key-value medium that holds collections. Each collection is stored as one
array of records under its name; the engine never touches the medium
directly.

The collection store is responsible for:
- Loading a collection's full record array (insertion order)
- Replacing a collection's full record array
- Assigning identifiers to new documents
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Protocol, runtime_checkable

from docstore.domain.value_objects import DocumentId


@runtime_checkable
class CollectionStore(Protocol):
    """Protocol for collection persistence.

    Records are plain dicts in stored form (identifier under ``_id``).
    Stores must hand out copies: mutating a loaded record list must not
    change what is persisted until ``save`` is called.

    Thread Safety:
        A single ``load`` or ``save`` must not be torn. Nothing coordinates
        a load followed by a save; concurrent writers race and the last
        write replaces the whole array.
    """

    @abstractmethod
    def load(self, name: str) -> list[dict[str, Any]]:
        """Load every record of a collection.

        Args:
            name: The collection name.

        Returns:
            The records in insertion order. Unknown collections are empty.

        Raises:
            StorageError: If the stored collection cannot be decoded.
            OSError: If the medium cannot be read.
        """
        ...

    @abstractmethod
    def save(self, name: str, records: list[dict[str, Any]]) -> None:
        """Replace a collection's records.

        Args:
            name: The collection name.
            records: The full record array to persist.

        Raises:
            OSError: If the medium cannot be written.
        """
        ...

    @abstractmethod
    def next_id(self, name: str) -> DocumentId:
        """Return a fresh identifier for a document in ``name``."""
        ...

    @abstractmethod
    def list_collections(self) -> list[str]:
        """Return the names of all stored collections, sorted."""
        ...

    @abstractmethod
    def drop(self, name: str) -> bool:
        """Remove a collection.

        Returns:
            True if the collection existed.
        """
        ...
