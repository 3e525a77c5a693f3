"""Outbound adapters - implementations of outbound ports.

These adapters implement the CollectionStore port over a concrete
medium: process memory or a directory of JSON files.
"""

from docstore.adapters.outbound.file_store import FileCollectionStore
from docstore.adapters.outbound.memory_store import InMemoryCollectionStore

__all__ = [
    "FileCollectionStore",
    "InMemoryCollectionStore",
]
