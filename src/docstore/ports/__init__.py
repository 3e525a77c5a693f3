"""Ports layer - interface definitions following Hexagonal Architecture.

Ports are abstract interfaces (protocols) that define contracts. The query
engine only has outbound dependencies: the Collection Store that loads and
saves a collection's record array.

Adapters implement these ports with concrete functionality.
"""

from docstore.ports.outbound import CollectionStore

__all__ = [
    "CollectionStore",
]
