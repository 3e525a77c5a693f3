"""Document entity.

A document is a mapping of field names to JSON-compatible values plus an
identifier assigned when it is added to a collection. The identifier is
stable for the life of the document; the fields change through updates.

Stored form (one element of a collection's record array):

    {"_id": "65f0c1a2b3c4d5e6f7a8b9c0", "name": "Mike", "likes": ["coffee"]}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from docstore.domain.exceptions import InvalidArgumentError, StorageError
from docstore.domain.value_objects import ID_FIELD, DocumentId


class _Missing:
    """Sentinel for a field path that does not resolve."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def check_patch(patch: Any) -> dict[str, Any]:
    """Validate an update patch and return it as a plain dict.

    Raises:
        InvalidArgumentError: If the patch is not a mapping, has non-string
            keys, or tries to overwrite the identifier.
    """
    if not isinstance(patch, Mapping):
        raise InvalidArgumentError(f"Patch must be a mapping, got {type(patch).__name__}")
    for key in patch:
        if not isinstance(key, str):
            raise InvalidArgumentError(f"Field names must be strings, got {key!r}")
    if ID_FIELD in patch:
        raise InvalidArgumentError(f"Field '{ID_FIELD}' is reserved for the document id")
    return dict(patch)


@dataclass
class Document:
    """A document read from a collection.

    Fields can be read by name or by dotted path into nested mappings:

        >>> doc = Document(DocumentId("a1"), {"name": "Mike", "address": {"city": "Oslo"}})
        >>> doc["address.city"]
        'Oslo'
        >>> doc.get("age") is None
        True
    """

    id: DocumentId
    data: dict[str, Any] = field(default_factory=dict)

    def resolve(self, path: str) -> Any:
        """Look up a field path, returning ``MISSING`` if it does not resolve.

        A path equal to a top-level key wins over a dotted walk, so fields
        whose names contain dots stay addressable.
        """
        if path == ID_FIELD:
            return self.id
        if path in self.data:
            return self.data[path]
        if "." not in path:
            return MISSING
        current: Any = self.data
        for part in path.split("."):
            if isinstance(current, Mapping) and part in current:
                current = current[part]
            else:
                return MISSING
        return current

    def __getitem__(self, path: str) -> Any:
        value = self.resolve(path)
        if value is MISSING:
            raise KeyError(path)
        return value

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.resolve(path) is not MISSING

    def get(self, path: str, default: Any = None) -> Any:
        value = self.resolve(path)
        return default if value is MISSING else value

    def merged(self, patch: Mapping[str, Any]) -> Document:
        """Return a copy with ``patch`` shallow-merged over the fields."""
        return Document(id=self.id, data={**self.data, **check_patch(patch)})

    def to_record(self) -> dict[str, Any]:
        """Convert to the stored form."""
        return {ID_FIELD: self.id, **self.data}

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Document:
        """Build a document from its stored form.

        Raises:
            StorageError: If the record is not a mapping or lacks a string id.
        """
        if not isinstance(record, Mapping):
            raise StorageError(f"Stored document must be an object, got {type(record).__name__}")
        doc_id = record.get(ID_FIELD)
        if not isinstance(doc_id, str):
            raise StorageError(f"Stored document has no '{ID_FIELD}': {record!r}")
        data = {k: v for k, v in record.items() if k != ID_FIELD}
        return cls(id=DocumentId(doc_id), data=data)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k}={v!r}" for k, v in self.data.items())
        return f"Document({self.id}: {pairs})"
