"""File-based collection store adapter.

Implements CollectionStore using the local filesystem, the way a
local-storage directory keeps one file per key. Each collection is a JSON
array of records in its own file.

Usage:
    store = FileCollectionStore("/path/to/data")
    store.save("people", [{"_id": "a1", "name": "Mike"}])
    records = store.load("people")

Directory structure:
    data_dir/
        people.json
        orders.json
        users%2Fadmins.json
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Callable
from urllib.parse import quote, unquote

from docstore.domain.exceptions import InvalidArgumentError, StorageError
from docstore.domain.value_objects import DocumentId, generate_document_id
from docstore.infrastructure.logging import get_logger

logger = get_logger(__name__)


class FileCollectionStore:
    """File-based implementation of CollectionStore.

    Writes go to a temporary file in the same directory and are moved into
    place with ``os.replace``, so readers see either the old or the new
    array, never a partial one.

    Attributes:
        data_dir: Root directory for all collection files
    """

    def __init__(
        self,
        data_dir: str | Path,
        suffix: str = ".json",
        id_factory: Callable[[], DocumentId] = generate_document_id,
    ) -> None:
        """Initialize file storage.

        Args:
            data_dir: Root directory for storage
            suffix: File suffix for collection files
            id_factory: Callable producing new document identifiers
        """
        self._data_dir = Path(data_dir)
        self._suffix = suffix
        self._id_factory = id_factory
        self._lock = threading.Lock()

        self._data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def data_dir(self) -> Path:
        """Root data directory."""
        return self._data_dir

    def _collection_path(self, name: str) -> Path:
        """Get file path for a collection.

        Names are percent-encoded, so every distinct name gets its own file
        and the name can be read back from the file stem.
        """
        if not name:
            raise InvalidArgumentError("Collection name must not be empty")
        return self._data_dir / f"{quote(name, safe='')}{self._suffix}"

    def load(self, name: str) -> list[dict[str, Any]]:
        path = self._collection_path(name)
        with self._lock:
            if not path.exists():
                return []
            raw = path.read_text(encoding="utf-8")

        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"Collection '{name}' is not valid JSON: {e}") from e
        if not isinstance(records, list):
            raise StorageError(
                f"Collection '{name}' must hold a JSON array, got {type(records).__name__}"
            )
        return records

    def save(self, name: str, records: list[dict[str, Any]]) -> None:
        path = self._collection_path(name)
        payload = json.dumps(records, ensure_ascii=False)

        with self._lock:
            fd, tmp_name = tempfile.mkstemp(
                dir=self._data_dir, prefix=f".{path.stem}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise

        logger.debug("collection_saved", collection=name, documents=len(records))

    def next_id(self, name: str) -> DocumentId:
        return self._id_factory()

    def list_collections(self) -> list[str]:
        with self._lock:
            return sorted(
                unquote(path.stem) for path in self._data_dir.glob(f"*{self._suffix}")
            )

    def drop(self, name: str) -> bool:
        path = self._collection_path(name)
        with self._lock:
            if path.exists():
                path.unlink()
                return True
            return False

    def clear(self) -> None:
        """Delete every collection file.

        Warning: This permanently deletes all stored collections!
        """
        with self._lock:
            for path in self._data_dir.glob(f"*{self._suffix}"):
                path.unlink()
