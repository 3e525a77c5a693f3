"""Error types raised by the document store.

All errors are raised synchronously where the misuse happens. Absence of a
document is not an error: single-document operations return ``None``.
"""

from __future__ import annotations


class DocStoreError(Exception):
    """Base class for document store errors."""


class InvalidOperatorError(DocStoreError, ValueError):
    """Raised when a predicate uses an unsupported operator."""

    def __init__(self, operator: object) -> None:
        self.operator = operator
        super().__init__(f"Unsupported operator: {operator!r}")


class InvalidArgumentError(DocStoreError, ValueError):
    """Raised for malformed clauses, negative windows or bad patches."""


class StorageError(DocStoreError):
    """Raised when a persisted collection cannot be decoded."""
