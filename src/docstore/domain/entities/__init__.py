"""Domain entities for the document store.

Entities are objects with identity that have a lifecycle. Two documents with
the same fields but different identifiers are different documents.

Exports:
    - Document: A stored record with a stable identifier
    - MISSING: Sentinel for field paths that do not resolve
    - check_patch: Validation for update patches
"""

from docstore.domain.entities.document import MISSING, Document, check_patch

__all__ = [
    "Document",
    "MISSING",
    "check_patch",
]
