"""Identifiers for documents and the reserved identifier field."""

from __future__ import annotations

import os
import time
from typing import NewType


DocumentId = NewType("DocumentId", str)
"""Unique identifier of a document. Never changes after creation."""

ID_FIELD = "_id"
"""Key under which the identifier is persisted alongside the fields."""

DOCUMENT_ID_LENGTH = 24


def generate_document_id() -> DocumentId:
    """Generate a 24-char hex identifier similar to a Mongo ObjectId.

    The first 8 hex digits encode the creation time in seconds, the rest
    are random.

    Example:
        >>> len(generate_document_id())
        24
    """
    timestamp = int(time.time()) & 0xFFFFFFFF
    return DocumentId(f"{timestamp:08x}{os.urandom(8).hex()}")
