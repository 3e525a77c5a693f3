"""
docstore - Embedded Document Store Query Layer

Persists JSON-like documents into named collections on a key-value backing
store and queries them through a Firestore-like surface: where, order_by,
limit and skip clauses over get/update/delete operations.
"""

__version__ = "0.1.0"

from docstore.api import (  # noqa: E402
    add_doc,
    collection,
    configure,
    count_docs,
    delete_doc,
    delete_docs,
    get_doc,
    get_docs,
    get_executor,
    limit,
    order_by,
    skip,
    update_doc,
    update_docs,
    use_store,
    where,
)

__all__ = [
    "__version__",
    "collection",
    "where",
    "order_by",
    "limit",
    "skip",
    "add_doc",
    "get_docs",
    "get_doc",
    "count_docs",
    "update_docs",
    "update_doc",
    "delete_docs",
    "delete_doc",
    "configure",
    "use_store",
    "get_executor",
]
