"""Value objects for the document store domain.

Value objects are immutable types that represent domain concepts.
They have no identity - two value objects with the same attributes are equal.

Exports:
    Identifiers:
        - DocumentId: Type-safe document identifier
        - ID_FIELD: Reserved key holding the identifier in stored records
        - generate_document_id: ObjectId-like identifier factory

    Clauses:
        - Where, OrderBy, Limit, Skip: Clause variants
        - Operator, Direction: Predicate operators and sort directions
        - where, order_by, limit, skip: Clause constructors
"""

from docstore.domain.value_objects.clauses import (
    CLAUSE_TYPES,
    Clause,
    Direction,
    Limit,
    Operator,
    OrderBy,
    Skip,
    Where,
    limit,
    order_by,
    skip,
    where,
)
from docstore.domain.value_objects.identifiers import (
    DOCUMENT_ID_LENGTH,
    ID_FIELD,
    DocumentId,
    generate_document_id,
)

__all__ = [
    # Identifiers
    "DocumentId",
    "ID_FIELD",
    "DOCUMENT_ID_LENGTH",
    "generate_document_id",
    # Clauses
    "Clause",
    "CLAUSE_TYPES",
    "Where",
    "OrderBy",
    "Limit",
    "Skip",
    "Operator",
    "Direction",
    "where",
    "order_by",
    "limit",
    "skip",
]
