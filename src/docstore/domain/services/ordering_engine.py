"""Multi-key document ordering.

Ordering clauses are applied left to right as primary, secondary, ... keys.
The sort is stable, so documents that tie on every key keep their input
(insertion) order.

Each field value falls in one of three buckets, and the buckets always sort
in this order whatever the clause direction:

    numbers    -> numeric comparison
    strings    -> code-point lexicographic comparison
    the rest   -> unordered (missing, null, bool, arrays, maps); ties

Only comparisons inside the numbers or strings bucket are reversed by
``desc``. Mixed-type fields therefore never raise, ordered values stay
sorted among themselves, and unordered values keep their input order at the
end.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Sequence

from docstore.domain.entities import Document
from docstore.domain.services.predicate_engine import is_number
from docstore.domain.value_objects import OrderBy

Comparator = Callable[[Any, Any], int]

NUMBER_RANK = 0
STRING_RANK = 1
UNORDERED_RANK = 2


def value_rank(value: Any) -> int:
    """Bucket a field value for ordering."""
    if is_number(value):
        return NUMBER_RANK
    if isinstance(value, str):
        return STRING_RANK
    return UNORDERED_RANK


def _three_way(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def _by_rank(left: Any, right: Any) -> int:
    return _three_way(value_rank(left), value_rank(right))


def _no_order(left: Any, right: Any) -> int:
    return 0


def comparator_for(left: Any, right: Any) -> Comparator:
    """Pick the comparator for two field values by their type."""
    left_rank, right_rank = value_rank(left), value_rank(right)
    if left_rank != right_rank:
        return _by_rank
    if left_rank == UNORDERED_RANK:
        return _no_order
    return _three_way


def compare_documents(left: Document, right: Document, orderings: Sequence[OrderBy]) -> int:
    """Three-way comparison of two documents under the ordering clauses."""
    for clause in orderings:
        a = left.resolve(clause.field)
        b = right.resolve(clause.field)
        comparator = comparator_for(a, b)
        result = comparator(a, b)
        if result:
            if clause.descending and comparator is _three_way:
                return -result
            return result
    return 0


def sort_documents(documents: Sequence[Document], orderings: Sequence[OrderBy]) -> list[Document]:
    """Return the documents stably sorted by the ordering clauses."""
    if not orderings:
        return list(documents)
    key = cmp_to_key(lambda a, b: compare_documents(a, b, orderings))
    return sorted(documents, key=key)
