"""Domain services - the query engine stages.

Exports:
    Predicate Engine:
        - evaluate, matches, filter_documents
        - values_equal: Deep JSON value equality
    Ordering Engine:
        - sort_documents, compare_documents, comparator_for, value_rank
    Pagination:
        - paginate
"""

from docstore.domain.services.ordering_engine import (
    comparator_for,
    compare_documents,
    sort_documents,
    value_rank,
)
from docstore.domain.services.pagination import paginate
from docstore.domain.services.predicate_engine import (
    evaluate,
    filter_documents,
    matches,
    values_equal,
)

__all__ = [
    # Predicate Engine
    "evaluate",
    "matches",
    "filter_documents",
    "values_equal",
    # Ordering Engine
    "sort_documents",
    "compare_documents",
    "comparator_for",
    "value_rank",
    # Pagination
    "paginate",
]
