"""Predicate evaluation.

Evaluates ``Where`` clauses against documents. Multiple predicates combine
with logical AND; an empty predicate list matches every document.

Value semantics:
    - Equality is deep: lists and mappings compare element-wise, ints and
      floats compare numerically, booleans never equal numbers.
    - Range operators only order number/number and string/string pairs.
      Any other pairing is simply not satisfied.
    - ``array-contains`` requires every queried element to be present in
      the array field (subset containment). ``array-contains-any`` needs
      one shared element.
    - A missing field satisfies only ``not-in``.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from docstore.domain.entities import MISSING, Document
from docstore.domain.exceptions import InvalidOperatorError
from docstore.domain.value_objects import Operator, Where


def is_number(value: Any) -> bool:
    """Check for int/float, excluding bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_array(value: Any) -> bool:
    """Check for a JSON array (list or tuple)."""
    return isinstance(value, (list, tuple))


def values_equal(left: Any, right: Any) -> bool:
    """Deep equality between two JSON-compatible values."""
    if is_number(left) and is_number(right):
        return left == right
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if is_array(left) and is_array(right):
        return len(left) == len(right) and all(
            values_equal(a, b) for a, b in zip(left, right)
        )
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        return left.keys() == right.keys() and all(
            values_equal(left[k], right[k]) for k in left
        )
    if is_array(left) or is_array(right) or isinstance(left, Mapping) or isinstance(right, Mapping):
        return False
    return left == right


def contains_value(candidates: Iterable[Any], value: Any) -> bool:
    """Membership test using deep equality."""
    return any(values_equal(candidate, value) for candidate in candidates)


_RANGE_OPERATORS = (Operator.GT, Operator.GE, Operator.LT, Operator.LE)


def _compare_range(op: Operator, left: Any, right: Any) -> bool:
    if not (
        (is_number(left) and is_number(right))
        or (isinstance(left, str) and isinstance(right, str))
    ):
        return False
    if op == Operator.GT:
        return left > right
    if op == Operator.GE:
        return left >= right
    if op == Operator.LT:
        return left < right
    return left <= right


def evaluate(document: Document, predicate: Where) -> bool:
    """Evaluate a single predicate against a document.

    Raises:
        InvalidOperatorError: If the predicate carries an unknown operator.
    """
    value = document.resolve(predicate.field)
    op = predicate.op
    operand = predicate.value

    if op == Operator.NOT_IN:
        return value is MISSING or not contains_value(operand, value)
    if value is MISSING:
        return False

    if op == Operator.EQ:
        return values_equal(value, operand)
    if op == Operator.NE:
        return not values_equal(value, operand)
    if op in _RANGE_OPERATORS:
        return _compare_range(op, value, operand)
    if op == Operator.IN:
        return contains_value(operand, value)
    if op == Operator.ARRAY_CONTAINS:
        return is_array(value) and all(contains_value(value, item) for item in operand)
    if op == Operator.ARRAY_CONTAINS_ANY:
        return is_array(value) and any(contains_value(value, item) for item in operand)
    raise InvalidOperatorError(op)


def matches(document: Document, predicates: Sequence[Where]) -> bool:
    """Check that a document satisfies every predicate."""
    return all(evaluate(document, predicate) for predicate in predicates)


def filter_documents(documents: Iterable[Document], predicates: Sequence[Where]) -> list[Document]:
    """Keep the documents that satisfy every predicate, in input order."""
    if not predicates:
        return list(documents)
    return [doc for doc in documents if matches(doc, predicates)]
