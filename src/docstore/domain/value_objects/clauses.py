"""Query clauses.

A clause is an immutable description of one query instruction. There are
three kinds:

- predicate: ``Where(field, op, value)``
- ordering: ``OrderBy(field, direction)``
- window: ``Limit(count)`` and ``Skip(count)``

Clauses are built with the ``where``, ``order_by``, ``limit`` and ``skip``
constructors and passed variadically to the executor:

    >>> docs = executor.get_docs(people, where("age", ">", 18), order_by("name"), limit(10))
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from docstore.domain.exceptions import InvalidArgumentError, InvalidOperatorError


class Operator(str, Enum):
    """Predicate operators."""

    EQ = "=="
    NE = "!="
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="
    IN = "in"
    NOT_IN = "not-in"
    ARRAY_CONTAINS = "array-contains"
    ARRAY_CONTAINS_ANY = "array-contains-any"

    def takes_list(self) -> bool:
        """Check if the operand must be a list of candidate values."""
        return self in (
            Operator.IN,
            Operator.NOT_IN,
            Operator.ARRAY_CONTAINS,
            Operator.ARRAY_CONTAINS_ANY,
        )


class Direction(str, Enum):
    """Sort direction of an ordering clause."""

    ASC = "asc"
    DESC = "desc"


def _check_field(field: Any) -> None:
    if not isinstance(field, str) or not field:
        raise InvalidArgumentError(f"Field path must be a non-empty string, got {field!r}")


def _check_count(kind: str, count: Any) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgumentError(f"{kind} requires an integer, got {count!r}")
    if count < 0:
        raise InvalidArgumentError(f"{kind} must be non-negative, got {count}")


@dataclass(frozen=True, slots=True)
class Where:
    """Predicate clause: ``field op value``.

    List operands are stored as tuples so the clause stays immutable. A
    scalar operand for ``array-contains`` is wrapped into a one-element
    tuple.
    """

    field: str
    op: Operator
    value: Any

    def __post_init__(self) -> None:
        _check_field(self.field)
        try:
            op = Operator(self.op)
        except ValueError:
            raise InvalidOperatorError(self.op) from None
        object.__setattr__(self, "op", op)

        if op == Operator.ARRAY_CONTAINS and not isinstance(self.value, (list, tuple)):
            object.__setattr__(self, "value", (self.value,))
        elif op.takes_list():
            if not isinstance(self.value, (list, tuple)):
                raise InvalidArgumentError(
                    f"Operator '{op.value}' requires a list operand, got {self.value!r}"
                )
            object.__setattr__(self, "value", tuple(self.value))


@dataclass(frozen=True, slots=True)
class OrderBy:
    """Ordering clause: sort by ``field`` in ``direction``."""

    field: str
    direction: Direction = Direction.ASC

    def __post_init__(self) -> None:
        _check_field(self.field)
        try:
            direction = Direction(self.direction)
        except ValueError:
            raise InvalidArgumentError(
                f"Direction must be 'asc' or 'desc', got {self.direction!r}"
            ) from None
        object.__setattr__(self, "direction", direction)

    @property
    def descending(self) -> bool:
        return self.direction == Direction.DESC


@dataclass(frozen=True, slots=True)
class Limit:
    """Window clause: keep at most ``count`` documents."""

    count: int

    def __post_init__(self) -> None:
        _check_count("limit", self.count)


@dataclass(frozen=True, slots=True)
class Skip:
    """Window clause: drop the first ``count`` documents."""

    count: int

    def __post_init__(self) -> None:
        _check_count("skip", self.count)


Clause = Union[Where, OrderBy, Limit, Skip]
CLAUSE_TYPES = (Where, OrderBy, Limit, Skip)


def where(field: str, op: Operator | str, value: Any) -> Where:
    """Build a predicate clause.

    Raises:
        InvalidOperatorError: If ``op`` is not a supported operator.
        InvalidArgumentError: If the field is empty or a list operator
            gets a non-list operand.
    """
    return Where(field, op, value)  # type: ignore[arg-type]


def order_by(field: str, direction: Direction | str = Direction.ASC) -> OrderBy:
    """Build an ordering clause."""
    return OrderBy(field, direction)  # type: ignore[arg-type]


def limit(count: int) -> Limit:
    """Build a limit clause."""
    return Limit(count)


def skip(count: int) -> Skip:
    """Build a skip clause."""
    return Skip(count)
