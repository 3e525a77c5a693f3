"""Unit tests for domain value objects - clauses and identifiers."""

from __future__ import annotations

import dataclasses
import re

import pytest

from docstore.domain.exceptions import InvalidArgumentError, InvalidOperatorError
from docstore.domain.value_objects import (
    DOCUMENT_ID_LENGTH,
    Direction,
    Limit,
    Operator,
    OrderBy,
    Skip,
    Where,
    generate_document_id,
    limit,
    order_by,
    skip,
    where,
)


@pytest.mark.unit
class TestWhere:
    """Tests for predicate clauses."""

    def test_operator_from_string(self) -> None:
        clause = where("name", "==", "Mike")
        assert clause.op is Operator.EQ
        assert clause.field == "name"
        assert clause.value == "Mike"

    def test_operator_enum_accepted(self) -> None:
        assert where("age", Operator.GE, 18).op is Operator.GE

    @pytest.mark.parametrize("op", ["=", "contains", "$eq", "IN", ""])
    def test_unknown_operator(self, op: str) -> None:
        with pytest.raises(InvalidOperatorError) as exc_info:
            where("name", op, "Mike")
        assert exc_info.value.operator == op

    def test_invalid_operator_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            where("name", "~=", "x")

    @pytest.mark.parametrize("op", ["in", "not-in", "array-contains-any"])
    def test_list_operators_require_list(self, op: str) -> None:
        with pytest.raises(InvalidArgumentError, match="requires a list"):
            where("name", op, "Mike")

    def test_list_operand_frozen_to_tuple(self) -> None:
        names = ["Mike", "John"]
        clause = where("name", "in", names)
        names.append("Pepe")
        assert clause.value == ("Mike", "John")

    def test_array_contains_wraps_scalar(self) -> None:
        assert where("likes", "array-contains", "coffee").value == ("coffee",)

    def test_array_contains_keeps_list(self) -> None:
        clause = where("likes", "array-contains", ["potatoes", "hunger"])
        assert clause.value == ("potatoes", "hunger")

    @pytest.mark.parametrize("field", ["", None, 3])
    def test_invalid_field(self, field: object) -> None:
        with pytest.raises(InvalidArgumentError):
            where(field, "==", 1)  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        clause = where("name", "==", "Mike")
        with pytest.raises(dataclasses.FrozenInstanceError):
            clause.value = "John"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert where("a", "in", [1, 2]) == Where("a", Operator.IN, (1, 2))


@pytest.mark.unit
class TestOrderBy:
    """Tests for ordering clauses."""

    def test_default_ascending(self) -> None:
        clause = order_by("name")
        assert clause.direction is Direction.ASC
        assert not clause.descending

    def test_descending(self) -> None:
        assert order_by("age", "desc").descending

    def test_invalid_direction(self) -> None:
        with pytest.raises(InvalidArgumentError, match="asc"):
            order_by("age", "down")

    def test_invalid_field(self) -> None:
        with pytest.raises(InvalidArgumentError):
            OrderBy("")


@pytest.mark.unit
class TestWindowClauses:
    """Tests for limit and skip."""

    def test_limit(self) -> None:
        assert limit(2) == Limit(2)

    def test_skip(self) -> None:
        assert skip(0) == Skip(0)

    @pytest.mark.parametrize("factory", [limit, skip])
    def test_negative_rejected(self, factory) -> None:
        with pytest.raises(InvalidArgumentError, match="non-negative"):
            factory(-1)

    @pytest.mark.parametrize("factory", [limit, skip])
    @pytest.mark.parametrize("count", [1.5, "2", True, None])
    def test_non_integer_rejected(self, factory, count: object) -> None:
        with pytest.raises(InvalidArgumentError, match="integer"):
            factory(count)


@pytest.mark.unit
class TestDocumentId:
    """Tests for identifier generation."""

    def test_format(self) -> None:
        doc_id = generate_document_id()
        assert len(doc_id) == DOCUMENT_ID_LENGTH
        assert re.fullmatch(r"[0-9a-f]{24}", doc_id)

    def test_unique(self) -> None:
        ids = {generate_document_id() for _ in range(1000)}
        assert len(ids) == 1000
