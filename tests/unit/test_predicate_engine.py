"""Unit tests for the predicate engine."""

from __future__ import annotations

import itertools

import pytest

from docstore.domain.entities import Document
from docstore.domain.exceptions import InvalidOperatorError
from docstore.domain.services import evaluate, filter_documents, matches, values_equal
from docstore.domain.services.predicate_engine import is_array, is_number
from docstore.domain.value_objects import DocumentId, Operator, Where, where


def make(**fields) -> Document:
    return Document(DocumentId("doc"), fields)


@pytest.fixture
def likers() -> list[Document]:
    return [
        Document(DocumentId("mike"), {"name": "Mike", "likes": ["potatoes", "hunger"]}),
        Document(DocumentId("john"), {"name": "John", "likes": ["coffee", "potatoes"]}),
        Document(DocumentId("pfteven"), {"name": "Pfteven", "likes": ["dogs"]}),
    ]


@pytest.mark.unit
class TestEquality:
    """Tests for == and !=."""

    def test_scalar_equality(self) -> None:
        assert evaluate(make(name="Mike"), where("name", "==", "Mike"))
        assert not evaluate(make(name="John"), where("name", "==", "Mike"))

    def test_int_float_equal(self) -> None:
        assert evaluate(make(age=30), where("age", "==", 30.0))

    def test_bool_is_not_number(self) -> None:
        assert not evaluate(make(flag=True), where("flag", "==", 1))
        assert not evaluate(make(count=0), where("count", "==", False))
        assert evaluate(make(flag=True), where("flag", "==", True))

    def test_deep_equality(self) -> None:
        doc = make(address={"city": "Oslo", "tags": [1, 2]})
        assert evaluate(doc, where("address", "==", {"city": "Oslo", "tags": [1, 2]}))
        assert not evaluate(doc, where("address", "==", {"city": "Oslo", "tags": [2, 1]}))

    def test_null_equality(self) -> None:
        assert evaluate(make(nickname=None), where("nickname", "==", None))

    def test_not_equal(self) -> None:
        assert evaluate(make(name="John"), where("name", "!=", "Mike"))
        assert not evaluate(make(name="Mike"), where("name", "!=", "Mike"))

    def test_nested_field(self) -> None:
        assert evaluate(make(address={"city": "Oslo"}), where("address.city", "==", "Oslo"))

    def test_values_equal_list_vs_scalar(self) -> None:
        assert not values_equal(["a"], "a")
        assert not values_equal({"a": 1}, [("a", 1)])


@pytest.mark.unit
class TestRanges:
    """Tests for >, >=, <, <=."""

    @pytest.mark.parametrize(
        ("op", "operand", "expected"),
        [
            (">", 18, True),
            (">", 39, False),
            (">=", 39, True),
            ("<", 40, True),
            ("<", 39, False),
            ("<=", 39, True),
        ],
    )
    def test_numeric(self, op: str, operand: int, expected: bool) -> None:
        assert evaluate(make(age=39), where("age", op, operand)) is expected

    def test_lexicographic(self) -> None:
        assert evaluate(make(name="Zynosky"), where("name", ">", "Abel"))
        assert not evaluate(make(name="Abel"), where("name", ">=", "Zynosky"))

    def test_code_point_order(self) -> None:
        # Uppercase sorts before lowercase by code point
        assert evaluate(make(name="Zed"), where("name", "<", "abel"))

    def test_mixed_types_never_match(self) -> None:
        assert not evaluate(make(age="40"), where("age", ">", 18))
        assert not evaluate(make(age=40), where("age", "<", "z"))

    def test_bool_not_ordered(self) -> None:
        assert not evaluate(make(flag=True), where("flag", ">", 0))

    def test_null_not_ordered(self) -> None:
        assert not evaluate(make(age=None), where("age", "<", 100))

    @pytest.mark.parametrize("op", [">", ">=", "<", "<="])
    def test_missing_field(self, op: str) -> None:
        assert not evaluate(make(name="Mike"), where("age", op, 0))


@pytest.mark.unit
class TestSetMembership:
    """Tests for in and not-in."""

    def test_in(self) -> None:
        assert evaluate(make(name="Mike"), where("name", "in", ["Mike", "John"]))
        assert not evaluate(make(name="Pfteven"), where("name", "in", ["Mike", "John"]))

    def test_not_in(self) -> None:
        assert evaluate(make(name="Pfteven"), where("name", "not-in", ["Mike", "John"]))
        assert not evaluate(make(name="Mike"), where("name", "not-in", ["Mike", "John"]))

    def test_not_in_missing_field(self) -> None:
        assert evaluate(make(surname="Small"), where("name", "not-in", ["Mike"]))

    def test_in_missing_field(self) -> None:
        assert not evaluate(make(surname="Small"), where("name", "in", ["Mike"]))

    def test_in_uses_deep_equality(self) -> None:
        assert evaluate(make(tags=["a", "b"]), where("tags", "in", [["a", "b"], ["c"]]))
        assert not evaluate(make(flag=True), where("flag", "in", [1]))

    def test_complement(self) -> None:
        docs = [make(name=n) for n in ["Mike", "John", "Pfteven", "Abel"]]
        values = ["Mike", "Abel"]
        inside = filter_documents(docs, [where("name", "in", values)])
        outside = filter_documents(docs, [where("name", "not-in", values)])
        assert len(inside) + len(outside) == len(docs)


@pytest.mark.unit
class TestArrayOperators:
    """Tests for array-contains and array-contains-any."""

    def test_array_contains_requires_all(self, likers: list[Document]) -> None:
        result = filter_documents(likers, [where("likes", "array-contains", ["potatoes", "hunger"])])
        assert [d["name"] for d in result] == ["Mike"]

    def test_array_contains_single(self, likers: list[Document]) -> None:
        result = filter_documents(likers, [where("likes", "array-contains", "potatoes")])
        assert [d["name"] for d in result] == ["Mike", "John"]

    def test_array_contains_any(self, likers: list[Document]) -> None:
        result = filter_documents(
            likers, [where("likes", "array-contains-any", ["potatoes", "hunger"])]
        )
        assert [d["name"] for d in result] == ["Mike", "John"]

    def test_array_contains_any_no_overlap(self, likers: list[Document]) -> None:
        result = filter_documents(likers, [where("likes", "array-contains-any", ["cats"])])
        assert result == []

    def test_non_array_field(self) -> None:
        doc = make(likes="potatoes")
        assert not evaluate(doc, where("likes", "array-contains", "potatoes"))
        assert not evaluate(doc, where("likes", "array-contains-any", ["potatoes"]))

    def test_missing_array_field(self) -> None:
        assert not evaluate(make(name="Mike"), where("likes", "array-contains", ["x"]))


@pytest.mark.unit
class TestConjunction:
    """Tests for combining predicates."""

    def test_empty_matches_all(self) -> None:
        assert matches(make(), [])

    def test_multiple_where(self) -> None:
        docs = [
            Document(DocumentId("a"), {"name": "Mike", "surname": "Small", "age": 18}),
            Document(DocumentId("b"), {"name": "Mike", "surname": "Big", "age": 39}),
        ]
        result = filter_documents(docs, [where("name", "==", "Mike"), where("age", ">", 18)])
        assert [d["surname"] for d in result] == ["Big"]

    def test_conjunction_property(self) -> None:
        docs = [make(name=n, age=a) for n, a in itertools.product(["Mike", "John"], [18, 30, 45])]
        p1 = [where("name", "==", "Mike")]
        p2 = [where("age", ">=", 30), where("age", "!=", 45)]
        for doc in docs:
            assert matches(doc, p1 + p2) == (matches(doc, p1) and matches(doc, p2))

    def test_order_independent(self) -> None:
        doc = make(name="Mike", age=40)
        a = where("name", "==", "Mike")
        b = where("age", "<", 30)
        assert matches(doc, [a, b]) == matches(doc, [b, a])

    def test_filter_preserves_order(self) -> None:
        docs = [Document(DocumentId(str(i)), {"n": i}) for i in range(6)]
        result = filter_documents(docs, [where("n", "in", [4, 1, 3])])
        assert [d["n"] for d in result] == [1, 3, 4]


@pytest.mark.unit
def test_unknown_operator_at_evaluation() -> None:
    """A clause smuggling a bad operator past construction is rejected."""
    clause = Where("name", Operator.EQ, "Mike")
    object.__setattr__(clause, "op", "~=")
    with pytest.raises(InvalidOperatorError):
        evaluate(make(name="Mike"), clause)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "array", "number"),
    [([1], True, False), ((1, 2), True, False), ("ab", False, False), (3, False, True),
     (2.5, False, True), (True, False, False), (None, False, False), ({"a": 1}, False, False)],
)
def test_value_type_helpers(value: object, array: bool, number: bool) -> None:
    assert is_array(value) is array
    assert is_number(value) is number
