# tests/unit/contracts/test_value_types.py
"""Unit tests for Natural, non-empty containers, State and Validation."""

from __future__ import annotations

import dataclasses

import pytest

from lawgens.contracts import (
    EmptyCollectionError,
    Failure,
    InvalidNaturalError,
    LawgensError,
    Natural,
    NonEmptyList,
    NonEmptyMultiSet,
    NonEmptySet,
    State,
    Success,
    is_success,
)

# =============================================================================
# Natural
# =============================================================================


class TestNatural:
    def test_accepts_zero_and_positive(self) -> None:
        assert Natural(0) == 0
        assert Natural(42) == 42

    def test_rejects_negative(self) -> None:
        with pytest.raises(InvalidNaturalError) as exc_info:
            Natural(-1)
        assert exc_info.value.value == -1

    def test_error_is_value_error_and_lawgens_error(self) -> None:
        with pytest.raises(ValueError):
            Natural(-5)
        with pytest.raises(LawgensError):
            Natural(-5)

    def test_constants(self) -> None:
        assert Natural.ZERO == 0
        assert Natural.ONE == 1
        assert Natural.MAX == 2**31 - 1
        assert isinstance(Natural.MAX, Natural)

    def test_repr(self) -> None:
        assert repr(Natural(7)) == "Natural(7)"

    def test_is_an_int(self) -> None:
        assert isinstance(Natural(3), int)
        assert Natural(3) + 1 == 4


# =============================================================================
# NonEmptyList
# =============================================================================


class TestNonEmptyList:
    def test_from_iterable(self) -> None:
        values = NonEmptyList.from_iterable([1, 2, 3])
        assert values.head == 1
        assert values.tail == (2, 3)
        assert list(values) == [1, 2, 3]
        assert len(values) == 3

    def test_single_element(self) -> None:
        values = NonEmptyList("a")
        assert values.to_list() == ["a"]
        assert len(values) == 1

    def test_from_empty_iterable_raises(self) -> None:
        with pytest.raises(EmptyCollectionError, match="NonEmptyList"):
            NonEmptyList.from_iterable([])

    def test_is_frozen(self) -> None:
        values = NonEmptyList(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            values.head = 2  # type: ignore[misc]


# =============================================================================
# NonEmptySet
# =============================================================================


class TestNonEmptySet:
    def test_from_set_discards_duplicates(self) -> None:
        values = NonEmptySet.from_set([1, 1, 2])
        assert len(values) == 2
        assert 1 in values
        assert 3 not in values

    def test_empty_raises(self) -> None:
        with pytest.raises(EmptyCollectionError, match="NonEmptySet"):
            NonEmptySet.from_set(set())

    def test_direct_construction_checks_emptiness(self) -> None:
        with pytest.raises(EmptyCollectionError):
            NonEmptySet(frozenset())

    def test_hashable(self) -> None:
        assert hash(NonEmptySet.from_set({1, 2})) == hash(NonEmptySet.from_set({2, 1}))


# =============================================================================
# NonEmptyMultiSet
# =============================================================================


class TestNonEmptyMultiSet:
    def test_from_mapping(self) -> None:
        bag = NonEmptyMultiSet.from_mapping({"a": 2, "b": 1})
        assert bag.count("a") == 2
        assert bag.count("b") == 1
        assert bag.count("c") == 0
        assert len(bag) == 3
        assert sorted(bag) == ["a", "a", "b"]
        assert bag.distinct() == frozenset({"a", "b"})

    def test_zero_multiplicities_are_dropped(self) -> None:
        bag = NonEmptyMultiSet.from_mapping({"a": 0, "b": 4})
        assert bag.to_dict() == {"b": 4}

    def test_all_zero_raises(self) -> None:
        with pytest.raises(EmptyCollectionError, match="NonEmptyMultiSet"):
            NonEmptyMultiSet.from_mapping({"a": 0})

    def test_empty_mapping_raises(self) -> None:
        with pytest.raises(EmptyCollectionError):
            NonEmptyMultiSet.from_mapping({})

    def test_negative_multiplicity_raises(self) -> None:
        with pytest.raises(InvalidNaturalError):
            NonEmptyMultiSet.from_mapping({"a": -1})

    def test_multiplicities_are_naturals(self) -> None:
        bag = NonEmptyMultiSet.from_mapping({"a": 3})
        assert all(isinstance(count, Natural) for count in bag.to_dict().values())


# =============================================================================
# State and Validation
# =============================================================================


class TestState:
    def test_run_returns_state_then_result(self) -> None:
        counter: State[int, str] = State.modify(lambda s: (f"saw {s}", s + 1))

        assert counter.run(1) == (2, "saw 1")
        assert counter.run_state(1) == 2
        assert counter.run_result(1) == "saw 1"


class TestValidation:
    def test_success(self) -> None:
        result = Success(("warn",), 10)
        assert is_success(result)
        assert result.log == ("warn",)

    def test_failure(self) -> None:
        result = Failure((), NonEmptyList("bad"))
        assert not is_success(result)
        assert list(result.errors) == ["bad"]

    def test_equality(self) -> None:
        assert Failure((1,), NonEmptyList("e")) == Failure((1,), NonEmptyList("e"))
        assert Success((), 1) != Success((), 2)
