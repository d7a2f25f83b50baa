# src/lawgens/strategies/containers.py
"""Strategies for non-empty containers."""

from __future__ import annotations

from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from lawgens.contracts.containers import NonEmptyList, NonEmptyMultiSet, NonEmptySet
from lawgens.contracts.errors import InvalidSizeError
from lawgens.core.config import get_settings
from lawgens.strategies.numeric import natural


def resolve_max_size(max_size: int | None) -> int | None:
    """Explicit ``max_size`` if given, else the configured collection bound."""
    if max_size is None:
        return get_settings().max_collection_size
    if max_size < 1:
        raise InvalidSizeError(max_size, 1)
    return max_size


def non_empty_list_of[A](elements: SearchStrategy[A], *, max_size: int | None = None) -> SearchStrategy[NonEmptyList[A]]:
    return st.lists(elements, min_size=1, max_size=resolve_max_size(max_size)).map(NonEmptyList.from_iterable)


def non_empty_set_of[A](elements: SearchStrategy[A], *, max_size: int | None = None) -> SearchStrategy[NonEmptySet[A]]:
    """Non-empty sets; ``elements`` must produce hashable values."""
    return st.frozensets(elements, min_size=1, max_size=resolve_max_size(max_size)).map(NonEmptySet.from_set)


def non_empty_multi_set_of[A](
    elements: SearchStrategy[A],
    *,
    max_size: int | None = None,
    max_multiplicity: int | None = None,
) -> SearchStrategy[NonEmptyMultiSet[A]]:
    """Non-empty bags.

    Draws at least one distinct element, each with a multiplicity in
    ``[1, max_multiplicity]`` (the configured bound when omitted).
    ``max_size`` bounds the number of distinct elements.
    """
    if max_multiplicity is None:
        max_multiplicity = get_settings().max_multiplicity
    return st.dictionaries(
        elements,
        natural(1, max_multiplicity),
        min_size=1,
        max_size=resolve_max_size(max_size),
    ).map(NonEmptyMultiSet.from_mapping)
