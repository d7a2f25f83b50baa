# src/lawgens/strategies/structural.py
"""Size-directed recursive strategies for cause trees.

``par_seq`` builds ParSeq trees with an exact number of leaves. The size is
either fixed by the caller or drawn by ``small``; from there the builder
splits it recursively until every subtree is a single leaf:

- size 1: an EMPTY leaf or a Single failure leaf, equally likely
- size n > 1: a Then or Both branch, equally likely, whose left subtree has
  ``i`` leaves and right subtree ``n - i`` leaves, with ``i`` uniform over
  ``[1, n - 1]``

Every subtree strategy is wrapped in ``st.deferred`` so nothing below the
root is constructed until Hypothesis actually draws from it. Shrinking comes
from the composed primitives: the drawn size shrinks toward 1 (a leaf), and
split points and leaf payloads shrink independently.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import cache

from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from lawgens.contracts.errors import InvalidSizeError
from lawgens.contracts.par_seq import EMPTY, Both, ParSeq, Single, Then
from lawgens.core.config import get_settings


def small[T](
    build: Callable[[int], SearchStrategy[T]],
    min_size: int = 1,
    *,
    max_size: int | None = None,
) -> SearchStrategy[T]:
    """Draw a size in ``[min_size, max_size]`` and hand it to ``build``.

    The size integer shrinks toward ``min_size``.

    Args:
        build: Maps a size to the strategy to draw from
        min_size: Smallest size ever passed to ``build``
        max_size: Largest size; defaults to the configured ``max_tree_size``

    Raises:
        InvalidSizeError: If ``min_size`` is negative or ``max_size`` is
            below ``min_size``.
    """
    if max_size is None:
        max_size = get_settings().max_tree_size
    if min_size < 0:
        raise InvalidSizeError(min_size, 0)
    if max_size < min_size:
        raise InvalidSizeError(max_size, min_size)
    return st.integers(min_value=min_size, max_value=max_size).flatmap(build)


def par_seq[A](
    empty: SearchStrategy[object],
    failure: SearchStrategy[A],
    *,
    size: int | None = None,
    max_size: int | None = None,
) -> SearchStrategy[ParSeq[A]]:
    """Strategy for ParSeq trees.

    Args:
        empty: Drives the EMPTY leaf; its values are discarded
        failure: Values wrapped into Single leaves
        size: Exact number of leaves; drawn by ``small`` when omitted
        max_size: Upper bound for the drawn size (ignored when ``size`` is set)

    Raises:
        InvalidSizeError: If ``size`` is below 1.
    """
    failure_leaf = failure.map(Single)
    empty_leaf = empty.map(lambda _: EMPTY)

    def branch(n: int, combine: Callable[[ParSeq[A], ParSeq[A]], ParSeq[A]]) -> SearchStrategy[ParSeq[A]]:
        return st.deferred(
            lambda: st.integers(min_value=1, max_value=n - 1)
            .flatmap(lambda i: st.tuples(par_seq_n(i), par_seq_n(n - i)))
            .map(lambda children: combine(*children))
        )

    @cache
    def par_seq_n(n: int) -> SearchStrategy[ParSeq[A]]:
        if n == 1:
            return st.deferred(lambda: st.one_of(empty_leaf, failure_leaf))
        return st.deferred(lambda: st.one_of(branch(n, Then), branch(n, Both)))

    if size is not None:
        if size < 1:
            raise InvalidSizeError(size, 1)
        return par_seq_n(size)
    return small(par_seq_n, 1, max_size=max_size)
