# src/lawgens/contracts/par_seq.py
"""Parallel/sequential cause trees.

A ParSeq is a binary tree whose leaves are either ``EMPTY`` or a ``Single``
failure value, and whose branches compose two subtrees sequentially
(``Then``) or in parallel (``Both``).

Tree invariant: a tree with ``n`` leaves has exactly ``n - 1`` branches.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Empty:
    """Leaf with no payload. Use the ``EMPTY`` singleton."""

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = Empty()


@dataclass(frozen=True, slots=True)
class Single[A]:
    """Leaf carrying one failure value."""

    value: A


@dataclass(frozen=True, slots=True)
class Then[A]:
    """Sequential composition: ``left`` happened before ``right``."""

    left: ParSeq[A]
    right: ParSeq[A]


@dataclass(frozen=True, slots=True)
class Both[A]:
    """Parallel composition: ``left`` and ``right`` happened concurrently."""

    left: ParSeq[A]
    right: ParSeq[A]


type ParSeq[A] = Empty | Single[A] | Then[A] | Both[A]


def is_leaf(tree: ParSeq[object]) -> bool:
    return isinstance(tree, (Empty, Single))


def fold[A, B](
    tree: ParSeq[A],
    empty: B,
    single: Callable[[A], B],
    then: Callable[[B, B], B],
    both: Callable[[B, B], B],
) -> B:
    """Collapse a tree bottom-up.

    Args:
        tree: Tree to fold
        empty: Value for each ``EMPTY`` leaf
        single: Applied to the payload of each ``Single`` leaf
        then: Combines the folded children of a ``Then`` branch
        both: Combines the folded children of a ``Both`` branch
    """
    match tree:
        case Empty():
            return empty
        case Single(value):
            return single(value)
        case Then(left, right):
            return then(fold(left, empty, single, then, both), fold(right, empty, single, then, both))
        case Both(left, right):
            return both(fold(left, empty, single, then, both), fold(right, empty, single, then, both))
    raise TypeError(f"Not a ParSeq: {type(tree).__name__}")


def leaves[A](tree: ParSeq[A]) -> Iterator[Empty | Single[A]]:
    """Yield leaves left to right."""
    stack: list[ParSeq[A]] = [tree]
    while stack:
        node = stack.pop()
        if isinstance(node, (Then, Both)):
            stack.append(node.right)
            stack.append(node.left)
        else:
            yield node


def leaf_count(tree: ParSeq[object]) -> int:
    return sum(1 for _ in leaves(tree))


def branch_count(tree: ParSeq[object]) -> int:
    count = 0
    stack: list[ParSeq[object]] = [tree]
    while stack:
        node = stack.pop()
        if isinstance(node, (Then, Both)):
            count += 1
            stack.extend((node.left, node.right))
    return count
