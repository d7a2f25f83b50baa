# src/lawgens/contracts/containers.py
"""Non-empty container value types.

These carry just enough behaviour to be generated, compared and inspected
by law tests: construction from plain containers, iteration and sizing.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from lawgens.contracts.errors import EmptyCollectionError
from lawgens.contracts.natural import Natural


@dataclass(frozen=True, slots=True)
class NonEmptyList[A]:
    """An immutable list with at least one element.

    Attributes:
        head: The first element
        tail: The remaining elements, possibly empty
    """

    head: A
    tail: tuple[A, ...] = ()

    @classmethod
    def from_iterable(cls, values: Iterable[A]) -> NonEmptyList[A]:
        """Build from any iterable.

        Raises:
            EmptyCollectionError: If ``values`` yields nothing.
        """
        items = tuple(values)
        if not items:
            raise EmptyCollectionError(cls.__name__)
        return cls(items[0], items[1:])

    def __iter__(self) -> Iterator[A]:
        yield self.head
        yield from self.tail

    def __len__(self) -> int:
        return 1 + len(self.tail)

    def to_list(self) -> list[A]:
        return [self.head, *self.tail]


@dataclass(frozen=True, slots=True)
class NonEmptySet[A]:
    """An immutable set with at least one element."""

    elements: frozenset[A]

    def __post_init__(self) -> None:
        if not self.elements:
            raise EmptyCollectionError(type(self).__name__)

    @classmethod
    def from_set(cls, values: Iterable[A]) -> NonEmptySet[A]:
        """Build from any iterable, discarding duplicates.

        Raises:
            EmptyCollectionError: If ``values`` yields nothing.
        """
        return cls(frozenset(values))

    def __iter__(self) -> Iterator[A]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __contains__(self, item: object) -> bool:
        return item in self.elements


@dataclass(frozen=True, slots=True)
class NonEmptyMultiSet[A]:
    """An immutable bag: each distinct element has a positive multiplicity.

    Multiplicities are stored as a frozenset of ``(element, count)`` pairs so
    the value stays hashable.
    """

    entries: frozenset[tuple[A, Natural]]

    def __post_init__(self) -> None:
        if not self.entries:
            raise EmptyCollectionError(type(self).__name__)

    @classmethod
    def from_mapping(cls, counts: Mapping[A, int]) -> NonEmptyMultiSet[A]:
        """Build from an element -> multiplicity mapping.

        Entries with a multiplicity of zero are dropped first.

        Raises:
            EmptyCollectionError: If no entry has a positive multiplicity.
            InvalidNaturalError: If a multiplicity is negative.
        """
        entries = frozenset((element, Natural(count)) for element, count in counts.items())
        return cls(frozenset(entry for entry in entries if entry[1] > 0))

    def count(self, element: object) -> int:
        for candidate, multiplicity in self.entries:
            if candidate == element:
                return multiplicity
        return 0

    def distinct(self) -> frozenset[A]:
        return frozenset(element for element, _ in self.entries)

    def to_dict(self) -> dict[A, Natural]:
        return dict(self.entries)

    def __iter__(self) -> Iterator[A]:
        for element, multiplicity in self.entries:
            for _ in range(multiplicity):
                yield element

    def __len__(self) -> int:
        return sum(multiplicity for _, multiplicity in self.entries)
