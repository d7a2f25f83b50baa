# src/lawgens/contracts/errors.py
"""Error types for lawgens.

Every error here signals a programmer mistake: a strategy or value built from
arguments that can never be valid. They are raised eagerly, at construction
time, and are not meant to be caught and recovered from.
"""

from __future__ import annotations


class LawgensError(Exception):
    """Base class for all lawgens errors."""


class InvalidNaturalError(LawgensError, ValueError):
    """Raised when a Natural is constructed from a negative integer."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Natural must be >= 0, got {value}")


class NaturalRangeError(LawgensError, ValueError):
    """Raised when a natural range has its lower bound above its upper bound."""

    def __init__(self, min_value: int, max_value: int) -> None:
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(f"Empty natural range: min {min_value} > max {max_value}")


class EmptyCollectionError(LawgensError, ValueError):
    """Raised when a non-empty container is built from an empty input.

    Attributes:
        container: Name of the container type being built (e.g. "NonEmptyList").
    """

    def __init__(self, container: str) -> None:
        self.container = container
        super().__init__(f"{container} requires at least one element")


class InvalidSizeError(LawgensError, ValueError):
    """Raised when a size-directed strategy is asked for a size below its floor."""

    def __init__(self, size: int, floor: int) -> None:
        self.size = size
        self.floor = floor
        super().__init__(f"Size must be >= {floor}, got {size}")
