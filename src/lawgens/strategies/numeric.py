# src/lawgens/strategies/numeric.py
"""Natural number strategies."""

from __future__ import annotations

from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from lawgens.contracts.errors import NaturalRangeError
from lawgens.contracts.natural import Natural


def natural(min_value: int, max_value: int) -> SearchStrategy[Natural]:
    """Naturals in ``[min_value, max_value]``, shrinking toward ``min_value``.

    Raises:
        InvalidNaturalError: If either bound is negative.
        NaturalRangeError: If ``min_value > max_value``.
    """
    low, high = Natural(min_value), Natural(max_value)
    if low > high:
        raise NaturalRangeError(low, high)
    return st.integers(min_value=int(low), max_value=int(high)).map(Natural)


# All naturals up to Natural.MAX, shrinking toward zero
any_natural = natural(Natural.ZERO, Natural.MAX)
