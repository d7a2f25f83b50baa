# src/lawgens/contracts/natural.py
"""Natural numbers: integers known to be non-negative."""

from __future__ import annotations

from typing import ClassVar

from lawgens.contracts.errors import InvalidNaturalError


class Natural(int):
    """An ``int`` that is guaranteed to be ``>= 0``.

    Arithmetic on a Natural returns a plain ``int``; only construction is
    checked. ``Natural.MAX`` is the largest 32-bit signed integer, which keeps
    generated values portable across the law suites that consume them.
    """

    __slots__ = ()

    ZERO: ClassVar[Natural]
    ONE: ClassVar[Natural]
    MAX: ClassVar[Natural]

    def __new__(cls, value: int) -> Natural:
        if value < 0:
            raise InvalidNaturalError(value)
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Natural({int(self)})"


Natural.ZERO = Natural(0)
Natural.ONE = Natural(1)
Natural.MAX = Natural(2**31 - 1)
