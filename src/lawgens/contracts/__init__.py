# src/lawgens/contracts/__init__.py
"""Value types generated by lawgens strategies.

This package is a leaf module: it depends on nothing else in lawgens and
carries no Hypothesis imports, so law suites can use the types directly.
"""

from lawgens.contracts.containers import NonEmptyList, NonEmptyMultiSet, NonEmptySet
from lawgens.contracts.errors import (
    EmptyCollectionError,
    InvalidNaturalError,
    InvalidSizeError,
    LawgensError,
    NaturalRangeError,
)
from lawgens.contracts.functional import Failure, State, Success, Validation, is_success
from lawgens.contracts.natural import Natural
from lawgens.contracts.par_seq import (
    EMPTY,
    Both,
    Empty,
    ParSeq,
    Single,
    Then,
    branch_count,
    fold,
    is_leaf,
    leaf_count,
    leaves,
)

__all__ = [
    "EMPTY",
    "Both",
    "Empty",
    "EmptyCollectionError",
    "Failure",
    "InvalidNaturalError",
    "InvalidSizeError",
    "LawgensError",
    "Natural",
    "NaturalRangeError",
    "NonEmptyList",
    "NonEmptyMultiSet",
    "NonEmptySet",
    "ParSeq",
    "Single",
    "State",
    "Success",
    "Then",
    "Validation",
    "branch_count",
    "fold",
    "is_leaf",
    "is_success",
    "leaf_count",
    "leaves",
]
