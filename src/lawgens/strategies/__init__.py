# src/lawgens/strategies/__init__.py
"""Hypothesis strategies for lawgens value types.

Usage:
    from hypothesis import given, strategies as st
    from lawgens.strategies import par_seq, non_empty_list_of

    @given(tree=par_seq(st.none(), st.text()))
    def test_something(tree): ...
"""

from lawgens.strategies.containers import non_empty_list_of, non_empty_multi_set_of, non_empty_set_of
from lawgens.strategies.functional import state, validation
from lawgens.strategies.numeric import any_natural, natural
from lawgens.strategies.structural import par_seq, small

__all__ = [
    "any_natural",
    "natural",
    "non_empty_list_of",
    "non_empty_multi_set_of",
    "non_empty_set_of",
    "par_seq",
    "small",
    "state",
    "validation",
]
