# src/lawgens/strategies/functional.py
"""Strategies for state transitions and validations."""

from __future__ import annotations

from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from lawgens.contracts.functional import Failure, State, Success, Validation
from lawgens.strategies.containers import non_empty_list_of, resolve_max_size


def _transition_signature(state: object) -> object:
    """Signature template for generated transition functions."""


def state[S, A](states: SearchStrategy[S], results: SearchStrategy[A]) -> SearchStrategy[State[S, A]]:
    """State transitions built from generated pure functions.

    Each generated function returns the same ``(result, next_state)`` pair
    every time it is called with an equal state. Like every
    ``st.functions`` value, it can only be called inside the test that drew it.
    """
    return st.functions(
        like=_transition_signature,
        returns=st.tuples(results, states),
        pure=True,
    ).map(State.modify)


def validation[W, E, A](
    warnings: SearchStrategy[W],
    errors: SearchStrategy[E],
    values: SearchStrategy[A],
    *,
    max_size: int | None = None,
) -> SearchStrategy[Validation[W, E, A]]:
    """Validations with a warning log and either errors or a success value.

    The warning log may be empty; a Failure always carries at least one
    error. Shrinks toward a Failure with an empty log.
    """
    logs = st.lists(warnings, max_size=resolve_max_size(max_size)).map(tuple)

    def outcome(log: tuple[W, ...]) -> SearchStrategy[Validation[W, E, A]]:
        return st.one_of(
            non_empty_list_of(errors, max_size=max_size).map(lambda errs: Failure(log, errs)),
            values.map(lambda value: Success(log, value)),
        )

    return logs.flatmap(outcome)

