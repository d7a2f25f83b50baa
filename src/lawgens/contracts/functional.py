# src/lawgens/contracts/functional.py
"""State transitions and validations."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from lawgens.contracts.containers import NonEmptyList


@dataclass(frozen=True, slots=True)
class State[S, A]:
    """A state transition producing a result alongside the next state.

    Wraps ``S -> (A, S)``. ``run`` returns ``(next_state, result)``.
    """

    transition: Callable[[S], tuple[A, S]]

    @classmethod
    def modify(cls, transition: Callable[[S], tuple[A, S]]) -> State[S, A]:
        return cls(transition)

    def run(self, initial: S) -> tuple[S, A]:
        result, next_state = self.transition(initial)
        return next_state, result

    def run_result(self, initial: S) -> A:
        return self.transition(initial)[0]

    def run_state(self, initial: S) -> S:
        return self.transition(initial)[1]


@dataclass(frozen=True, slots=True)
class Success[W, A]:
    """A successful validation carrying accumulated warnings."""

    log: tuple[W, ...]
    value: A


@dataclass(frozen=True, slots=True)
class Failure[W, E]:
    """A failed validation: at least one error plus accumulated warnings."""

    log: tuple[W, ...]
    errors: NonEmptyList[E]


type Validation[W, E, A] = Success[W, A] | Failure[W, E]


def is_success(validation: Validation[object, object, object]) -> bool:
    return isinstance(validation, Success)
